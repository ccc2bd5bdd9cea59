from unittest.mock import AsyncMock

import pytest
from core.errors import UnknownWorkflowError
from orchestration.controller import ReviewController
from orchestration.workflow_manager import WorkflowManager
from review_modules import build_default_modules

from models import ModuleStatus


@pytest.fixture
def controller(activity_log, review_context):
    controller = ReviewController(activity_log)
    for module in build_default_modules(review_context):
        controller.register_module(module)
    return controller


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method,expected_count",
    [
        ("run_comprehensive_analysis", 10),
        ("run_factual_integrity_workflow", 3),
        ("run_ethical_review_workflow", 3),
        ("run_reader_experience_workflow", 4),
        ("run_publication_prep_workflow", 4),
    ],
)
async def test_preset_shortcuts(controller, fake_provider, sample_article, method, expected_count):
    fake_provider.response = "Nothing structured."
    manager = WorkflowManager(controller)

    result = await getattr(manager, method)(sample_article)

    assert len(result.results) == expected_count
    assert fake_provider.call_count == expected_count
    assert result.status is ModuleStatus.WARNING


@pytest.mark.asyncio
async def test_run_preset_logs_start(controller, activity_log, sample_article):
    manager = WorkflowManager(controller, activity_log)
    controller.run_workflow = AsyncMock()

    await manager.run_preset("ethical-review", sample_article)

    workflow = controller.run_workflow.await_args.args[1]
    assert workflow.modules[0] == "EthicalGuardian"
    assert any(
        entry.message == "Starting ethical-review workflow"
        for entry in activity_log.get_logs(module_id="WorkflowManager")
    )


@pytest.mark.asyncio
async def test_run_preset_unknown_name(controller, sample_article):
    with pytest.raises(UnknownWorkflowError):
        await WorkflowManager(controller).run_preset("missing", sample_article)


@pytest.mark.asyncio
async def test_custom_workflow_parallel(controller, fake_provider, sample_article):
    fake_provider.response = "OVERALL_COHERENCE: STRONG\nOVERALL_CLARITY: CLEAR"
    manager = WorkflowManager(controller)

    result = await manager.run_custom_workflow(
        sample_article,
        ["PlotLogicBuilder", "SimulatedFeedbackReader"],
        sequential=False,
    )

    assert [r.module_id for r in result.results] == [
        "PlotLogicBuilder",
        "SimulatedFeedbackReader",
    ]
    assert result.status is ModuleStatus.SUCCESS

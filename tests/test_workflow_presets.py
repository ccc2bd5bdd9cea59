import pytest
from core.errors import UnknownWorkflowError
from orchestration.workflow_presets import (
    PRESET_NAMES,
    create_custom_workflow,
    get_preset,
)
from review_modules import ALL_MODULE_IDS

from models import ModuleOptions


def test_preset_names():
    assert PRESET_NAMES == (
        "comprehensive",
        "factual-integrity",
        "ethical-review",
        "reader-experience",
        "publication-prep",
    )


@pytest.mark.parametrize(
    "name,modules",
    [
        ("comprehensive", list(ALL_MODULE_IDS)),
        (
            "factual-integrity",
            ["FactCheckLayer", "HallucinationFilter", "PromptTraceability"],
        ),
        (
            "ethical-review",
            ["EthicalGuardian", "ToneAndAudienceModulator", "PromptTraceability"],
        ),
        (
            "reader-experience",
            [
                "ToneAndAudienceModulator",
                "PlotLogicBuilder",
                "SimulatedFeedbackReader",
                "PromptTraceability",
            ],
        ),
        (
            "publication-prep",
            [
                "WYSIWYGLayoutPreview",
                "ChapterImageGallery",
                "SmartExportEngine",
                "PromptTraceability",
            ],
        ),
    ],
)
def test_preset_contents(name, modules):
    preset = get_preset(name)
    assert preset.modules == modules
    assert preset.sequential is True
    assert preset.stop_on_error is False


def test_presets_are_fresh_copies():
    first = get_preset("factual-integrity")
    first.modules.append("EthicalGuardian")
    assert "EthicalGuardian" not in get_preset("factual-integrity").modules


def test_unknown_preset_raises():
    with pytest.raises(UnknownWorkflowError) as exc_info:
        get_preset("nonsense")
    assert isinstance(exc_info.value, KeyError)
    assert str(exc_info.value) == "Workflow preset nonsense not found"


def test_create_custom_workflow():
    options = {"FactCheckLayer": ModuleOptions(model="gpt-4o")}
    workflow = create_custom_workflow(
        ["FactCheckLayer"], sequential=False, stop_on_error=True, module_options=options
    )
    assert workflow.modules == ["FactCheckLayer"]
    assert workflow.sequential is False
    assert workflow.stop_on_error is True
    assert workflow.options_for("FactCheckLayer").model == "gpt-4o"
    assert workflow.options_for("EthicalGuardian") is None

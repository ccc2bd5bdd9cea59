# orchestration/workflow_manager.py
"""Convenience entry points for the preset review workflows."""

from __future__ import annotations

from core.activity_log import ActivityLog

from models import ContentInput, ModuleOptions, WorkflowResult
from orchestration.controller import ReviewController
from orchestration.workflow_presets import (
    COMPREHENSIVE,
    ETHICAL_REVIEW,
    FACTUAL_INTEGRITY,
    PUBLICATION_PREP,
    READER_EXPERIENCE,
    create_custom_workflow,
    get_preset,
)

WORKFLOW_LOG_ID = "WorkflowManager"


class WorkflowManager:
    def __init__(
        self, controller: ReviewController, log: ActivityLog | None = None
    ) -> None:
        self.controller = controller
        self.log = log if log is not None else controller.log

    async def run_preset(self, name: str, content_input: ContentInput) -> WorkflowResult:
        workflow = get_preset(name)
        self.log.info(WORKFLOW_LOG_ID, f"Starting {name} workflow")
        return await self.controller.run_workflow(content_input, workflow)

    async def run_comprehensive_analysis(
        self, content_input: ContentInput
    ) -> WorkflowResult:
        return await self.run_preset(COMPREHENSIVE, content_input)

    async def run_factual_integrity_workflow(
        self, content_input: ContentInput
    ) -> WorkflowResult:
        return await self.run_preset(FACTUAL_INTEGRITY, content_input)

    async def run_ethical_review_workflow(
        self, content_input: ContentInput
    ) -> WorkflowResult:
        return await self.run_preset(ETHICAL_REVIEW, content_input)

    async def run_reader_experience_workflow(
        self, content_input: ContentInput
    ) -> WorkflowResult:
        return await self.run_preset(READER_EXPERIENCE, content_input)

    async def run_publication_prep_workflow(
        self, content_input: ContentInput
    ) -> WorkflowResult:
        return await self.run_preset(PUBLICATION_PREP, content_input)

    async def run_custom_workflow(
        self,
        content_input: ContentInput,
        modules: list[str],
        sequential: bool = True,
        stop_on_error: bool = False,
        module_options: dict[str, ModuleOptions] | None = None,
    ) -> WorkflowResult:
        workflow = create_custom_workflow(
            modules, sequential, stop_on_error, module_options
        )
        self.log.info(
            WORKFLOW_LOG_ID,
            "Starting custom workflow",
            {"modules": list(modules), "sequential": sequential},
        )
        return await self.controller.run_workflow(content_input, workflow)

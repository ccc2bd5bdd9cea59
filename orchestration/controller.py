# orchestration/controller.py
"""Registry of review modules and the workflow runner built on top of it."""

from __future__ import annotations

import asyncio
import uuid

from config import settings
from core.activity_log import ActivityLog
from core.errors import UnknownModuleError
from review_modules import ReviewModule

from models import (
    ContentInput,
    ModuleMetadata,
    ModuleOptions,
    ModuleResult,
    ModuleStatus,
    WorkflowOptions,
    WorkflowResult,
    utc_timestamp,
    worst_status,
)

CONTROLLER_LOG_ID = "ContentGuardianController"


class ReviewController:
    """Keeps modules by id and runs them alone or as a workflow."""

    def __init__(self, log: ActivityLog | None = None) -> None:
        self.log = log if log is not None else ActivityLog()
        self._modules: dict[str, ReviewModule] = {}

    def register_module(self, module: ReviewModule) -> None:
        if module.module_id in self._modules:
            self.log.warning(
                CONTROLLER_LOG_ID,
                f"Module {module.module_id} already registered. Overwriting.",
            )
        self._modules[module.module_id] = module
        self.log.info(CONTROLLER_LOG_ID, f"Registered module: {module.module_id}")

    def get_module(self, module_id: str) -> ReviewModule | None:
        return self._modules.get(module_id)

    def get_all_modules(self) -> list[ReviewModule]:
        return list(self._modules.values())

    def describe_modules(self) -> list[dict[str, str]]:
        return [
            {"id": module.module_id, "description": module.description}
            for module in self._modules.values()
        ]

    async def run_module(
        self,
        module_id: str,
        content_input: ContentInput,
        options: ModuleOptions | None = None,
    ) -> ModuleResult:
        """Run one registered module.

        Raises:
            UnknownModuleError: ``module_id`` is not registered.
        """
        module = self._modules.get(module_id)
        if module is None:
            self.log.error(CONTROLLER_LOG_ID, f"Module {module_id} not found")
            raise UnknownModuleError(module_id)

        self.log.info(CONTROLLER_LOG_ID, f"Running module: {module_id}")
        try:
            result = await module.process(content_input, options)
        except Exception as exc:
            self.log.error(CONTROLLER_LOG_ID, f"Error running module {module_id}", exc)
            return ModuleResult(
                module_id=module_id,
                status=ModuleStatus.ERROR,
                report=f"Error running module: {exc}",
                metadata=ModuleMetadata(
                    timestamp=utc_timestamp(),
                    prompt_used=(options.custom_prompt if options else None)
                    or "default",
                    model_version=(options.model if options else None)
                    or settings.DEFAULT_MODEL,
                ),
            )
        self.log.info(
            CONTROLLER_LOG_ID,
            f"Module {module_id} completed with status: {result.status.value}",
        )
        return result

    async def run_workflow(
        self, content_input: ContentInput, workflow_options: WorkflowOptions
    ) -> WorkflowResult:
        workflow_id = str(uuid.uuid4())
        timestamp = utc_timestamp()
        self.log.info(
            CONTROLLER_LOG_ID,
            f"Starting workflow {workflow_id}",
            {
                "modules": list(workflow_options.modules),
                "sequential": workflow_options.sequential,
            },
        )

        if workflow_options.sequential:
            results, forced_error = await self._run_sequential(
                content_input, workflow_options
            )
        else:
            results, forced_error = await self._run_parallel(
                content_input, workflow_options
            )

        status = worst_status(
            [r.status for r in results] + ([ModuleStatus.ERROR] if forced_error else [])
        )
        summary = self._generate_summary(results)
        self.log.info(
            CONTROLLER_LOG_ID,
            f"Workflow {workflow_id} completed with status: {status.value}",
        )
        return WorkflowResult(
            workflow_id=workflow_id,
            timestamp=timestamp,
            status=status,
            results=results,
            summary=summary,
        )

    async def _run_sequential(
        self, content_input: ContentInput, workflow_options: WorkflowOptions
    ) -> tuple[list[ModuleResult], bool]:
        results: list[ModuleResult] = []
        forced_error = False
        for module_id in workflow_options.modules:
            try:
                result = await self.run_module(
                    module_id, content_input, workflow_options.options_for(module_id)
                )
            except Exception as exc:
                self.log.error(
                    CONTROLLER_LOG_ID,
                    f"Error in workflow execution for module {module_id}",
                    exc,
                )
                forced_error = True
                if workflow_options.stop_on_error:
                    break
                continue

            results.append(result)
            if result.status is ModuleStatus.ERROR and workflow_options.stop_on_error:
                self.log.warning(
                    CONTROLLER_LOG_ID,
                    f"Stopping workflow after error in module {module_id}",
                )
                break
        return results, forced_error

    async def _run_parallel(
        self, content_input: ContentInput, workflow_options: WorkflowOptions
    ) -> tuple[list[ModuleResult], bool]:
        tasks = [
            self.run_module(
                module_id, content_input, workflow_options.options_for(module_id)
            )
            for module_id in workflow_options.modules
        ]
        try:
            results = await asyncio.gather(*tasks)
        except Exception as exc:
            self.log.error(CONTROLLER_LOG_ID, "Error in parallel workflow execution", exc)
            return [], True
        return list(results), False

    def _generate_summary(self, results: list[ModuleResult]) -> str:
        counts = {status: 0 for status in ModuleStatus}
        for result in results:
            counts[result.status] += 1

        summary = f"Workflow Summary: {len(results)} modules processed\n"
        summary += f"- Success: {counts[ModuleStatus.SUCCESS]}\n"
        summary += f"- Warning: {counts[ModuleStatus.WARNING]}\n"
        summary += f"- Error: {counts[ModuleStatus.ERROR]}\n\n"

        issues = [r for r in results if r.status is not ModuleStatus.SUCCESS]
        if issues:
            summary += "Issues found:\n"
            for result in issues:
                first_line = result.report.split("\n")[0]
                summary += (
                    f"- [{result.status.value.upper()}] {result.module_id}: {first_line}\n"
                )
                if result.recommended_fixes:
                    summary += (
                        f"  Recommended fixes: {len(result.recommended_fixes)}\n"
                    )
        return summary

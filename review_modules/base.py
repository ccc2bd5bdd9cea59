# review_modules/base.py
"""Generic review module driven by a ``ModuleProfile``.

Every editorial angle follows the same contract: validate the input,
compose a prompt from the profile's template and the content block, ask
the completion provider, then read a status token and a recommendations
section out of the free-text answer.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from core.activity_log import ActivityLog
from core.llm_interface import (
    CompletionProvider,
    completion_options_from_module_options,
)
from parsing import parse_review_completion
from prompt_renderer import render_prompt

from models import (
    ContentInput,
    ModuleMetadata,
    ModuleOptions,
    ModuleResult,
    ModuleStatus,
    utc_timestamp,
)


@dataclass(frozen=True)
class ModuleProfile:
    """Everything that distinguishes one review module from another."""

    module_id: str
    description: str
    template_name: str
    activity: str
    status_field: str
    # success, warning, error
    status_tokens: tuple[str, str, str]
    fixes_section: str
    fixes_stop_headers: tuple[str, ...] = ("OVERALL_ASSESSMENT",)
    include_audience: bool = False
    include_trace: bool = False
    invalid_input_fix: str = ""
    temperature: float | None = None

    @property
    def validation_fix(self) -> str:
        return self.invalid_input_fix or f"Provide non-empty content for {self.activity}"


@dataclass
class ReviewContext:
    """Collaborators shared by the controller and every module it runs."""

    provider: CompletionProvider
    log: ActivityLog = field(default_factory=ActivityLog)


class ReviewModule:
    """One editorial review angle."""

    def __init__(self, profile: ModuleProfile, context: ReviewContext) -> None:
        self.profile = profile
        self.context = context

    @property
    def module_id(self) -> str:
        return self.profile.module_id

    @property
    def description(self) -> str:
        return self.profile.description

    @property
    def log(self) -> ActivityLog:
        return self.context.log

    def default_prompt(self) -> str:
        return render_prompt(self.profile.template_name)

    def validate_input(self, content_input: ContentInput | None) -> bool:
        if (
            content_input is None
            or not isinstance(content_input.content, str)
            or not content_input.content.strip()
        ):
            self.log.error(self.module_id, "Invalid input: content is required")
            return False
        return True

    def compose_prompt(
        self, content_input: ContentInput, options: ModuleOptions | None = None
    ) -> str:
        """Instructions (custom or default) followed by the content block."""
        instructions = (
            options.custom_prompt if options and options.custom_prompt else None
        ) or self.default_prompt()
        trace = None
        if self.profile.include_trace:
            trace = {
                "trace_id": str(uuid.uuid4()),
                "timestamp": utc_timestamp(),
                "model": (options.model if options else None) or "default-model",
            }
        content_type = content_input.content_type
        return render_prompt(
            "content_block.j2",
            {
                "instructions": instructions.strip(),
                "title": content_input.title,
                "author": content_input.author,
                "content_type": content_type.value if content_type else None,
                "target_audience": content_input.target_audience,
                "include_audience": self.profile.include_audience,
                "trace": trace,
                "content": content_input.content,
            },
        )

    def _metadata(self, prompt: str, model: str) -> ModuleMetadata:
        return ModuleMetadata(
            timestamp=utc_timestamp(), prompt_used=prompt, model_version=model
        )

    def _result(
        self,
        status: ModuleStatus,
        report: str,
        fixes: list[str],
        metadata: ModuleMetadata,
    ) -> ModuleResult:
        self.log.info(
            self.module_id, f"Module processing completed with status: {status.value}"
        )
        return ModuleResult(
            module_id=self.module_id,
            status=status,
            report=report,
            recommended_fixes=fixes or None,
            metadata=metadata,
        )

    async def process(
        self, content_input: ContentInput, options: ModuleOptions | None = None
    ) -> ModuleResult:
        """Review ``content_input``. Never raises; failures become error results."""
        completion_options = completion_options_from_module_options(
            options, self.profile.temperature
        )
        model = completion_options.model or "default-model"

        if not self.validate_input(content_input):
            return self._result(
                ModuleStatus.ERROR,
                "Invalid input: content is required",
                [self.profile.validation_fix],
                self._metadata(
                    (options.custom_prompt if options else None)
                    or self.profile.template_name,
                    model,
                ),
            )

        self.log.info(self.module_id, f"Starting {self.profile.activity}")
        prompt = ""
        try:
            prompt = self.compose_prompt(content_input, options)
            if options and options.verbose:
                self.log.debug(self.module_id, "Prompt composed", {"prompt": prompt})
            completion = await self.context.provider.generate_completion(
                prompt, completion_options
            )
            status, fixes = parse_review_completion(
                completion,
                self.profile.status_field,
                self.profile.status_tokens,
                self.profile.fixes_section,
                self.profile.fixes_stop_headers,
            )
            self.log.info(
                self.module_id,
                f"{self.profile.activity.capitalize()} completed with status: {status.value}",
            )
            return self._result(
                status, completion, fixes, self._metadata(prompt, model)
            )
        except Exception as exc:
            self.log.error(self.module_id, f"Error during {self.profile.activity}", exc)
            return self._result(
                ModuleStatus.ERROR,
                f"Error during {self.profile.activity}: {exc}",
                [f"Retry the {self.profile.activity}", "Check API connectivity"],
                self._metadata(prompt or self.profile.template_name, model),
            )

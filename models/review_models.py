# models/review_models.py
"""Pydantic structures exchanged between review modules and the controller."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utc_timestamp() -> str:
    """Current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()


class ModuleStatus(str, Enum):
    """Canonical tri-state outcome of a review."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class ContentType(str, Enum):
    BOOK = "book"
    ARTICLE = "article"
    ESSAY = "essay"
    OTHER = "other"


_SEVERITY = {
    ModuleStatus.SUCCESS: 0,
    ModuleStatus.WARNING: 1,
    ModuleStatus.ERROR: 2,
}


def worst_status(statuses: Iterable[ModuleStatus]) -> ModuleStatus:
    """Fold statuses so that error dominates warning dominates success.

    An empty iterable yields ``ModuleStatus.SUCCESS``.
    """
    worst = ModuleStatus.SUCCESS
    for status in statuses:
        if _SEVERITY[status] > _SEVERITY[worst]:
            worst = status
    return worst


class GuardianBaseModel(BaseModel):
    """Base model serialising to camelCase JSON while accepting both spellings."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=False,
    )

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ContentInput(GuardianBaseModel):
    """The piece of text under review and what is known about it."""

    model_config = ConfigDict(frozen=True)

    content: str
    title: str | None = None
    author: str | None = None
    target_audience: str | None = None
    content_type: ContentType | None = None
    additional_context: dict[str, Any] = Field(default_factory=dict)


class ModuleOptions(GuardianBaseModel):
    """Per-invocation overrides for a single module run."""

    model_config = ConfigDict(frozen=True)

    verbose: bool = False
    max_tokens: int | None = None
    model: str | None = None
    custom_prompt: str | None = None


class ModuleMetadata(GuardianBaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: str = Field(default_factory=utc_timestamp)
    prompt_used: str
    model_version: str


class ModuleResult(GuardianBaseModel):
    """Outcome of one module invocation."""

    model_config = ConfigDict(frozen=True)

    module_id: str
    status: ModuleStatus
    report: str
    recommended_fixes: list[str] | None = None
    metadata: ModuleMetadata


class WorkflowOptions(GuardianBaseModel):
    """Which modules to run and how to sequence them."""

    modules: list[str]
    sequential: bool = True
    stop_on_error: bool = False
    options: dict[str, ModuleOptions] = Field(default_factory=dict)

    def options_for(self, module_id: str) -> ModuleOptions | None:
        return self.options.get(module_id)


class WorkflowResult(GuardianBaseModel):
    workflow_id: str
    timestamp: str
    status: ModuleStatus
    results: list[ModuleResult]
    summary: str

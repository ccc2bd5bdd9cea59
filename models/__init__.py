"""Central package for Content Guardian data models."""

from .review_models import (
    ContentInput,
    ContentType,
    GuardianBaseModel,
    ModuleMetadata,
    ModuleOptions,
    ModuleResult,
    ModuleStatus,
    WorkflowOptions,
    WorkflowResult,
    utc_timestamp,
    worst_status,
)

__all__ = [
    "ContentInput",
    "ContentType",
    "GuardianBaseModel",
    "ModuleMetadata",
    "ModuleOptions",
    "ModuleResult",
    "ModuleStatus",
    "WorkflowOptions",
    "WorkflowResult",
    "utc_timestamp",
    "worst_status",
]

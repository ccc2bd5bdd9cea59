# orchestration/workflow_presets.py
"""Named module combinations for common review passes."""

from __future__ import annotations

from core.errors import UnknownWorkflowError
from review_modules.catalog import (
    ALL_MODULE_IDS,
    CHAPTER_IMAGE_GALLERY,
    ETHICAL_GUARDIAN,
    FACT_CHECK_LAYER,
    HALLUCINATION_FILTER,
    PLOT_LOGIC_BUILDER,
    PROMPT_TRACEABILITY,
    SIMULATED_FEEDBACK_READER,
    SMART_EXPORT_ENGINE,
    TONE_AND_AUDIENCE_MODULATOR,
    WYSIWYG_LAYOUT_PREVIEW,
)

from models import ModuleOptions, WorkflowOptions

COMPREHENSIVE = "comprehensive"
FACTUAL_INTEGRITY = "factual-integrity"
ETHICAL_REVIEW = "ethical-review"
READER_EXPERIENCE = "reader-experience"
PUBLICATION_PREP = "publication-prep"

_PRESET_MODULES: dict[str, tuple[str, ...]] = {
    COMPREHENSIVE: ALL_MODULE_IDS,
    FACTUAL_INTEGRITY: (FACT_CHECK_LAYER, HALLUCINATION_FILTER, PROMPT_TRACEABILITY),
    ETHICAL_REVIEW: (
        ETHICAL_GUARDIAN,
        TONE_AND_AUDIENCE_MODULATOR,
        PROMPT_TRACEABILITY,
    ),
    READER_EXPERIENCE: (
        TONE_AND_AUDIENCE_MODULATOR,
        PLOT_LOGIC_BUILDER,
        SIMULATED_FEEDBACK_READER,
        PROMPT_TRACEABILITY,
    ),
    PUBLICATION_PREP: (
        WYSIWYG_LAYOUT_PREVIEW,
        CHAPTER_IMAGE_GALLERY,
        SMART_EXPORT_ENGINE,
        PROMPT_TRACEABILITY,
    ),
}

PRESET_NAMES: tuple[str, ...] = tuple(_PRESET_MODULES)


def create_custom_workflow(
    modules: list[str],
    sequential: bool = True,
    stop_on_error: bool = False,
    module_options: dict[str, ModuleOptions] | None = None,
) -> WorkflowOptions:
    return WorkflowOptions(
        modules=list(modules),
        sequential=sequential,
        stop_on_error=stop_on_error,
        options=dict(module_options or {}),
    )


def get_preset(name: str) -> WorkflowOptions:
    """Return a fresh ``WorkflowOptions`` for the preset called ``name``.

    Raises:
        UnknownWorkflowError: no preset has that name.
    """
    try:
        modules = _PRESET_MODULES[name]
    except KeyError:
        raise UnknownWorkflowError(name) from None
    return create_custom_workflow(list(modules))

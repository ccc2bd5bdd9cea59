# review_modules/catalog.py
"""The ten editorial review angles shipped with Content Guardian."""

from __future__ import annotations

from review_modules.base import ModuleProfile, ReviewContext, ReviewModule

FACT_CHECK_LAYER = "FactCheckLayer"
ETHICAL_GUARDIAN = "EthicalGuardian"
TONE_AND_AUDIENCE_MODULATOR = "ToneAndAudienceModulator"
PLOT_LOGIC_BUILDER = "PlotLogicBuilder"
SIMULATED_FEEDBACK_READER = "SimulatedFeedbackReader"
HALLUCINATION_FILTER = "HallucinationFilter"
WYSIWYG_LAYOUT_PREVIEW = "WYSIWYGLayoutPreview"
CHAPTER_IMAGE_GALLERY = "ChapterImageGallery"
PROMPT_TRACEABILITY = "PromptTraceability"
SMART_EXPORT_ENGINE = "SmartExportEngine"

MODULE_PROFILES: tuple[ModuleProfile, ...] = (
    ModuleProfile(
        module_id=FACT_CHECK_LAYER,
        description=(
            "Validates facts, detects speculative/fabricated claims, and reports "
            "suspicious statements with risk levels"
        ),
        template_name="fact_check_layer.j2",
        activity="fact checking",
        status_field="OVERALL_ASSESSMENT",
        status_tokens=("PASS", "PASS_WITH_WARNINGS", "FAIL"),
        fixes_section="RECOMMENDATIONS",
    ),
    ModuleProfile(
        module_id=ETHICAL_GUARDIAN,
        description=(
            "Detects subconscious stereotypes, discriminatory phrases, and "
            "ethically questionable language"
        ),
        template_name="ethical_guardian.j2",
        activity="ethical evaluation",
        status_field="OVERALL_RATING",
        status_tokens=("ACCEPTABLE", "NEEDS_REVISION", "PROBLEMATIC"),
        fixes_section="RECOMMENDATIONS",
        fixes_stop_headers=("TONE_ASSESSMENT", "OVERALL_RATING"),
        include_audience=True,
    ),
    ModuleProfile(
        module_id=TONE_AND_AUDIENCE_MODULATOR,
        description=(
            "Analyzes target audience and language level, suggests stylistic "
            "changes for consistent tone"
        ),
        template_name="tone_and_audience_modulator.j2",
        activity="tone and audience analysis",
        status_field="OVERALL_ASSESSMENT",
        status_tokens=(
            "WELL_ALIGNED",
            "MINOR_ADJUSTMENTS_NEEDED",
            "MAJOR_REVISION_REQUIRED",
        ),
        fixes_section="RECOMMENDATIONS",
        include_audience=True,
    ),
    ModuleProfile(
        module_id=PLOT_LOGIC_BUILDER,
        description=(
            "Creates a map of plot, logical connections, and argumentation nodes"
        ),
        template_name="plot_logic_builder.j2",
        activity="plot and logic analysis",
        status_field="OVERALL_COHERENCE",
        status_tokens=("STRONG", "ADEQUATE", "NEEDS_RESTRUCTURING"),
        fixes_section="RECOMMENDATIONS",
        fixes_stop_headers=("OVERALL_COHERENCE",),
        invalid_input_fix="Provide non-empty content for plot/logic analysis",
    ),
    ModuleProfile(
        module_id=SIMULATED_FEEDBACK_READER,
        description=(
            "Generates questions that a typical reader might ask and identifies "
            "confusing or insufficiently explained sections"
        ),
        template_name="simulated_feedback_reader.j2",
        activity="simulated reader feedback generation",
        status_field="OVERALL_CLARITY",
        status_tokens=("CLEAR", "SOMEWHAT_CLEAR", "NEEDS_CLARIFICATION"),
        fixes_section="CLARITY_RECOMMENDATIONS",
        fixes_stop_headers=("OVERALL_CLARITY",),
        include_audience=True,
        invalid_input_fix="Provide non-empty content for reader feedback simulation",
    ),
    ModuleProfile(
        module_id=HALLUCINATION_FILTER,
        description=(
            "Detects LLM hallucinations such as fabricated citations, "
            "non-existent books, and incorrect numbers"
        ),
        template_name="hallucination_filter.j2",
        activity="hallucination detection",
        status_field="OVERALL_ASSESSMENT",
        status_tokens=(
            "NO_HALLUCINATIONS_DETECTED",
            "MINOR_HALLUCINATIONS",
            "SIGNIFICANT_HALLUCINATIONS",
        ),
        fixes_section="RECOMMENDED_ACTIONS",
    ),
    ModuleProfile(
        module_id=WYSIWYG_LAYOUT_PREVIEW,
        description=(
            "Generates preview layouts for different formats "
            "(.pdf, .epub, .html, .md)"
        ),
        template_name="wysiwyg_layout_preview.j2",
        activity="layout preview generation",
        status_field="OVERALL_ASSESSMENT",
        status_tokens=(
            "READY_FOR_FORMATTING",
            "MINOR_ADJUSTMENTS_NEEDED",
            "MAJOR_RESTRUCTURING_REQUIRED",
        ),
        fixes_section="LAYOUT_RECOMMENDATIONS",
        include_audience=True,
    ),
    ModuleProfile(
        module_id=CHAPTER_IMAGE_GALLERY,
        description=(
            "Assigns illustrated images to chapters based on content and uses "
            "text2image engine for visual enrichment"
        ),
        template_name="chapter_image_gallery.j2",
        activity="chapter image gallery generation",
        status_field="OVERALL_ASSESSMENT",
        status_tokens=(
            "READY_FOR_ILLUSTRATION",
            "PARTIAL_COVERAGE",
            "NEEDS_RESTRUCTURING",
        ),
        fixes_section="STYLE_GUIDELINES",
        fixes_stop_headers=("IMAGE_METADATA", "OVERALL_ASSESSMENT"),
        include_audience=True,
        invalid_input_fix="Provide non-empty content for chapter image generation",
    ),
    ModuleProfile(
        module_id=PROMPT_TRACEABILITY,
        description=(
            "Ensures each output contains metadata including prompt used, "
            "model, time, and ID for auditability"
        ),
        template_name="prompt_traceability.j2",
        activity="prompt traceability analysis",
        status_field="OVERALL_ASSESSMENT",
        status_tokens=("FULLY_TRACEABLE", "PARTIALLY_TRACEABLE", "NOT_TRACEABLE"),
        fixes_section="RECOMMENDED_METADATA",
        fixes_stop_headers=("IMPLEMENTATION_APPROACH", "OVERALL_ASSESSMENT"),
        include_trace=True,
        invalid_input_fix="Provide non-empty content for traceability analysis",
    ),
    ModuleProfile(
        module_id=SMART_EXPORT_ENGINE,
        description=(
            "Exports content to various formats (.pdf, .epub, .html, .md, .json) "
            "while preserving structure and style"
        ),
        template_name="smart_export_engine.j2",
        activity="export specification generation",
        status_field="OVERALL_ASSESSMENT",
        status_tokens=(
            "READY_FOR_EXPORT",
            "MINOR_ADJUSTMENTS_NEEDED",
            "MAJOR_RESTRUCTURING_REQUIRED",
        ),
        fixes_section="EXPORT_RECOMMENDATIONS",
        include_audience=True,
    ),
)

ALL_MODULE_IDS: tuple[str, ...] = tuple(p.module_id for p in MODULE_PROFILES)


def get_profile(module_id: str) -> ModuleProfile:
    for profile in MODULE_PROFILES:
        if profile.module_id == module_id:
            return profile
    raise KeyError(module_id)


def build_default_modules(context: ReviewContext) -> list[ReviewModule]:
    """Instantiate every shipped review module against ``context``."""
    return [ReviewModule(profile, context) for profile in MODULE_PROFILES]

# parsing/__init__.py
"""Parsing utilities for free-text review completions.

The prompts ask the model to finish with a labelled status field such as
``OVERALL_ASSESSMENT: PASS | PASS_WITH_WARNINGS | FAIL`` and to put its
suggestions under a named section header. Nothing else about the answer's
layout is relied upon.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

import structlog

from models import ModuleStatus

logger = structlog.get_logger(__name__)

# Status used when the answer carries no recognisable token.
FALLBACK_STATUS = ModuleStatus.WARNING

_TIER_STATUSES = (ModuleStatus.SUCCESS, ModuleStatus.WARNING, ModuleStatus.ERROR)


def extract_status_token(
    completion: str, field_name: str, tokens: Sequence[str]
) -> str | None:
    """Return the upper-cased status token following ``field_name:``, if any.

    Tokens are tried longest first so ``PASS_WITH_WARNINGS`` is never read as
    ``PASS``; a token must end on a word boundary.
    """
    if not completion:
        return None
    alternatives = "|".join(
        re.escape(token) for token in sorted(tokens, key=len, reverse=True)
    )
    pattern = re.compile(
        rf"{re.escape(field_name)}\**\s*:\s*\**\s*\"?({alternatives})\b",
        flags=re.IGNORECASE,
    )
    match = pattern.search(completion)
    return match.group(1).upper() if match else None


def map_status(token: str | None, tokens: Sequence[str]) -> ModuleStatus:
    """Map a three-tier token onto the canonical status.

    The first token means success, the second warning, the third error.
    Anything else falls back to ``FALLBACK_STATUS``.
    """
    if token is None:
        return FALLBACK_STATUS
    upper_tokens = [t.upper() for t in tokens]
    try:
        return _TIER_STATUSES[upper_tokens.index(token.upper())]
    except (ValueError, IndexError):
        return FALLBACK_STATUS


# Lines consisting only of markdown emphasis or heading markers.
_MARKUP_ONLY = re.compile(r"^[*_#\s]+$")


def extract_section_lines(
    completion: str, section: str, stop_headers: Sequence[str] = ()
) -> list[str]:
    """Return the stripped, non-empty lines of a named section.

    The section runs from ``section:`` up to the first of ``stop_headers``
    or the end of the text. Headers may be wrapped in markdown bold
    (``**RECOMMENDATIONS:**``).
    """
    if not completion:
        return []
    stops = "|".join(rf"\**{re.escape(h)}\**\s*:" for h in stop_headers)
    terminator = rf"(?={stops}|$)" if stops else r"$"
    pattern = re.compile(
        rf"{re.escape(section)}\**\s*:\**(.*?){terminator}",
        flags=re.IGNORECASE | re.DOTALL,
    )
    match = pattern.search(completion)
    if not match:
        return []
    header = f"{section}:".upper()
    return [
        line.strip()
        for line in match.group(1).strip().split("\n")
        if line.strip()
        and not _MARKUP_ONLY.match(line)
        and not line.strip().strip("*").upper().startswith(header)
    ]


def parse_review_completion(
    completion: str,
    field_name: str,
    tokens: Sequence[str],
    section: str,
    stop_headers: Sequence[str] = (),
) -> tuple[ModuleStatus, list[str]]:
    """Derive the canonical status and recommended fixes from a completion."""
    token = extract_status_token(completion, field_name, tokens)
    if token is None:
        logger.debug(
            "No recognisable status token in completion; using fallback.",
            field=field_name,
            fallback=FALLBACK_STATUS.value,
        )
    return map_status(token, tokens), extract_section_lines(
        completion, section, stop_headers
    )

"""
Editorial review modules.

Each module reviews a piece of content from one angle (fact checking,
ethics, tone, plot logic, reader confusion, layout, images, traceability,
export, hallucinations) through a single completion round trip.
"""

from review_modules.base import ModuleProfile, ReviewContext, ReviewModule
from review_modules.catalog import (
    ALL_MODULE_IDS,
    MODULE_PROFILES,
    build_default_modules,
    get_profile,
)

__all__ = [
    "ALL_MODULE_IDS",
    "MODULE_PROFILES",
    "ModuleProfile",
    "ReviewContext",
    "ReviewModule",
    "build_default_modules",
    "get_profile",
]

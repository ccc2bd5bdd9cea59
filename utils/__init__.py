# utils/__init__.py
"""General utility functions for the Content Guardian system."""

from __future__ import annotations

from .logging import setup_logging_guardian

__all__ = ["setup_logging_guardian"]

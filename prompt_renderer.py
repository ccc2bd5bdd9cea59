# prompt_renderer.py
"""Utilities for rendering review prompts using Jinja2 templates."""

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

PROMPTS_PATH = Path(__file__).parent / "prompts"
_env = Environment(
    loader=FileSystemLoader(PROMPTS_PATH),
    autoescape=False,
    keep_trailing_newline=False,
    undefined=StrictUndefined,
)


def render_prompt(template_name: str, context: dict[str, Any] | None = None) -> str:
    """Render a Jinja2 template from the prompts directory."""
    template = _env.get_template(template_name)
    return template.render(**(context or {}))

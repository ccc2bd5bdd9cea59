# core/usage.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TokenUsage:
    """Running token totals reported by the completion provider."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    responses: int = 0

    def add(self, usage: dict[str, int] | None) -> None:
        """Accumulate a provider ``usage`` block; missing keys count as zero."""
        if not usage:
            return
        self.prompt_tokens += int(usage.get("prompt_tokens", 0) or 0)
        self.completion_tokens += int(usage.get("completion_tokens", 0) or 0)
        self.total_tokens += int(usage.get("total_tokens", 0) or 0)
        self.responses += 1

    def as_dict(self) -> dict[str, int]:
        return {
            "prompt_tokens": self.prompt_tokens,
            "completion_tokens": self.completion_tokens,
            "total_tokens": self.total_tokens,
            "responses": self.responses,
        }

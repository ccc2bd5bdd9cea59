# core/errors.py
"""Exception hierarchy for the Content Guardian system."""

from __future__ import annotations


class GuardianError(Exception):
    """Base exception for all Content Guardian errors."""


class CompletionError(GuardianError):
    """The completion provider failed to produce text."""


class UnknownModuleError(GuardianError, LookupError):
    """A module id was requested that is not in the registry."""

    def __init__(self, module_id: str) -> None:
        self.module_id = module_id
        super().__init__(f"Module {module_id} not found")


class UnknownWorkflowError(GuardianError, KeyError):
    """A workflow preset name was requested that does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Workflow preset {self.name} not found"

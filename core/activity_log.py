# core/activity_log.py
"""In-memory activity log shared by the controller and review modules.

Every entry is kept for later inspection or JSON export and is also
forwarded to structlog so it reaches the configured handlers.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import structlog

from models import utc_timestamp

logger = structlog.get_logger(__name__)


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass
class LogEntry:
    """A single activity record."""

    level: LogLevel
    module_id: str
    message: str
    data: Any = None
    timestamp: str = field(default_factory=utc_timestamp)

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "level": self.level.value,
            "moduleId": self.module_id,
            "message": self.message,
            "data": _jsonable(self.data),
        }


def _jsonable(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, BaseException):
        return f"{type(value).__name__}: {value}"
    if isinstance(value, dict):
        return {str(k): _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return str(value)


class ActivityLog:
    """Process-local log of module and workflow activity."""

    def __init__(self, log_to_console: bool = True) -> None:
        self._entries: list[LogEntry] = []
        self.log_to_console = log_to_console

    def debug(self, module_id: str, message: str, data: Any = None) -> None:
        self._log(LogLevel.DEBUG, module_id, message, data)

    def info(self, module_id: str, message: str, data: Any = None) -> None:
        self._log(LogLevel.INFO, module_id, message, data)

    def warning(self, module_id: str, message: str, data: Any = None) -> None:
        self._log(LogLevel.WARNING, module_id, message, data)

    def error(self, module_id: str, message: str, data: Any = None) -> None:
        self._log(LogLevel.ERROR, module_id, message, data)

    def _log(self, level: LogLevel, module_id: str, message: str, data: Any) -> None:
        self._entries.append(LogEntry(level, module_id, message, data))
        if not self.log_to_console:
            return
        emit = getattr(logger, level.value.lower())
        if isinstance(data, BaseException):
            emit(message, module_id=module_id, exc_info=data)
        elif data is not None:
            emit(message, module_id=module_id, data=data)
        else:
            emit(message, module_id=module_id)

    def get_logs(
        self, level: LogLevel | None = None, module_id: str | None = None
    ) -> list[LogEntry]:
        """Return entries, optionally filtered by level and/or module id."""
        return [
            entry
            for entry in self._entries
            if (level is None or entry.level == level)
            and (module_id is None or entry.module_id == module_id)
        ]

    def clear(self) -> None:
        self._entries = []

    def export_json(self, indent: int | None = 2) -> str:
        return json.dumps([entry.to_dict() for entry in self._entries], indent=indent)

    def __len__(self) -> int:
        return len(self._entries)

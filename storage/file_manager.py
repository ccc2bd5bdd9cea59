# storage/file_manager.py
"""Utility class for asynchronous file operations."""

from __future__ import annotations

import asyncio
import json
import os
from typing import Any

from config import REPORTS_DIR


class FileManager:
    """Read review inputs and write reports and activity log exports."""

    def __init__(self, reports_dir: str = REPORTS_DIR) -> None:
        self.reports_dir = reports_dir

    async def read_json(self, file_path: str) -> Any:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._read_json_sync, file_path)

    def _read_json_sync(self, file_path: str) -> Any:
        """Read and decode the JSON document at ``file_path``.

        Raises:
            OSError: the file cannot be read.
            json.JSONDecodeError: the file is not valid JSON.
        """
        with open(file_path, encoding="utf-8") as f:
            return json.load(f)

    async def save_report(self, name: str, payload: dict[str, Any]) -> str:
        """Write ``payload`` as ``<reports_dir>/<name>.json`` and return the path."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._save_report_sync, name, payload)

    def _save_report_sync(self, name: str, payload: dict[str, Any]) -> str:
        safe_name = "".join(c if c.isalnum() or c in ["_", "-"] else "_" for c in name)
        file_path = os.path.join(self.reports_dir, f"{safe_name}.json")
        os.makedirs(self.reports_dir, exist_ok=True)
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
        return file_path

    async def write_text(self, file_path: str, text: str) -> None:
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._write_text_sync, file_path, text)

    def _write_text_sync(self, file_path: str, text: str) -> None:
        log_dir = os.path.dirname(file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        with open(file_path, "w", encoding="utf-8") as f:
            f.write(text)

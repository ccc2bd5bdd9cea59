# tests/test_logging_mods.py
import logging
import logging as std_logging

from config import settings
from rich.logging import RichHandler

import utils.logging as logging_utils


class Handlers(list):
    def clear(self):
        pass


def test_setup_logging_file_error(monkeypatch, caplog, tmp_path):
    caplog.set_level(logging.ERROR)
    root_logger = std_logging.getLogger()
    monkeypatch.setattr(root_logger, "handlers", Handlers([caplog.handler]))

    def raise_handler(*_a, **_k):
        raise OSError("fail")

    monkeypatch.setattr(std_logging.handlers, "RotatingFileHandler", raise_handler)
    monkeypatch.setattr(settings, "LOG_FILE", "temp.log")
    monkeypatch.setattr(settings, "BASE_OUTPUT_DIR", str(tmp_path))

    logging_utils.setup_logging_guardian()

    assert any(
        "Error setting up file logger" in record.getMessage()
        for record in caplog.records
    )


def test_rich_console_handler_on_stderr(monkeypatch):
    root_logger = std_logging.getLogger()
    monkeypatch.setattr(root_logger, "handlers", [])
    monkeypatch.setattr(settings, "LOG_FILE", None)
    monkeypatch.setattr(settings, "ENABLE_RICH_PROGRESS", True)

    logging_utils.setup_logging_guardian()

    rich_handlers = [h for h in root_logger.handlers if isinstance(h, RichHandler)]
    assert len(rich_handlers) == 1
    assert rich_handlers[0].console.stderr is True


def test_plain_stream_handler_when_rich_disabled(monkeypatch):
    root_logger = std_logging.getLogger()
    monkeypatch.setattr(root_logger, "handlers", [])
    monkeypatch.setattr(settings, "LOG_FILE", None)
    monkeypatch.setattr(settings, "ENABLE_RICH_PROGRESS", False)

    logging_utils.setup_logging_guardian()

    assert len(root_logger.handlers) == 1
    assert type(root_logger.handlers[0]) is std_logging.StreamHandler
    assert logging.getLogger("httpx").level == logging.WARNING

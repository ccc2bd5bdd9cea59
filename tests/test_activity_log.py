import json
import logging

from core.activity_log import ActivityLog, LogLevel


def test_entries_are_filterable():
    log = ActivityLog(log_to_console=False)
    log.info("A", "started")
    log.warning("B", "odd")
    log.error("A", "failed", {"code": 500})
    log.debug("B", "details")

    assert len(log) == 4
    assert [e.message for e in log.get_logs(module_id="A")] == ["started", "failed"]
    assert [e.message for e in log.get_logs(level=LogLevel.WARNING)] == ["odd"]
    assert log.get_logs(level=LogLevel.ERROR, module_id="B") == []


def test_export_json_shape():
    log = ActivityLog(log_to_console=False)
    log.error("FactCheckLayer", "Error during fact checking", RuntimeError("boom"))

    exported = json.loads(log.export_json())

    assert exported == [
        {
            "timestamp": exported[0]["timestamp"],
            "level": "ERROR",
            "moduleId": "FactCheckLayer",
            "message": "Error during fact checking",
            "data": "RuntimeError: boom",
        }
    ]


def test_clear():
    log = ActivityLog(log_to_console=False)
    log.info("A", "one")
    log.clear()
    assert len(log) == 0
    assert json.loads(log.export_json()) == []


def test_forwards_to_structlog(caplog):
    caplog.set_level(logging.INFO)
    log = ActivityLog(log_to_console=True)

    log.warning("EthicalGuardian", "Something looks off")

    assert any("Something looks off" in r.getMessage() for r in caplog.records)
    assert any(r.levelno == logging.WARNING for r in caplog.records)

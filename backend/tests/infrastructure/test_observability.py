"""Structured logging: JSON formatter output and extras."""

import json
import logging

from lifelink.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "lifelink.test", logging.WARNING, __file__, 1, "Donor %s not found",
        (7,), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "lifelink.test"
    assert log["message"] == "Donor 7 not found"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(error_code="RESOURCE_NOT_FOUND", row_id=7, unrelated="x"),
    ))
    assert log["error_code"] == "RESOURCE_NOT_FOUND"
    assert log["row_id"] == 7
    assert "unrelated" not in log


def test_setup_logging_is_idempotent():
    setup_logging("DEBUG", "text")
    setup_logging("INFO", "json")
    ours = [h for h in logging.root.handlers if h.get_name() == "lifelink"]
    assert len(ours) == 1
    assert isinstance(ours[0].formatter, JSONFormatter)
    assert logging.root.level == logging.INFO

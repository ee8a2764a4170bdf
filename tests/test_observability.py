"""Tests for the JSON log formatter."""

import json
import logging

from exercise_tracker.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "exercise_tracker.test", logging.INFO, __file__, 1, "hello %s", ("world",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formats_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "exercise_tracker.test"
    assert log["message"] == "hello world"
    assert "timestamp" in log


def test_includes_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(user_id="abc", error_code="INTERNAL_ERROR", secret="x"),
    ))
    assert log["user_id"] == "abc"
    assert log["error_code"] == "INTERNAL_ERROR"
    assert "secret" not in log

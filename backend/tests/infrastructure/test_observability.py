"""Structured logging - JSONFormatter output shape."""

import json
import logging

from warehouser.core.errors import ConflictError, ErrorContext
from warehouser.infrastructure.observability import JSONFormatter, setup_logging


def _record(msg, **extra):
    record = logging.LogRecord(
        "warehouser.test", logging.WARNING, __file__, 1, msg, None, None,
    )
    record.__dict__.update(extra)
    return record


def test_base_fields_present():
    out = json.loads(JSONFormatter().format(_record("hello")))
    assert out["level"] == "WARNING"
    assert out["logger"] == "warehouser.test"
    assert out["message"] == "hello"
    assert "timestamp" in out


def test_error_extra_fields_surface():
    err = ConflictError("taken", ErrorContext(item_id=3, warehouse_id=7))
    out = json.loads(JSONFormatter().format(_record("boom", **err.log_extra())))
    assert out["error_code"] == "CONFLICT"
    assert out["item_id"] == 3
    assert out["warehouse_id"] == 7


def test_absent_extras_are_omitted():
    out = json.loads(JSONFormatter().format(_record("quiet", item_id=None)))
    assert "item_id" not in out
    assert "warehouse_id" not in out


def test_timestamp_comes_from_the_record():
    record = _record("at")
    record.created = 0.0
    out = json.loads(JSONFormatter().format(record))
    assert out["timestamp"] == "1970-01-01T00:00:00+00:00"


def test_setup_logging_installs_one_handler():
    saved_handlers, saved_level = logging.root.handlers[:], logging.root.level
    try:
        setup_logging("debug", "json")
        setup_logging("debug", "json")
        assert len(logging.root.handlers) == 1
        assert isinstance(logging.root.handlers[0].formatter, JSONFormatter)
        assert logging.root.level == logging.DEBUG
    finally:
        logging.root.handlers = saved_handlers
        logging.root.setLevel(saved_level)

"""Structured logging — JSON formatter surfaces known extras and exceptions."""

import json
import logging
import sys

from catalog_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "catalog_api.test", logging.WARNING, __file__, 1, "hello %s", ("world",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_core_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "catalog_api.test"
    assert payload["message"] == "hello world"
    assert "timestamp" in payload


def test_json_formatter_includes_known_extras_only():
    payload = json.loads(JSONFormatter().format(
        _record(product_id="5", error_code="CONFLICT", unrelated="x"),
    ))
    assert payload["product_id"] == "5"
    assert payload["error_code"] == "CONFLICT"
    assert "unrelated" not in payload


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError("kaboom")
    except RuntimeError:
        record = _record()
        record.exc_info = sys.exc_info()
    payload = json.loads(JSONFormatter().format(record))
    assert "kaboom" in payload["exception"]


def test_setup_logging_installs_handler():
    handler = setup_logging("debug", "text")
    try:
        assert handler in logging.root.handlers
        assert logging.root.level == logging.DEBUG
        assert not isinstance(handler.formatter, JSONFormatter)
    finally:
        logging.root.removeHandler(handler)


def test_setup_logging_replaces_previous_handler():
    first = setup_logging("info", "json")
    second = setup_logging("warning", "json")
    try:
        assert first not in logging.root.handlers
        assert second in logging.root.handlers
        installed = [h for h in logging.root.handlers if isinstance(h.formatter, JSONFormatter)]
        assert installed == [second]
        assert logging.root.level == logging.WARNING
    finally:
        logging.root.removeHandler(second)


def test_setup_logging_leaves_foreign_handlers(caplog):
    handler = setup_logging("info", "text")
    try:
        assert caplog.handler in logging.root.handlers
    finally:
        logging.root.removeHandler(handler)

"""Structured logging tests — JSONFormatter output and setup_logging wiring."""

import json
import logging
import sys

import pytest

from pokedex_gateway.infrastructure.observability import JSONFormatter, setup_logging


def _record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "pokedex_gateway.test", logging.ERROR, __file__, 1, msg, None, None,
    )
    for key, val in extra.items():
        setattr(record, key, val)
    return record


def test_json_formatter_base_fields():
    out = json.loads(JSONFormatter().format(_record("hello")))
    assert out["level"] == "ERROR"
    assert out["logger"] == "pokedex_gateway.test"
    assert out["message"] == "hello"
    assert "timestamp" in out


def test_json_formatter_surfaces_known_extras():
    out = json.loads(JSONFormatter().format(_record(
        "bad record",
        error_code="NON_NUMERIC_ID",
        record_url="https://pokeapi.co/api/v2/pokemon/abc/",
        unrelated="ignored",
    )))
    assert out["error_code"] == "NON_NUMERIC_ID"
    assert out["record_url"] == "https://pokeapi.co/api/v2/pokemon/abc/"
    assert "unrelated" not in out


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record("failed")
        record.exc_info = sys.exc_info()
    out = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in out["exception"]


@pytest.mark.parametrize("fmt, formatter_type", [
    ("json", JSONFormatter),
    ("text", logging.Formatter),
])
def test_setup_logging_installs_handler(fmt, formatter_type):
    previous_level = logging.root.level
    handler = setup_logging("debug", fmt)
    try:
        assert handler in logging.root.handlers
        assert isinstance(handler.formatter, formatter_type)
        assert logging.root.level == logging.DEBUG
    finally:
        logging.root.removeHandler(handler)
        logging.root.setLevel(previous_level)

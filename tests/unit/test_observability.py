"""Tests for structured logging."""

import json
import logging

from shamba.observability.logging import (
    JSONFormatter,
    correlation_id,
    get_correlation_id,
    setup_logging,
)


def _record(msg: str = "test message", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="shamba.test",
        level=logging.INFO,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=None,
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    def test_json_formatter_output(self):
        parsed = json.loads(JSONFormatter().format(_record()))
        assert parsed["level"] == "INFO"
        assert parsed["logger"] == "shamba.test"
        assert parsed["message"] == "test message"
        assert "timestamp" in parsed
        assert "correlation_id" not in parsed

    def test_includes_correlation_id(self):
        token = correlation_id.set("test-123")
        try:
            parsed = json.loads(JSONFormatter().format(_record()))
            assert parsed["correlation_id"] == "test-123"
        finally:
            correlation_id.reset(token)

    def test_includes_location_extras(self):
        record = _record(county="Nyeri", subcounty="Kieni West", ward="Mweiga", zone="zone III", duration_ms=1.5)
        parsed = json.loads(JSONFormatter().format(record))
        assert parsed["county"] == "Nyeri"
        assert parsed["subcounty"] == "Kieni West"
        assert parsed["ward"] == "Mweiga"
        assert parsed["zone"] == "zone III"
        assert parsed["duration_ms"] == 1.5

    async def test_correlation_id_propagation(self):
        results = []

        async def inner():
            results.append(get_correlation_id())

        token = correlation_id.set("async-456")
        try:
            await inner()
        finally:
            correlation_id.reset(token)

        assert results == ["async-456"]

    def test_setup_logging_json(self):
        setup_logging(json_format=True, level="WARNING")
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
        assert root.level == logging.WARNING
        # Restore default for other tests
        setup_logging(json_format=False, level="INFO")

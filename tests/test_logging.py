"""Tests for sage.config.logging: formatters and helpers."""

import json
import logging

from sage.config.logging import ConsoleFormatter, JSONFormatter, log_banner, log_kv


def _record(msg="hello %s", args=("world",), **extra) -> logging.LogRecord:
    record = logging.LogRecord("sage.test", logging.INFO, __file__, 1, msg, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    def test_fields(self):
        entry = json.loads(JSONFormatter().format(_record()))
        assert entry["level"] == "INFO"
        assert entry["logger"] == "sage.test"
        assert entry["message"] == "hello world"
        assert "timestamp" in entry

    def test_extra_fields_merged(self):
        entry = json.loads(JSONFormatter().format(_record(intent="sleep", product_ids=[1, 5])))
        assert entry["intent"] == "sleep"
        assert entry["product_ids"] == [1, 5]


class TestConsoleFormatter:
    def test_extras_appended(self):
        line = ConsoleFormatter().format(_record(intent="pain"))
        assert "hello world" in line
        assert line.endswith("[intent=pain]")

    def test_plain_line(self):
        line = ConsoleFormatter().format(_record())
        assert not line.endswith("]")


class TestHelpers:
    def test_banner_and_kv(self, caplog):
        logger = logging.getLogger("sage.test.helpers")
        with caplog.at_level(logging.INFO, logger="sage.test.helpers"):
            log_banner(logger, "TITLE", width=10)
            log_kv(logger, "Score", 0.5)
        messages = [r.getMessage() for r in caplog.records]
        assert messages == ["=" * 10, "TITLE", "=" * 10, "  Score: 0.50"]

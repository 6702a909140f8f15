"""Tests for logging setup and formatters."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterator

import pytest

from rondomundi.core.context import get_correlation_id, set_correlation_id
from rondomundi.core.logging import (
    CorrelationFilter,
    JSONFormatter,
    TextFormatter,
    setup_logging,
)


def _record(msg: str = "Lottery %s created", *args: object, **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        "rondomundi.test", logging.INFO, __file__, 1, msg, args or ("L1",), None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestJSONFormatter:
    def test_basic_fields(self):
        entry = json.loads(JSONFormatter().format(_record()))
        assert entry["level"] == "INFO"
        assert entry["logger"] == "rondomundi.test"
        assert entry["message"] == "Lottery L1 created"
        assert "correlation_id" not in entry

    def test_correlation_and_extras(self):
        record = _record(correlation_id="cid42", lottery_id="L1")
        entry = json.loads(JSONFormatter().format(record))
        assert entry["correlation_id"] == "cid42"
        assert entry["extra"] == {"lottery_id": "L1"}

    def test_exception_info(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()
        entry = json.loads(JSONFormatter().format(record))
        assert entry["exception"] == {"type": "ValueError", "message": "boom"}


class TestTextFormatter:
    def test_appends_correlation_id(self):
        line = TextFormatter().format(_record(correlation_id="cid42"))
        assert "rondomundi.test: Lottery L1 created" in line
        assert line.endswith("[cid=cid42]")

    def test_without_correlation_id(self):
        assert "cid=" not in TextFormatter().format(_record())


class TestCorrelation:
    def test_filter_copies_context_value(self):
        set_correlation_id("ctx-1")
        record = _record()
        assert CorrelationFilter().filter(record) is True
        assert record.correlation_id == "ctx-1"
        assert get_correlation_id() == "ctx-1"


@pytest.mark.usefixtures("restore_root_logger")
class TestSetupLogging:
    @pytest.mark.parametrize(
        ("log_format", "formatter"), [("json", JSONFormatter), ("text", TextFormatter)]
    )
    def test_installs_single_handler(self, log_format: str, formatter: type):
        setup_logging(level="debug", log_format=log_format)
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, formatter)

    def test_unknown_level_falls_back_to_info(self):
        setup_logging(level="chatty")
        assert logging.getLogger().level == logging.INFO

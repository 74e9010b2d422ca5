"""
Tests for logging configuration and correlation ID propagation.

System role: Verification of the logging spine
"""

import logging

import pytest

from tourbook.observability import configure_logging, get_correlation_id, set_correlation_id
from tourbook.observability.correlation import clear_correlation_id
from tourbook.observability.logger import CorrelationIdFilter


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    clear_correlation_id()


def _record() -> logging.LogRecord:
    return logging.LogRecord("tourbook", logging.INFO, __file__, 1, "hello", None, None)


class TestCorrelationIdFilter:
    def test_filter_stamps_dash_outside_a_request(self) -> None:
        record = _record()

        assert CorrelationIdFilter().filter(record) is True
        assert record.correlation_id == "-"

    def test_filter_stamps_current_correlation_id(self) -> None:
        set_correlation_id("abc-123")
        record = _record()

        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "abc-123"


class TestCorrelationContext:
    def test_set_without_value_generates_one(self) -> None:
        value = set_correlation_id()

        assert value
        assert get_correlation_id() == value


class TestConfigureLogging:
    def test_configure_replaces_handlers_and_sets_level(self) -> None:
        configure_logging("debug")
        configure_logging("warning")

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING
        assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)

    def test_unknown_level_falls_back_to_info(self) -> None:
        configure_logging("chatty")

        assert logging.getLogger().level == logging.INFO

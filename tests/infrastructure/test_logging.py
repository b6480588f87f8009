"""Tests for centralized logging."""

import json
import logging

from azticket.infrastructure.logging import JSONFormatter, configure_logging, resolve_level


class TestConfigureLogging:
    def test_level(self):
        configure_logging(level=logging.INFO)
        assert logging.getLogger("azticket").level == logging.INFO

    def test_json_format(self):
        configure_logging(level=logging.INFO, json_format=True)
        logger = logging.getLogger("azticket")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_human_format(self):
        configure_logging(level=logging.INFO, json_format=False)
        logger = logging.getLogger("azticket")
        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_replaces_handlers(self):
        configure_logging(level=logging.INFO)
        configure_logging(level=logging.DEBUG)
        assert len(logging.getLogger("azticket").handlers) == 1


class TestResolveLevel:
    def test_debug_wins(self):
        assert resolve_level(debug=True, verbose=True, configured="ERROR") == logging.DEBUG

    def test_verbose(self):
        assert resolve_level(verbose=True) == logging.INFO

    def test_configured_name(self):
        assert resolve_level(configured="error") == logging.ERROR

    def test_unknown_name_falls_back_to_warning(self):
        assert resolve_level(configured="LOUD") == logging.WARNING


class TestJSONFormatter:
    def test_format_basic(self):
        record = logging.LogRecord(
            name="azticket.test",
            level=logging.WARNING,
            pathname="test.py",
            lineno=1,
            msg="Pattern '%s' matched %d services",
            args=("virtual", 2),
            exc_info=None,
        )
        entry = json.loads(JSONFormatter().format(record))
        assert entry["level"] == "WARNING"
        assert entry["logger"] == "azticket.test"
        assert entry["message"] == "Pattern 'virtual' matched 2 services"
        assert "timestamp" in entry

    def test_format_with_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            import sys
            exc_info = sys.exc_info()
        record = logging.LogRecord(
            name="azticket.test",
            level=logging.ERROR,
            pathname="test.py",
            lineno=1,
            msg="failed",
            args=(),
            exc_info=exc_info,
        )
        entry = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in entry["exception"]

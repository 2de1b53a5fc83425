"""
Unit Tests for Centralized Logging.

Tests the logging configuration and source handling.
"""

import logging
import sys
from unittest.mock import MagicMock

import pytest

from httpie_lite.core.logging import VALID_SOURCES, get_logger, log_with_source, setup_logging


class TestValidSources:
    """Tests for VALID_SOURCES constant."""

    def test_valid_sources_contains_expected_values(self):
        assert VALID_SOURCES == frozenset({"cli", "http", "render", "internal"})

    def test_valid_sources_is_frozenset(self):
        assert isinstance(VALID_SOURCES, frozenset)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_level_override(self):
        setup_logging(level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_default_level_comes_from_config(self):
        setup_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_single_handler_writes_to_stderr(self):
        setup_logging(level="INFO")
        setup_logging(level="INFO")

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert handlers[0].stream is sys.stderr

    def test_http_library_loggers_are_quieted(self):
        setup_logging(level="DEBUG")
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_json_format_emits_source_field(self, capsys):
        setup_logging(level="INFO", format_type="json")

        log_with_source(get_logger("tests.logging"), "http", "info", "Response received", status_code=200)

        err = capsys.readouterr().err
        assert '"source": "http"' in err
        assert '"status_code": 200' in err


class TestLogWithSource:
    """Tests for log_with_source."""

    def test_passes_source_and_fields(self):
        logger = MagicMock()

        log_with_source(logger, "cli", "info", "Parsed command", command="get")

        logger.info.assert_called_once_with("Parsed command", source="cli", command="get")

    def test_level_is_case_insensitive(self):
        logger = MagicMock()

        log_with_source(logger, "http", "ERROR", "Request failed")

        logger.error.assert_called_once_with("Request failed", source="http")

    def test_invalid_level_raises(self):
        logger = MagicMock(spec=["info"])

        with pytest.raises(AttributeError):
            log_with_source(logger, "cli", "loud", "Nope")

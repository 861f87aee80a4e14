#!/usr/bin/env python
"""Unit tests for the loguru wrapper and the package exceptions."""

import pytest

from fast_utc.utils.loguru_setup import FastUtcLogger, logger
from fast_utc.utils.time_exceptions import (
    ConfigurationError,
    FastUtcError,
    InvalidFrequencyError,
    InvalidStepError,
    SerializationError,
    ZeroDurationError,
)


@pytest.fixture
def restore_level():
    """Reset the global logger level after a test changes it."""
    level = logger.getEffectiveLevel()
    yield
    logger.configure_level(level)


class TestFastUtcLogger:
    """Test cases for FastUtcLogger configuration."""

    def test_configure_level_is_chainable(self, restore_level):
        assert logger.configure_level("debug") is logger
        assert logger.getEffectiveLevel() == "DEBUG"

    def test_is_enabled_for(self, restore_level):
        logger.configure_level("WARNING")
        assert logger.isEnabledFor("error")
        assert logger.isEnabledFor("WARNING")
        assert not logger.isEnabledFor("INFO")

    def test_configure_file_is_chainable(self, tmp_path):
        try:
            assert logger.configure_file(tmp_path / "logs" / "fast_utc.log") is logger
            assert (tmp_path / "logs").is_dir()
        finally:
            logger.configure_file(None)

    def test_disable_colors_is_chainable(self, restore_level):
        disabled = logger._disable_colors
        try:
            assert logger.disable_colors().configure_level("INFO") is logger
            assert logger._disable_colors is True
            assert logger.disable_colors(False)._disable_colors is False
        finally:
            logger.disable_colors(disabled)

    def test_add_and_remove_sink(self):
        messages = []
        handler_id = logger.add_sink(lambda m: messages.append(m.record["message"]), level="DEBUG")
        logger.debug("captured")
        logger.remove_sink(handler_id)
        logger.debug("not captured")
        assert messages == ["captured"]

    def test_records_caller_location(self):
        records = []
        handler_id = logger.add_sink(lambda m: records.append(m.record), level="DEBUG")
        try:
            logger.warning("where am I")
        finally:
            logger.remove_sink(handler_id)
        assert records[0]["function"] == "test_records_caller_location"

    def test_global_instance(self):
        assert isinstance(logger, FastUtcLogger)


class TestExceptions:
    """Test cases for the exception hierarchy."""

    def test_zero_duration_error(self):
        error = ZeroDurationError("division")
        assert isinstance(error, FastUtcError)
        assert isinstance(error, ZeroDivisionError)
        assert error.operation == "division"
        assert str(error) == "division by a zero duration"

    @pytest.mark.parametrize(
        "error",
        [
            InvalidStepError(0),
            InvalidFrequencyError(-1),
            ConfigurationError("bad"),
            SerializationError("bad"),
        ],
    )
    def test_value_errors(self, error):
        assert isinstance(error, FastUtcError)
        assert isinstance(error, ValueError)

    def test_default_message(self):
        assert FastUtcError().message == "fast_utc error occurred"

    def test_errors_are_logged(self, log_messages):
        InvalidStepError(-5)
        assert "InvalidStepError: TimeRange step must be positive, got -5ms" in log_messages

#!/usr/bin/env python3
"""Loguru-based logging for fast_utc.

The package logs sparingly: which clock source was bound at import, updater
thread lifecycle, range construction and error paths. Everything else is pure
arithmetic and stays silent.

Basic Usage Examples:
    from fast_utc.utils.loguru_setup import logger

    logger.configure_level("DEBUG")
    logger.debug("Debug message")

Environment Variables:
    FAST_UTC_LOG_LEVEL: Global log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    FAST_UTC_LOG_FILE: Optional log file path for file output
    FAST_UTC_DISABLE_COLORS: Set to "true" to disable colored output
"""

import os
import sys
from pathlib import Path

from loguru import logger as _loguru_logger

# Remove default loguru handler to have full control
_loguru_logger.remove()

DEFAULT_LOG_LEVEL = os.getenv("FAST_UTC_LOG_LEVEL", "ERROR").upper()
LOG_FILE = os.getenv("FAST_UTC_LOG_FILE")
DISABLE_COLORS = os.getenv("FAST_UTC_DISABLE_COLORS", "false").lower() == "true"

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

SIMPLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"

LEVEL_HIERARCHY = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class FastUtcLogger:
    """Thin wrapper around loguru with environment-driven configuration."""

    def __init__(self) -> None:
        """Initialize the logger from the environment."""
        self._current_level = DEFAULT_LOG_LEVEL
        self._log_file = LOG_FILE
        self._disable_colors = DISABLE_COLORS
        self._setup_logger()

    def _setup_logger(self) -> None:
        _loguru_logger.remove()

        format_template = SIMPLE_FORMAT if self._disable_colors else LOG_FORMAT

        _loguru_logger.add(
            sys.stderr,
            level=self._current_level,
            format=format_template,
            colorize=not self._disable_colors,
            backtrace=True,
            diagnose=True,
        )

        if self._log_file:
            log_path = Path(self._log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            _loguru_logger.add(
                str(log_path),
                level=self._current_level,
                format=SIMPLE_FORMAT,
                rotation="10 MB",
                retention="1 week",
                compression="zip",
                backtrace=True,
                diagnose=True,
            )

    def configure_level(self, level: str) -> "FastUtcLogger":
        """Configure the log level.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

        Returns:
            Self for method chaining
        """
        self._current_level = level.upper()
        self._setup_logger()
        return self

    def configure_file(self, log_file: str | Path | None) -> "FastUtcLogger":
        """Configure file logging.

        Args:
            log_file: Path to log file, or None to disable file logging

        Returns:
            Self for method chaining
        """
        self._log_file = str(log_file) if log_file else None
        self._setup_logger()
        return self

    def disable_colors(self, disable: bool = True) -> "FastUtcLogger":
        """Enable or disable colored output."""
        self._disable_colors = disable
        self._setup_logger()
        return self

    def debug(self, message: str, *args, **kwargs):
        _loguru_logger.opt(depth=1).debug(message, *args, **kwargs)
        return self

    def warning(self, message: str, *args, **kwargs):
        _loguru_logger.opt(depth=1).warning(message, *args, **kwargs)
        return self

    def error(self, message: str, *args, **kwargs):
        _loguru_logger.opt(depth=1).error(message, *args, **kwargs)
        return self

    def getEffectiveLevel(self) -> str:
        """Get the effective log level."""
        return self._current_level

    def isEnabledFor(self, level: str) -> bool:
        """Check if logging is enabled for the given level."""
        return LEVEL_HIERARCHY.index(level.upper()) >= LEVEL_HIERARCHY.index(self._current_level)

    def add_sink(self, sink, **kwargs) -> int:
        """Attach an extra loguru sink, returning its handler id."""
        return _loguru_logger.add(sink, **kwargs)

    def remove_sink(self, handler_id: int) -> None:
        """Detach a sink previously attached with add_sink."""
        _loguru_logger.remove(handler_id)


# Create the global logger instance
logger = FastUtcLogger()

#!/usr/bin/env python3
"""Custom exceptions for fast_utc.

Each exception also derives from the builtin that callers would naturally
catch (ZeroDivisionError, ValueError), so code that does not know about this
package still handles them correctly.
"""

from fast_utc.utils.loguru_setup import logger


class FastUtcError(Exception):
    """Base exception for all fast_utc errors."""

    def __init__(self, message="fast_utc error occurred") -> None:
        """Initialize FastUtcError with an error message.

        Args:
            message: Error description.
        """
        self.message = message
        super().__init__(self.message)
        logger.error(f"{type(self).__name__}: {message}")


class ZeroDurationError(FastUtcError, ZeroDivisionError):
    """Exception raised when dividing or aligning by a zero duration."""

    def __init__(self, operation: str) -> None:
        """Initialize ZeroDurationError.

        Args:
            operation: Name of the operation that received the zero divisor.
        """
        self.operation = operation
        super().__init__(f"{operation} by a zero duration")


class InvalidStepError(FastUtcError, ValueError):
    """Exception raised when a TimeRange is built with a non-positive step."""

    def __init__(self, step_ms: int) -> None:
        """Initialize InvalidStepError.

        Args:
            step_ms: The rejected step in milliseconds.
        """
        self.step_ms = step_ms
        super().__init__(f"TimeRange step must be positive, got {step_ms}ms")


class InvalidFrequencyError(FastUtcError, ValueError):
    """Exception raised when aligning to a negative frequency."""

    def __init__(self, freq_ms: int) -> None:
        """Initialize InvalidFrequencyError.

        Args:
            freq_ms: The rejected frequency in milliseconds.
        """
        self.freq_ms = freq_ms
        super().__init__(f"Alignment frequency must be positive, got {freq_ms}ms")


class ConfigurationError(FastUtcError, ValueError):
    """Exception raised for an invalid environment configuration."""


class SerializationError(FastUtcError, ValueError):
    """Exception raised when serialized input cannot be decoded."""

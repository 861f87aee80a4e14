#!/usr/bin/env python
"""Centralized configuration for fast_utc.

Unit constants and the import-time ("build-time") switches live here. The
switches are read from the environment exactly once, when this module is first
imported; changing the environment afterwards has no effect on a running
process.
"""

import os
from enum import Enum
from typing import Final

from fast_utc.utils.time_exceptions import ConfigurationError

# Millisecond factors
MILLIS_PER_SECOND: Final = 1_000
MILLIS_PER_MINUTE: Final = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR: Final = 60 * MILLIS_PER_MINUTE
MILLIS_PER_DAY: Final = 24 * MILLIS_PER_HOUR

# Sub-millisecond factors
MICROS_PER_MILLI: Final = 1_000
NANOS_PER_MILLI: Final = 1_000_000
NANOS_PER_SECOND: Final = 1_000_000_000


class ClockSource(Enum):
    """Strategies for producing the current instant.

    Attributes:
        PRECISE: Ask the calendar library (pendulum) on every call
        COARSE: Read a process-wide cached value refreshed by an updater
    """

    PRECISE = "precise"
    COARSE = "coarse"

    @classmethod
    def parse(cls, value: str) -> "ClockSource":
        """Parse a clock source name, case-insensitively.

        Raises:
            ConfigurationError: If the name is not a known clock source
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            valid = ", ".join(source.value for source in cls)
            raise ConfigurationError(f"Unknown clock source {value!r}; expected one of: {valid}") from None


def _parse_positive_int(name: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return value


CLOCK_SOURCE: Final[ClockSource] = ClockSource.parse(os.getenv("FAST_UTC_CLOCK_SOURCE", ClockSource.PRECISE.value))

# Default refresh period for the coarse clock updater thread
COARSE_UPDATE_PERIOD_MS: Final[int] = _parse_positive_int(
    "FAST_UTC_COARSE_UPDATE_PERIOD_MS",
    os.getenv("FAST_UTC_COARSE_UPDATE_PERIOD_MS", "1"),
)

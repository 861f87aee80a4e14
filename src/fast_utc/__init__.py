"""fast_utc - Dumb but fast UTC timestamps.

This package provides a compact UTC time layer built on plain integers:

- **Timestamp**: signed milliseconds since the Unix epoch
- **TimeDelta**: signed millisecond duration with truncating integer division
- **TimeRange**: lazy iterator over evenly spaced timestamps
- **Clock sources**: a precise pendulum-backed "now" or a cached coarse one,
  chosen once at import time via ``FAST_UTC_CLOCK_SOURCE``

Calendar-aware work (display, formatting, parsing) happens at the boundary
through pendulum, see ``fast_utc.utils.time.conversion``.

Quick Start:
    >>> from fast_utc import TimeDelta, TimeRange, Timestamp
    >>>
    >>> start = Timestamp.now().align_to(TimeDelta.from_minutes(5))
    >>> end = start + TimeDelta.from_hours(1)
    >>> bars = list(TimeRange.right_open(start, end, TimeDelta.from_minutes(5)))
    >>> len(bars)
    12
"""

__version__ = "0.1.0"

from typing import Any


# Lazy imports; the clock source is bound on first use of Timestamp
def __getattr__(name: str) -> Any:
    """Lazy import for main package exports."""
    if name == "TimeDelta":
        from .core.time_delta import TimeDelta

        return TimeDelta
    if name in ("Timestamp", "UtcTimeStamp"):
        from .core import timestamp

        return getattr(timestamp, name)
    if name == "TimeRange":
        from .core.time_range import TimeRange

        return TimeRange
    if name == "FastUtcError":
        from .utils.time_exceptions import FastUtcError

        return FastUtcError
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = [
    "FastUtcError",
    "TimeDelta",
    "TimeRange",
    "Timestamp",
    "UtcTimeStamp",
]

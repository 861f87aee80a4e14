"""Core value types: Timestamp, TimeDelta and TimeRange."""

from typing import Any


def __getattr__(name: str) -> Any:
    """Lazy import so the conversion layer can import single core modules."""
    if name == "TimeDelta":
        from .time_delta import TimeDelta

        return TimeDelta
    if name in ("Timestamp", "UtcTimeStamp"):
        from . import timestamp

        return getattr(timestamp, name)
    if name == "TimeRange":
        from .time_range import TimeRange

        return TimeRange
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = ["TimeDelta", "TimeRange", "Timestamp", "UtcTimeStamp"]

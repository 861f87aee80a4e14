#!/usr/bin/env python
"""Millisecond precision signed duration.

TimeDelta wraps a single signed integer of milliseconds. All arithmetic is
integer arithmetic; division truncates toward zero like native fixed-width
integers, not toward negative infinity like Python's ``//``.

Example:
    >>> from fast_utc.core.time_delta import TimeDelta
    >>> TimeDelta.from_minutes(5) / TimeDelta.from_seconds(7)
    42
    >>> TimeDelta.from_milliseconds(-7) / 2
    TimeDelta(millis=-3)
    >>> TimeDelta.from_milliseconds(-7) % TimeDelta.from_milliseconds(2)
    TimeDelta(millis=-1)
"""

from __future__ import annotations

from datetime import timedelta

import attr
import pendulum

from fast_utc.utils.config import MILLIS_PER_HOUR, MILLIS_PER_MINUTE, MILLIS_PER_SECOND, NANOS_PER_MILLI
from fast_utc.utils.time.arithmetic import trunc_div, trunc_rem
from fast_utc.utils.time_exceptions import ZeroDurationError
from fast_utc.utils.validation import validate_millis

__all__ = [
    "TimeDelta",
]


@attr.define(slots=True, frozen=True, order=True)
class TimeDelta:
    """Signed span of time in whole milliseconds.

    Positive, negative and zero values are all meaningful; the sign is the
    direction of the difference between two instants.

    Attributes:
        millis: Length of the span in milliseconds
    """

    millis: int = attr.field(validator=validate_millis)

    @classmethod
    def zero(cls) -> TimeDelta:
        return cls(0)

    @classmethod
    def from_hours(cls, hours: int) -> TimeDelta:
        return cls(hours * MILLIS_PER_HOUR)

    @classmethod
    def from_minutes(cls, minutes: int) -> TimeDelta:
        return cls(minutes * MILLIS_PER_MINUTE)

    @classmethod
    def from_seconds(cls, seconds: int) -> TimeDelta:
        return cls(seconds * MILLIS_PER_SECOND)

    @classmethod
    def from_milliseconds(cls, millis: int) -> TimeDelta:
        return cls(millis)

    @classmethod
    def from_nanoseconds(cls, nanos: int) -> TimeDelta:
        """Build a delta from nanoseconds, truncating toward zero."""
        return cls(trunc_div(nanos, NANOS_PER_MILLI))

    @classmethod
    def from_timedelta(cls, td: timedelta) -> TimeDelta:
        """Build a delta from a stdlib or pendulum timedelta (see conversion.timedelta_to_delta)."""
        from fast_utc.utils.time.conversion import timedelta_to_delta

        return timedelta_to_delta(td)

    def as_milliseconds(self) -> int:
        return self.millis

    def as_seconds(self) -> int:
        """Whole seconds in the delta, truncated toward zero."""
        return trunc_div(self.millis, MILLIS_PER_SECOND)

    def to_duration(self) -> pendulum.Duration:
        """Convert to a pendulum Duration."""
        from fast_utc.utils.time.conversion import delta_to_duration

        return delta_to_duration(self)

    def is_zero(self) -> bool:
        return self.millis == 0

    def is_positive(self) -> bool:
        return self.millis > 0

    def is_negative(self) -> bool:
        return self.millis < 0

    # Named operations

    def add(self, other: TimeDelta) -> TimeDelta:
        return TimeDelta(self.millis + other.millis)

    def subtract(self, other: TimeDelta) -> TimeDelta:
        return TimeDelta(self.millis - other.millis)

    def scale(self, factor: int) -> TimeDelta:
        """Multiply the delta to be ``factor`` times as long."""
        return TimeDelta(self.millis * factor)

    def divide(self, divisor: int | TimeDelta) -> TimeDelta | int:
        """Truncating division.

        Dividing by an int shortens the delta and returns a TimeDelta. Dividing
        by another TimeDelta returns how many whole times it fits, as an int.

        Raises:
            ZeroDurationError: If divisor is zero
        """
        if isinstance(divisor, TimeDelta):
            if divisor.millis == 0:
                raise ZeroDurationError("division")
            return trunc_div(self.millis, divisor.millis)
        if divisor == 0:
            raise ZeroDurationError("division")
        return TimeDelta(trunc_div(self.millis, divisor))

    def remainder(self, divisor: TimeDelta) -> TimeDelta:
        """How far the delta is from being a multiple of ``divisor``.

        The sign follows the dividend, so
        ``a.divide(b) * b + a.remainder(b) == a`` always holds.

        Raises:
            ZeroDurationError: If divisor is zero
        """
        if divisor.millis == 0:
            raise ZeroDurationError("remainder")
        return TimeDelta(trunc_rem(self.millis, divisor.millis))

    def negate(self) -> TimeDelta:
        return TimeDelta(-self.millis)

    def abs(self) -> TimeDelta:
        return TimeDelta(abs(self.millis))

    # Operators

    def __add__(self, other):
        if isinstance(other, TimeDelta):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, TimeDelta):
            return self.subtract(other)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, int) and not isinstance(other, bool):
            return self.scale(other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, TimeDelta) or (isinstance(other, int) and not isinstance(other, bool)):
            return self.divide(other)
        return NotImplemented

    def __mod__(self, other):
        if isinstance(other, TimeDelta):
            return self.remainder(other)
        return NotImplemented

    def __neg__(self) -> TimeDelta:
        return self.negate()

    def __pos__(self) -> TimeDelta:
        return self

    def __abs__(self) -> TimeDelta:
        return self.abs()

    def __str__(self) -> str:
        # ISO 8601 duration, e.g. PT90.5S or -PT0.001S
        sign = "-" if self.millis < 0 else ""
        seconds, millis = divmod(abs(self.millis), MILLIS_PER_SECOND)
        if millis:
            return f"{sign}PT{seconds}.{millis:03d}".rstrip("0") + "S"
        return f"{sign}PT{seconds}S"

#!/usr/bin/env python
"""Millisecond precision UTC timestamp.

Timestamp is a dumb but fast UTC instant: a single signed count of
milliseconds since 1970-01-01T00:00:00 UTC. There is no range restriction;
instants before the epoch are negative and are never clamped.

Example:
    >>> from fast_utc.core.time_delta import TimeDelta
    >>> from fast_utc.core.timestamp import Timestamp
    >>> ts = Timestamp.from_seconds(90)
    >>> ts.align_to(TimeDelta.from_minutes(1))
    Timestamp(millis_since_epoch=60000)
    >>> Timestamp.from_milliseconds(-1).align_to(TimeDelta.from_seconds(1))
    Timestamp(millis_since_epoch=-1000)
"""

from __future__ import annotations

from datetime import datetime

import attr
import pendulum

from fast_utc.core.time_delta import TimeDelta
from fast_utc.utils import clock
from fast_utc.utils.config import MILLIS_PER_SECOND, NANOS_PER_MILLI
from fast_utc.utils.time_exceptions import InvalidFrequencyError, ZeroDurationError
from fast_utc.utils.validation import validate_millis

__all__ = [
    "Timestamp",
    "UtcTimeStamp",
]


@attr.define(slots=True, frozen=True, order=True)
class Timestamp:
    """Absolute UTC instant in whole milliseconds since the Unix epoch.

    Attributes:
        millis_since_epoch: Signed milliseconds since 1970-01-01T00:00:00 UTC
    """

    millis_since_epoch: int = attr.field(validator=validate_millis)

    @classmethod
    def zero(cls) -> Timestamp:
        """The epoch, ``1970-01-01 00:00:00 UTC``."""
        return cls(0)

    @classmethod
    def now(cls) -> Timestamp:
        """Current instant from the clock source selected at import time.

        With ``FAST_UTC_CLOCK_SOURCE=coarse`` this is the cached value and may
        lag wall-clock time by the refresh interval; see fast_utc.utils.clock.
        """
        return cls(clock.now_millis())

    @classmethod
    def from_milliseconds(cls, millis: int) -> Timestamp:
        return cls(millis)

    @classmethod
    def from_seconds(cls, seconds: int) -> Timestamp:
        return cls(seconds * MILLIS_PER_SECOND)

    @classmethod
    def from_nanoseconds(cls, nanos: int) -> Timestamp:
        """Build a timestamp from unsigned nanoseconds since the epoch.

        The sub-millisecond remainder is discarded, not rounded:
        ``from_nanoseconds(1_999_999)`` is 1 ms.

        Raises:
            ValueError: If nanos is negative
        """
        if nanos < 0:
            raise ValueError(f"Nanoseconds since epoch must be non-negative, got {nanos}")
        return cls(nanos // NANOS_PER_MILLI)

    @classmethod
    def from_datetime(cls, dt: datetime) -> Timestamp:
        """Build a timestamp from a datetime (see conversion.datetime_to_timestamp)."""
        from fast_utc.utils.time.conversion import datetime_to_timestamp

        return datetime_to_timestamp(dt)

    def as_milliseconds(self) -> int:
        return self.millis_since_epoch

    def as_seconds(self) -> int:
        """Whole seconds since the epoch, floored."""
        return self.millis_since_epoch // MILLIS_PER_SECOND

    def as_nanoseconds(self) -> int:
        return self.millis_since_epoch * NANOS_PER_MILLI

    def to_datetime(self) -> pendulum.DateTime:
        """Convert to a pendulum DateTime in UTC."""
        from fast_utc.utils.time.conversion import timestamp_to_datetime

        return timestamp_to_datetime(self)

    def is_zero(self) -> bool:
        """Check whether the timestamp is the epoch."""
        return self.millis_since_epoch == 0

    def add(self, delta: TimeDelta) -> Timestamp:
        return Timestamp(self.millis_since_epoch + delta.millis)

    def subtract(self, delta: TimeDelta) -> Timestamp:
        return Timestamp(self.millis_since_epoch - delta.millis)

    def since(self, earlier: Timestamp) -> TimeDelta:
        """Signed delta from ``earlier`` to this timestamp; positive if this one is later."""
        return TimeDelta(self.millis_since_epoch - earlier.millis_since_epoch)

    def align_to(self, freq: TimeDelta) -> Timestamp:
        """Floor the timestamp to a multiple of ``freq`` counted from the epoch."""
        return self.align_to_anchored(Timestamp.zero(), freq)

    def align_to_anchored(self, anchor: Timestamp, freq: TimeDelta) -> Timestamp:
        """Floor the timestamp to a multiple of ``freq`` counted from ``anchor``.

        The result ``a`` satisfies ``a <= self < a + freq`` and ``a - anchor``
        is an exact multiple of ``freq``, whether ``self`` lies before or after
        the anchor and before or after the epoch.

        Args:
            anchor: Instant the frequency grid is laid out from
            freq: Grid spacing, must be positive

        Raises:
            ZeroDurationError: If freq is zero
            InvalidFrequencyError: If freq is negative
        """
        freq_ms = freq.millis
        if freq_ms == 0:
            raise ZeroDurationError("alignment")
        if freq_ms < 0:
            raise InvalidFrequencyError(freq_ms)

        offset = self.millis_since_epoch - anchor.millis_since_epoch
        # Floored modulo: 0 <= offset % freq_ms < freq_ms for any sign of offset
        return Timestamp(self.millis_since_epoch - offset % freq_ms)

    def __add__(self, other):
        if isinstance(other, TimeDelta):
            return self.add(other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Timestamp):
            return self.since(other)
        if isinstance(other, TimeDelta):
            return self.subtract(other)
        return NotImplemented

    def __str__(self) -> str:
        try:
            return self.to_datetime().isoformat()
        except OverflowError:
            # Outside years 1..9999
            return f"Timestamp({self.millis_since_epoch})"


# Long-form alias
UtcTimeStamp = Timestamp

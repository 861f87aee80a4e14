#!/usr/bin/env python
"""Integer epoch arithmetic on stdlib datetimes.

These helpers never go through floats: ``datetime.timestamp()`` and
``timedelta.total_seconds()`` lose microseconds far from the epoch, so
everything is derived from the integer calendar fields.
"""

import calendar
from datetime import datetime, timedelta, timezone

from fast_utc.utils.config import MICROS_PER_MILLI, MILLIS_PER_SECOND

__all__ = [
    "EPOCH",
    "datetime_to_epoch_millis",
    "epoch_millis_to_datetime",
    "timedelta_to_micros",
]

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_ONE_MICROSECOND = timedelta(microseconds=1)


def timedelta_to_micros(td: timedelta) -> int:
    """Exact signed microsecond count of a timedelta."""
    # Read through the base class so subclasses (pendulum.Duration) agree
    return timedelta.__floordiv__(td, _ONE_MICROSECOND)


def datetime_to_epoch_millis(dt: datetime) -> int:
    """Milliseconds since the epoch of a UTC datetime.

    Sub-millisecond digits are dropped, which floors the value: the
    microsecond field is never negative, so pre-epoch instants round toward
    the past exactly like post-epoch ones.

    Args:
        dt: Datetime in UTC (naive values are read as UTC)
    """
    return calendar.timegm(dt.utctimetuple()) * MILLIS_PER_SECOND + dt.microsecond // MICROS_PER_MILLI


def epoch_millis_to_datetime(millis: int) -> datetime:
    """Aware UTC datetime for a count of epoch milliseconds.

    Raises:
        OverflowError: If the instant falls outside datetime's year 1..9999 range
    """
    return EPOCH + timedelta(milliseconds=millis)

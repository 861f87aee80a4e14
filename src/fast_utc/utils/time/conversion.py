#!/usr/bin/env python
"""Conversions between fast_utc values and calendar types.

Timestamp and TimeDelta are deliberately dumb; whenever a value needs to be
displayed, formatted or combined with calendar-aware code it crosses this
boundary into pendulum (or any stdlib ``datetime``/``timedelta``).

Conversions are explicit functions, never implicit coercions, and are exact:
a Timestamp converted to a DateTime and back yields the same value.

Example:
    >>> import pendulum
    >>> from fast_utc.utils.time.conversion import datetime_to_timestamp, timestamp_to_datetime
    >>> ts = datetime_to_timestamp(pendulum.datetime(2019, 4, 14, 12, tz="UTC"))
    >>> ts.as_milliseconds()
    1555243200000
    >>> timestamp_to_datetime(ts).isoformat()
    '2019-04-14T12:00:00+00:00'
"""

from datetime import datetime, timedelta, timezone

import pendulum

from fast_utc.core.time_delta import TimeDelta
from fast_utc.core.timestamp import Timestamp
from fast_utc.utils.config import MICROS_PER_MILLI
from fast_utc.utils.time.arithmetic import trunc_div
from fast_utc.utils.time.epoch import datetime_to_epoch_millis, epoch_millis_to_datetime, timedelta_to_micros

__all__ = [
    "as_time_delta",
    "as_timestamp",
    "datetime_to_timestamp",
    "delta_to_duration",
    "enforce_utc_timezone",
    "timedelta_to_delta",
    "timestamp_to_datetime",
]


def enforce_utc_timezone(dt: datetime) -> datetime:
    """Ensures datetime object is timezone-aware and in UTC.

    Naive datetimes are assumed to already be UTC; aware ones are converted.

    Args:
        dt: Input datetime, can be naive or timezone-aware

    Returns:
        UTC timezone-aware datetime
    """
    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def timestamp_to_datetime(ts: Timestamp) -> pendulum.DateTime:
    """Convert a Timestamp to a pendulum DateTime in UTC.

    Raises:
        OverflowError: If the timestamp falls outside years 1..9999
    """
    return pendulum.instance(epoch_millis_to_datetime(ts.as_milliseconds()))


def datetime_to_timestamp(dt: datetime) -> Timestamp:
    """Convert a datetime to a Timestamp, dropping sub-millisecond digits.

    Args:
        dt: Datetime (pendulum or stdlib); naive values are read as UTC
    """
    return Timestamp(datetime_to_epoch_millis(enforce_utc_timezone(dt)))


def delta_to_duration(delta: TimeDelta) -> pendulum.Duration:
    """Convert a TimeDelta to a pendulum Duration of the same length."""
    return pendulum.duration(milliseconds=delta.as_milliseconds())


def timedelta_to_delta(td: timedelta) -> TimeDelta:
    """Convert a timedelta (or pendulum Duration) to a TimeDelta.

    Sub-millisecond digits are truncated toward zero, so ``-1µs`` becomes a
    zero delta rather than ``-1ms``.
    """
    return TimeDelta(trunc_div(timedelta_to_micros(td), MICROS_PER_MILLI))


def as_timestamp(value: Timestamp | datetime) -> Timestamp:
    """Accept either a Timestamp or a datetime and return a Timestamp."""
    if isinstance(value, Timestamp):
        return value
    if isinstance(value, datetime):
        return datetime_to_timestamp(value)
    raise TypeError(f"Expected Timestamp or datetime, got {type(value).__name__}")


def as_time_delta(value: TimeDelta | timedelta) -> TimeDelta:
    """Accept either a TimeDelta or a timedelta and return a TimeDelta."""
    if isinstance(value, TimeDelta):
        return value
    if isinstance(value, timedelta):
        return timedelta_to_delta(value)
    raise TypeError(f"Expected TimeDelta or timedelta, got {type(value).__name__}")

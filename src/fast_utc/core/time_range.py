#!/usr/bin/env python
"""Iterator over evenly spaced timestamps.

The range is always left closed; it is right closed or right open depending
on the constructor chosen.

Example:
    >>> import pendulum
    >>> from fast_utc.core.time_range import TimeRange
    >>> start = pendulum.datetime(2019, 4, 14, tz="UTC")
    >>> end = pendulum.datetime(2019, 4, 16, tz="UTC")
    >>> [str(ts) for ts in TimeRange.right_closed(start, end, pendulum.duration(hours=12))]
    ['2019-04-14T00:00:00+00:00', '2019-04-14T12:00:00+00:00', '2019-04-15T00:00:00+00:00', '2019-04-15T12:00:00+00:00', '2019-04-16T00:00:00+00:00']
"""

from __future__ import annotations

from datetime import datetime, timedelta

import attr

from fast_utc.core.time_delta import TimeDelta
from fast_utc.core.timestamp import Timestamp
from fast_utc.utils.loguru_setup import logger
from fast_utc.utils.time.conversion import as_time_delta, as_timestamp
from fast_utc.utils.time_exceptions import InvalidStepError

__all__ = [
    "TimeRange",
]


@attr.define(slots=True)
class TimeRange:
    """Lazy, finite, forward-only sequence of timestamps.

    The cursor is mutated by iteration and exhaustion is permanent; build a
    new range to iterate again. Instances are not safe to advance from several
    threads at once.

    Attributes:
        start: First timestamp of the sequence
        end: Upper bound of the sequence
        step: Positive spacing between consecutive timestamps
        closed: Whether ``end`` itself may be emitted (right closed)
    """

    start: Timestamp = attr.field(validator=attr.validators.instance_of(Timestamp))
    end: Timestamp = attr.field(validator=attr.validators.instance_of(Timestamp))
    step: TimeDelta = attr.field(validator=attr.validators.instance_of(TimeDelta))
    closed: bool = attr.field(default=False, validator=attr.validators.instance_of(bool))
    _cursor: Timestamp | None = attr.field(init=False, default=None, repr=False, eq=False)

    @step.validator
    def _check_step(self, attribute, value: TimeDelta) -> None:
        if not value.is_positive():
            raise InvalidStepError(value.as_milliseconds())

    def __attrs_post_init__(self) -> None:
        self._cursor = self.start
        logger.debug(
            f"TimeRange [{self.start.as_milliseconds()}, {self.end.as_milliseconds()}"
            f"{']' if self.closed else ')'} step {self.step.as_milliseconds()}ms"
        )

    @classmethod
    def right_closed(
        cls,
        start: Timestamp | datetime,
        end: Timestamp | datetime,
        step: TimeDelta | timedelta,
    ) -> TimeRange:
        """Create a time range that includes the end date when a step lands on it.

        Raises:
            InvalidStepError: If step is zero or negative
        """
        return cls(as_timestamp(start), as_timestamp(end), as_time_delta(step), closed=True)

    @classmethod
    def right_open(
        cls,
        start: Timestamp | datetime,
        end: Timestamp | datetime,
        step: TimeDelta | timedelta,
    ) -> TimeRange:
        """Create a time range that excludes the end date.

        Raises:
            InvalidStepError: If step is zero or negative
        """
        return cls(as_timestamp(start), as_timestamp(end), as_time_delta(step), closed=False)

    @property
    def exhausted(self) -> bool:
        """Whether the next pull would stop the iteration."""
        return self._cursor is None or self._past_end(self._cursor)

    def _past_end(self, cursor: Timestamp) -> bool:
        if self.closed:
            return cursor > self.end
        return cursor >= self.end

    def __iter__(self) -> TimeRange:
        return self

    def __next__(self) -> Timestamp:
        cursor = self._cursor
        if cursor is None:
            raise StopIteration
        if self._past_end(cursor):
            self._cursor = None
            raise StopIteration
        self._cursor = cursor + self.step
        return cursor

    def __length_hint__(self) -> int:
        """Number of timestamps still to be emitted."""
        cursor = self._cursor
        if cursor is None or self._past_end(cursor):
            return 0
        span = (self.end - cursor).as_milliseconds()
        step = self.step.as_milliseconds()
        if self.closed:
            return span // step + 1
        return -(-span // step)

#!/usr/bin/env python
"""Unit tests for the TimeDelta value type."""

from datetime import timedelta

import attr
import pendulum
import pytest

from fast_utc.core.time_delta import TimeDelta
from fast_utc.utils.time.epoch import timedelta_to_micros
from fast_utc.utils.time_exceptions import FastUtcError, ZeroDurationError

SIGNED_PAIRS = [
    (7, 2),
    (-7, 2),
    (7, -2),
    (-7, -2),
    (0, 5),
    (6, 3),
    (-6, 3),
    (1, 1000),
    (-1, 1000),
    (123_456_789, 60_000),
    (-123_456_789, 60_000),
]


class TestTimeDeltaConstructors:
    """Test cases for TimeDelta constructors and accessors."""

    def test_zero(self):
        assert TimeDelta.zero().as_milliseconds() == 0
        assert TimeDelta.zero() == TimeDelta(0)

    def test_unit_constructors(self):
        """Each constructor multiplies by its millisecond factor."""
        assert TimeDelta.from_hours(2).as_milliseconds() == 7_200_000
        assert TimeDelta.from_minutes(-3).as_milliseconds() == -180_000
        assert TimeDelta.from_seconds(5).as_milliseconds() == 5_000
        assert TimeDelta.from_milliseconds(7).as_milliseconds() == 7

    def test_from_nanoseconds_truncates_toward_zero(self):
        assert TimeDelta.from_nanoseconds(1_999_999) == TimeDelta(1)
        assert TimeDelta.from_nanoseconds(-1_999_999) == TimeDelta(-1)
        assert TimeDelta.from_nanoseconds(999_999) == TimeDelta(0)

    def test_as_seconds_truncates_toward_zero(self):
        assert TimeDelta(1_500).as_seconds() == 1
        assert TimeDelta(-1_500).as_seconds() == -1

    def test_rejects_non_integer_millis(self):
        with pytest.raises(TypeError):
            TimeDelta(1.5)

    @pytest.mark.parametrize("flag", [True, False])
    def test_rejects_bool_millis(self, flag):
        with pytest.raises(TypeError, match="must be an int"):
            TimeDelta(flag)

    def test_is_immutable(self):
        delta = TimeDelta(5)
        with pytest.raises(attr.exceptions.FrozenInstanceError):
            delta.millis = 6

    def test_to_duration(self):
        duration = TimeDelta(1_500).to_duration()
        assert isinstance(duration, pendulum.Duration)
        assert timedelta_to_micros(duration) == 1_500_000

    def test_from_timedelta(self):
        assert TimeDelta.from_timedelta(timedelta(minutes=1, milliseconds=5)) == TimeDelta(60_005)


class TestTimeDeltaSign:
    """Test cases for the sign queries."""

    @pytest.mark.parametrize(
        "millis, zero, positive, negative",
        [
            (0, True, False, False),
            (1, False, True, False),
            (-1, False, False, True),
        ],
    )
    def test_sign_queries(self, millis, zero, positive, negative):
        delta = TimeDelta(millis)
        assert delta.is_zero() is zero
        assert delta.is_positive() is positive
        assert delta.is_negative() is negative


class TestTimeDeltaArithmetic:
    """Test cases for TimeDelta arithmetic."""

    def test_add_and_subtract(self):
        a, b = TimeDelta(1_500), TimeDelta(-400)
        assert a + b == TimeDelta(1_100)
        assert a - b == TimeDelta(1_900)
        assert a.add(b) == a + b
        assert a.subtract(b) == a - b

    def test_scale(self):
        assert TimeDelta(250) * 4 == TimeDelta(1_000)
        assert 4 * TimeDelta(250) == TimeDelta(1_000)
        assert TimeDelta(250).scale(-2) == TimeDelta(-500)

    def test_scale_rejects_non_integers(self):
        with pytest.raises(TypeError):
            TimeDelta(250) * 1.5
        with pytest.raises(TypeError):
            1.5 * TimeDelta(250)
        with pytest.raises(TypeError):
            TimeDelta(250) * True

    def test_divide_by_int_truncates(self):
        assert TimeDelta(7) / 2 == TimeDelta(3)
        assert TimeDelta(-7) / 2 == TimeDelta(-3)
        assert TimeDelta(7) / -2 == TimeDelta(-3)

    def test_divide_by_delta_returns_int_ratio(self):
        ratio = TimeDelta.from_minutes(5) / TimeDelta.from_seconds(7)
        assert ratio == 42
        assert isinstance(ratio, int)
        assert TimeDelta(-7) / TimeDelta(2) == -3

    def test_remainder_sign_follows_dividend(self):
        assert TimeDelta(-7) % TimeDelta(2) == TimeDelta(-1)
        assert TimeDelta(7) % TimeDelta(-2) == TimeDelta(1)
        assert TimeDelta(-7).remainder(TimeDelta(-2)) == TimeDelta(-1)

    @pytest.mark.parametrize("a, b", SIGNED_PAIRS)
    def test_truncating_division_identity(self, a, b):
        """(a / b) * b + (a % b) == a for every non-zero b."""
        da, db = TimeDelta(a), TimeDelta(b)
        assert db * (da / db) + da % db == da

    def test_division_by_zero(self):
        with pytest.raises(ZeroDurationError):
            TimeDelta(5) / TimeDelta.zero()
        with pytest.raises(ZeroDivisionError):
            TimeDelta(5) / 0
        with pytest.raises(FastUtcError):
            TimeDelta(5) % TimeDelta.zero()

    def test_negate_and_abs(self):
        assert -TimeDelta(5) == TimeDelta(-5)
        assert +TimeDelta(5) == TimeDelta(5)
        assert abs(TimeDelta(-5)) == TimeDelta(5)
        assert TimeDelta(-5).abs() == TimeDelta(5)

    def test_unsupported_operands(self):
        with pytest.raises(TypeError):
            TimeDelta(5) + 5
        with pytest.raises(TypeError):
            TimeDelta(5) % 2


class TestTimeDeltaOrdering:
    """Test cases for comparison and hashing."""

    def test_ordering(self):
        assert TimeDelta(-1) < TimeDelta(0) < TimeDelta(1)
        assert sorted([TimeDelta(3), TimeDelta(-3), TimeDelta(0)]) == [TimeDelta(-3), TimeDelta(0), TimeDelta(3)]

    def test_hashable(self):
        assert len({TimeDelta(1), TimeDelta(1), TimeDelta(2)}) == 2


class TestTimeDeltaDisplay:
    """Test cases for the ISO 8601 string form."""

    @pytest.mark.parametrize(
        "millis, expected",
        [
            (0, "PT0S"),
            (3_000, "PT3S"),
            (90_500, "PT90.5S"),
            (1, "PT0.001S"),
            (-1, "-PT0.001S"),
            (-61_250, "-PT61.25S"),
        ],
    )
    def test_str(self, millis, expected):
        assert str(TimeDelta(millis)) == expected

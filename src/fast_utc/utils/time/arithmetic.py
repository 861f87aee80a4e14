#!/usr/bin/env python
"""Truncating integer division helpers.

Python's ``//`` and ``%`` floor toward negative infinity. Durations divide the
way native fixed-width integers do: the quotient rounds toward zero and the
remainder takes the sign of the dividend, so that
``trunc_div(a, b) * b + trunc_rem(a, b) == a`` for every ``b != 0``.
"""

__all__ = [
    "trunc_div",
    "trunc_rem",
]


def trunc_div(dividend: int, divisor: int) -> int:
    """Integer quotient rounded toward zero.

    Raises:
        ZeroDivisionError: If divisor is zero
    """
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


def trunc_rem(dividend: int, divisor: int) -> int:
    """Remainder matching trunc_div; its sign follows the dividend."""
    return dividend - trunc_div(dividend, divisor) * divisor

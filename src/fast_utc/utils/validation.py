#!/usr/bin/env python
"""attrs validators shared by the core value types."""

import attr

__all__ = [
    "validate_millis",
]


def validate_millis(instance, attribute: attr.Attribute, value) -> None:
    """Require a plain integer millisecond count.

    ``bool`` is an ``int`` subclass but never a valid count.

    Raises:
        TypeError: If value is not an int, or is a bool
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"'{attribute.name}' must be an int, got {value!r} of type {type(value).__name__}")

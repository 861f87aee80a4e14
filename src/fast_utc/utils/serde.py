#!/usr/bin/env python
"""Optional serialization codec for Timestamp and TimeDelta.

Both types serialize transparently as their single millisecond integer, so
``Timestamp.from_milliseconds(5)`` is ``5`` on the wire. Every integer is a
valid encoding and decoding round-trips exactly.

This module is opt-in: the package root never imports it.

Example:
    >>> from fast_utc.core.timestamp import Timestamp
    >>> from fast_utc.utils import serde
    >>> serde.dumps({"open_time": Timestamp.from_milliseconds(1555243200000)})
    '{"open_time": 1555243200000}'
    >>> serde.loads("1555243200000", Timestamp)
    Timestamp(millis_since_epoch=1555243200000)
"""

import json
from typing import Any, TypeVar

from fast_utc.core.time_delta import TimeDelta
from fast_utc.core.timestamp import Timestamp
from fast_utc.utils.time_exceptions import SerializationError

__all__ = [
    "decode",
    "dumps",
    "encode",
    "json_default",
    "loads",
]

V = TypeVar("V", Timestamp, TimeDelta)


def encode(value: Timestamp | TimeDelta) -> int:
    """Encode a value as its millisecond integer."""
    if isinstance(value, (Timestamp, TimeDelta)):
        return value.as_milliseconds()
    raise TypeError(f"Cannot encode {type(value).__name__}; expected Timestamp or TimeDelta")


def decode(cls: type[V], raw: Any) -> V:
    """Decode a millisecond integer into ``cls``.

    Raises:
        SerializationError: If raw is not an integer (booleans are rejected)
    """
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise SerializationError(f"{cls.__name__} must be encoded as an integer, got {raw!r}")
    return cls.from_milliseconds(raw)


def json_default(obj: Any) -> int:
    """``default`` hook for ``json.dumps`` handling Timestamp and TimeDelta."""
    return encode(obj)


def dumps(obj: Any, **kwargs) -> str:
    """Serialize to JSON, encoding any nested Timestamp or TimeDelta."""
    return json.dumps(obj, default=json_default, **kwargs)


def loads(text: str | bytes, cls: type[V]) -> V:
    """Deserialize a JSON document holding a single encoded value.

    Raises:
        SerializationError: If the document is not valid JSON or not an integer
    """
    try:
        raw = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SerializationError(f"Invalid JSON for {cls.__name__}: {e}") from e
    return decode(cls, raw)

#!/usr/bin/env python
"""Time helpers package.

- arithmetic: Truncating integer division
- epoch: Float-free epoch arithmetic on stdlib datetimes
- conversion: Bidirectional mapping to pendulum DateTime and Duration

The conversion functions are loaded lazily because they depend on the core
value types, which themselves use arithmetic and epoch.
"""

from typing import Any

from fast_utc.utils.time.arithmetic import trunc_div, trunc_rem
from fast_utc.utils.time.epoch import EPOCH, datetime_to_epoch_millis, epoch_millis_to_datetime, timedelta_to_micros

_CONVERSION_EXPORTS = (
    "as_time_delta",
    "as_timestamp",
    "datetime_to_timestamp",
    "delta_to_duration",
    "enforce_utc_timezone",
    "timedelta_to_delta",
    "timestamp_to_datetime",
)


def __getattr__(name: str) -> Any:
    if name in _CONVERSION_EXPORTS:
        from fast_utc.utils.time import conversion

        return getattr(conversion, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = [
    "EPOCH",
    "as_time_delta",
    "as_timestamp",
    "datetime_to_epoch_millis",
    "datetime_to_timestamp",
    "delta_to_duration",
    "enforce_utc_timezone",
    "epoch_millis_to_datetime",
    "timedelta_to_delta",
    "timedelta_to_micros",
    "timestamp_to_datetime",
    "trunc_div",
    "trunc_rem",
]

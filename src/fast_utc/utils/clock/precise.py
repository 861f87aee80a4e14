#!/usr/bin/env python
"""Precise clock source backed by pendulum.

Every call asks pendulum for the current UTC time. Accurate to the host
clock's resolution (truncated to milliseconds), at a higher per-call cost
than the coarse source.
"""

import pendulum

from fast_utc.utils.time.epoch import datetime_to_epoch_millis

__all__ = [
    "fetch_utc_now",
    "now_millis",
]


def fetch_utc_now() -> pendulum.DateTime:
    """Current UTC time straight from pendulum."""
    return pendulum.now("UTC")


def now_millis() -> int:
    """Current epoch milliseconds from pendulum."""
    return datetime_to_epoch_millis(pendulum.now("UTC"))

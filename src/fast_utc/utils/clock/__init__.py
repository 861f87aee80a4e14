#!/usr/bin/env python
"""Current-time sources.

The strategy is fixed when this package is imported, from
``FAST_UTC_CLOCK_SOURCE`` (see fast_utc.utils.config):

- ``precise`` (default): pendulum is asked on every call
- ``coarse``: a cached value refreshed by coarse.update() or a
  coarse.CoarseClockUpdater thread that the application runs

``now_millis`` and ``fetch_utc_now`` are bound directly to the selected
implementation, so calls pay no dispatch cost.
"""

import pendulum

from fast_utc.utils.clock import coarse, precise
from fast_utc.utils.clock.coarse import CoarseClockUpdater, coarse_init_updater, coarse_update
from fast_utc.utils.config import CLOCK_SOURCE, ClockSource
from fast_utc.utils.loguru_setup import logger
from fast_utc.utils.time.epoch import epoch_millis_to_datetime

__all__ = [
    "CLOCK_SOURCE",
    "CoarseClockUpdater",
    "coarse_init_updater",
    "coarse_update",
    "fetch_utc_now",
    "now_millis",
]


def _coarse_fetch_utc_now() -> pendulum.DateTime:
    return pendulum.instance(epoch_millis_to_datetime(coarse.recent_since_epoch_millis()))


if CLOCK_SOURCE is ClockSource.COARSE:
    now_millis = coarse.recent_since_epoch_millis
    fetch_utc_now = _coarse_fetch_utc_now
else:
    now_millis = precise.now_millis
    fetch_utc_now = precise.fetch_utc_now

logger.debug(f"Clock source bound: {CLOCK_SOURCE.value}")

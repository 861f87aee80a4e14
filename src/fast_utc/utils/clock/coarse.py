#!/usr/bin/env python
"""Coarse clock source: a process-wide cached epoch-millisecond value.

Reading the cache is a single module attribute load and never refreshes it.
Keeping it fresh is the embedding application's job, either by calling
update() periodically (for example once per event-loop tick) or by running a
CoarseClockUpdater thread. Values lag the wall clock by at most the refresh
interval; backward host clock adjustments are passed through unchanged.

Example:
    >>> from fast_utc.utils.clock import coarse
    >>> with coarse.CoarseClockUpdater(period_ms=1):
    ...     recent = coarse.recent_since_epoch_millis()
"""

import threading
import time

from fast_utc.utils.config import COARSE_UPDATE_PERIOD_MS, MILLIS_PER_SECOND, NANOS_PER_MILLI
from fast_utc.utils.loguru_setup import logger

__all__ = [
    "CoarseClockUpdater",
    "coarse_init_updater",
    "coarse_update",
    "recent_since_epoch_millis",
    "update",
]


def _read_host_millis() -> int:
    return time.time_ns() // NANOS_PER_MILLI


# Seeded once at import so a reader never sees the epoch
_recent_millis: int = _read_host_millis()


def recent_since_epoch_millis() -> int:
    """The cached epoch milliseconds as of the last update."""
    return _recent_millis


def update() -> int:
    """Refresh the cache from the host clock and return the new value."""
    global _recent_millis
    _recent_millis = _read_host_millis()
    return _recent_millis


class CoarseClockUpdater:
    """Background thread refreshing the coarse clock cache at a fixed period.

    The thread is a daemon so a forgotten updater never blocks interpreter
    shutdown. An updater can be started once; build a new one to restart.
    """

    def __init__(self, period_ms: int = COARSE_UPDATE_PERIOD_MS) -> None:
        """Initialize the updater.

        Args:
            period_ms: Refresh period in milliseconds, must be positive

        Raises:
            ValueError: If period_ms is not positive
        """
        if period_ms <= 0:
            raise ValueError(f"Updater period must be positive, got {period_ms}ms")
        self.period_ms = period_ms
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> "CoarseClockUpdater":
        """Start refreshing in the background.

        Raises:
            RuntimeError: If this updater was already started
        """
        if self._thread is not None:
            raise RuntimeError("CoarseClockUpdater can only be started once")
        update()
        self._thread = threading.Thread(target=self._run, name="fast-utc-coarse-clock", daemon=True)
        self._thread.start()
        logger.debug(f"Coarse clock updater started (period: {self.period_ms}ms)")
        return self

    def stop(self, timeout: float | None = None) -> None:
        """Signal the thread to stop and wait for it to exit."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            logger.debug("Coarse clock updater stopped")

    def _run(self) -> None:
        interval = self.period_ms / MILLIS_PER_SECOND
        while not self._stop_event.wait(interval):
            update()

    def __enter__(self) -> "CoarseClockUpdater":
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()


def coarse_update() -> int:
    """Refresh the coarse clock cache once; alias of update()."""
    return update()


def coarse_init_updater(period_ms: int = COARSE_UPDATE_PERIOD_MS) -> CoarseClockUpdater:
    """Start and return a background updater for the coarse clock cache."""
    return CoarseClockUpdater(period_ms).start()

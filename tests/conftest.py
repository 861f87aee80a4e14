#!/usr/bin/env python
"""Root conftest.py that provides fixtures for the test suite.

This file contains:
1. A loguru capture fixture, since loguru bypasses pytest's caplog
2. Common anchor instants used across the core and conversion tests
"""

from datetime import datetime, timezone

import pytest

from fast_utc.utils.loguru_setup import logger


@pytest.fixture
def log_messages():
    """Capture fast_utc log messages at DEBUG level and above.

    Yields:
        list[str]: Messages logged while the test runs, in order
    """
    messages: list[str] = []
    handler_id = logger.add_sink(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove_sink(handler_id)


@pytest.fixture
def april_14_2019() -> datetime:
    """2019-04-14T00:00:00 UTC, 1555200000000 ms since the epoch."""
    return datetime(2019, 4, 14, tzinfo=timezone.utc)

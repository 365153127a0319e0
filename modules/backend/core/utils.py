"""
Core Utilities.

Shared utility functions used across the backend.
All modules should import utilities from this module.
"""

import time
from collections.abc import Callable
from datetime import datetime, timezone

IdFactory = Callable[[], int]
"""Zero-argument callable returning a fresh integer identifier."""


def utc_now() -> datetime:
    """
    Return current UTC time as timezone-naive datetime.

    All datetime values in the application should be timezone-naive
    and assumed to be UTC.

    Returns:
        Current UTC time with tzinfo stripped
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TimestampIdGenerator:
    """
    Integer identifiers derived from the wall clock in milliseconds.

    Two calls within the same millisecond (or a clock that steps backwards)
    still yield strictly increasing values.

    Usage:
        next_id = TimestampIdGenerator()
        note_id = next_id()
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._last = 0

    def __call__(self) -> int:
        candidate = int(self._clock() * 1000)
        self._last = max(candidate, self._last + 1)
        return self._last

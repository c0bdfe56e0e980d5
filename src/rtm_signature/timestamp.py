"""
timestamp.py — Signing timestamps

Signed requests carry whole seconds since the Unix epoch, taken from UTC
wall-clock time when the request is signed.
"""

from datetime import datetime, timezone
from typing import Callable, Optional

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def current_timestamp(clock: Optional[Clock] = None) -> int:
    """Return the current time as integer epoch seconds.

    Args:
        clock: Zero-argument callable returning a ``datetime``. Naive values
            are interpreted as UTC. Defaults to the system clock.

    Returns:
        int: Seconds since 1970-01-01T00:00:00Z, fractional part dropped.

    Example:
        current_timestamp(lambda: datetime(2015, 1, 1, tzinfo=timezone.utc))
        # -> 1420070400
    """
    now = (clock or _utc_now)()
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return int(now.timestamp())

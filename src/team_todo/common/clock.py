from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current UTC instant.

    Note: Services never call this directly; it is the default injected clock so
    tests can pass a fixed one instead.
    """
    return datetime.now(timezone.utc)


def fixed_clock(instant: datetime) -> Clock:
    """Clock that always returns ``instant``."""
    return lambda: instant

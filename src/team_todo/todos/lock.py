"""Edit-lock scheduler.

Every successful create/update stamps ``locked_at`` with the next deadline:
09:00 local on the day after the touch. After that instant only roles that may
edit after lock (admins) can change the item. A ``None`` deadline never locks.
"""

from __future__ import annotations

from datetime import datetime, time, timedelta, timezone
from typing import Optional

from ..auth.capabilities import resolve
from ..common.datetime_utils import get_day_boundaries, get_zone, to_utc
from ..core.constants import DEFAULT_EDIT_LOCK_HOUR, DEFAULT_TIMEZONE
from ..core.enums import Role
from . import messages
from .model import EditLockStatus, TodoItem


def compute_lock_deadline(
    reference: datetime,
    zone: str = DEFAULT_TIMEZONE,
    *,
    lock_hour: int = DEFAULT_EDIT_LOCK_HOUR,
) -> datetime:
    next_day = get_day_boundaries(reference, zone).day + timedelta(days=1)
    return datetime.combine(next_day, time(hour=lock_hour), tzinfo=get_zone(zone)).astimezone(timezone.utc)


def is_locked(deadline: Optional[datetime], now: datetime, role: Role) -> bool:
    if resolve(role).can_edit_after_lock:
        return False
    if deadline is None:
        return False
    return to_utc(now) >= to_utc(deadline)


def edit_lock_status(item: TodoItem, role: Role, now: datetime) -> EditLockStatus:
    locked = is_locked(item.locked_at, now, role)
    return EditLockStatus(
        is_locked=locked,
        can_edit=not locked,
        locked_at=item.locked_at,
        reason=messages.LOCKED if locked else None,
    )

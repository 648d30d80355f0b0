from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import LeaveKind, LeaveShading, PunchKind


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain entity: one punch. Immutable once stored."""

    event_id: str
    user_id: str
    kind: PunchKind
    occurred_at: datetime
    origin: str
    note: Optional[str] = None


@dataclass(frozen=True)
class PunchPayload:
    """What the service asks the store to persist for a new punch."""

    user_id: str
    kind: PunchKind
    occurred_at: datetime
    origin: str
    note: Optional[str] = None


@dataclass(frozen=True)
class LeaveDay:
    """A registered leave entry for one user on one date."""

    user_id: str
    day: date
    is_full_day: bool
    kind: LeaveKind
    note: Optional[str] = None


@dataclass(frozen=True)
class LeaveInfo:
    is_on_leave: bool
    kind_label: Optional[str] = None


@dataclass(frozen=True)
class PunchState:
    can_punch_in: bool
    can_punch_out: bool
    is_on_leave: bool
    message: str
    last_event: Optional[AttendanceEvent] = None


@dataclass(frozen=True)
class TransitionResult:
    ok: bool
    reason: Optional[str] = None

    @classmethod
    def accept(cls) -> TransitionResult:
        return cls(ok=True)

    @classmethod
    def reject(cls, reason: str) -> TransitionResult:
        return cls(ok=False, reason=reason)


@dataclass(frozen=True)
class CalendarCell:
    day: date
    is_current_month: bool
    shading: LeaveShading
    leave_kind: Optional[LeaveKind] = None
    label: Optional[str] = None
    note: Optional[str] = None

from __future__ import annotations

from datetime import date, datetime
from typing import Protocol, Sequence

from .model import AttendanceEvent, LeaveDay, PunchPayload


class AttendanceRepository(Protocol):
    def list_events_for_user_and_range(
        self, user_id: str, start_utc: datetime, end_utc: datetime
    ) -> Sequence[AttendanceEvent]:
        """Events with ``start_utc <= occurred_at <= end_utc``, any order."""

        raise NotImplementedError

    def create_event(self, payload: PunchPayload) -> AttendanceEvent:
        raise NotImplementedError


class LeaveRepository(Protocol):
    def list_leave_entries(self, user_id: str, start_date: date, end_date: date) -> Sequence[LeaveDay]:
        """Entries with ``start_date <= day <= end_date`` (inclusive)."""

        raise NotImplementedError

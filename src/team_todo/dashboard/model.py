from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional

from ..auth.capabilities import Capabilities
from ..core.enums import AlertLevel, PunchKind, Role


@dataclass(frozen=True)
class PersonalOverview:
    pending_todos: int
    completed_this_week: int
    next_leave_date: Optional[date] = None
    last_attendance_kind: Optional[PunchKind] = None
    last_attendance_at: Optional[datetime] = None


@dataclass(frozen=True)
class TeamOverview:
    total_members: int
    active_projects: int
    overdue_todos: int
    attendance_alerts: int


@dataclass(frozen=True)
class Announcement:
    announcement_id: str
    message: str
    level: AlertLevel
    published_at: datetime


@dataclass(frozen=True)
class DashboardOverview:
    """Stable shape: sections the role may not see are None, never missing."""

    role: Role
    permissions: Capabilities
    personal_summary: Optional[PersonalOverview]
    team_summary: Optional[TeamOverview]
    announcements: Optional[List[Announcement]]

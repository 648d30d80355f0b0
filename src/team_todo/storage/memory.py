"""In-memory store implementing every repository protocol.

Used to wire the application without a database (development, demos, tests).
Single-process and last-write-wins, like the real store contract.
"""

from __future__ import annotations

import itertools
from dataclasses import replace
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..attendance.model import AttendanceEvent, LeaveDay, PunchPayload
from ..common.clock import Clock, system_clock
from ..common.datetime_utils import get_day_boundaries, to_utc
from ..common.validators import require_non_empty, require_pattern
from ..core.constants import DEFAULT_TIMEZONE, PROJECT_CODE_PATTERN
from ..core.enums import PunchKind, Role, TodoStatus
from ..dashboard.model import Announcement, PersonalOverview, TeamOverview
from ..todos.board import filter_todos
from ..todos.model import NewTodo, TodoFilters, TodoItem


class InMemoryStore:
    def __init__(self, *, clock: Optional[Clock] = None, zone: str = DEFAULT_TIMEZONE):
        self._clock = clock or system_clock
        self._zone = zone
        self._ids = itertools.count(1)
        self._members: Dict[str, str] = {}
        self._projects: Dict[str, tuple] = {}
        self._events: List[AttendanceEvent] = []
        self._leaves: List[LeaveDay] = []
        self._todos: Dict[str, TodoItem] = {}
        self._announcements: List[tuple] = []

    def _next_id(self, prefix: str) -> str:
        return f"{prefix}-{next(self._ids)}"

    # Reference data
    def add_member(self, user_id: str, name: str) -> None:
        self._members[user_id] = name

    def add_project(self, project_id: str, code: str, name: str) -> None:
        """Register a project. Raises ValidationError for a malformed code."""
        code = require_pattern(code, "Project code", PROJECT_CODE_PATTERN)
        self._projects[project_id] = (code, require_non_empty(name, "Project name"))

    def add_leave(self, entry: LeaveDay) -> None:
        self._leaves.append(entry)

    def add_announcement(self, announcement: Announcement, *, admin_only: bool = False) -> None:
        self._announcements.append((announcement, admin_only))

    # AttendanceRepository
    def list_events_for_user_and_range(
        self, user_id: str, start_utc: datetime, end_utc: datetime
    ) -> Sequence[AttendanceEvent]:
        start, end = to_utc(start_utc), to_utc(end_utc)
        return [e for e in self._events if e.user_id == user_id and start <= to_utc(e.occurred_at) <= end]

    def create_event(self, payload: PunchPayload) -> AttendanceEvent:
        event = AttendanceEvent(
            event_id=self._next_id("att"),
            user_id=payload.user_id,
            kind=payload.kind,
            occurred_at=to_utc(payload.occurred_at),
            origin=payload.origin,
            note=payload.note,
        )
        self._events.append(event)
        return event

    # LeaveRepository
    def list_leave_entries(self, user_id: str, start_date: date, end_date: date) -> Sequence[LeaveDay]:
        return [e for e in self._leaves if e.user_id == user_id and start_date <= e.day <= end_date]

    # TodoRepository
    def list_todos(self, filters: TodoFilters) -> Sequence[TodoItem]:
        return filter_todos(self._todos.values(), filters)

    def get_todo(self, todo_id: str) -> Optional[TodoItem]:
        return self._todos.get(todo_id)

    def create_todo(self, payload: NewTodo) -> TodoItem:
        code, name = self._projects.get(payload.project_id, ("", ""))
        item = TodoItem(
            todo_id=self._next_id("todo"),
            assignee_id=payload.assignee_id,
            assignee_name=payload.assignee_name or self._members.get(payload.assignee_id, ""),
            title=payload.title,
            status=payload.status,
            created_at=payload.created_at,
            updated_at=payload.created_at,
            locked_at=payload.locked_at,
            due_date=payload.due_date,
            project_id=payload.project_id,
            project_code=code,
            project_name=name,
            description=payload.description,
            issue=payload.issue,
            solution=payload.solution,
            decision=payload.decision,
            notes=payload.notes,
        )
        self._todos[item.todo_id] = item
        return item

    def update_todo(self, todo_id: str, patch: Mapping[str, Any]) -> TodoItem:
        current = self._todos.get(todo_id)
        if current is None:
            raise KeyError(todo_id)
        updated = replace(current, **dict(patch))
        self._todos[todo_id] = updated
        return updated

    def delete_todo(self, todo_id: str) -> bool:
        return self._todos.pop(todo_id, None) is not None

    # DashboardRepository
    def get_personal_overview(self, user_id: str) -> PersonalOverview:
        today = get_day_boundaries(self._clock(), self._zone).day
        week_start = today - timedelta(days=today.weekday())
        mine = [t for t in self._todos.values() if t.assignee_id == user_id]
        upcoming = sorted(e.day for e in self._leaves if e.user_id == user_id and e.day >= today)
        events = sorted((e for e in self._events if e.user_id == user_id), key=lambda e: e.occurred_at)
        last = events[-1] if events else None
        return PersonalOverview(
            pending_todos=sum(1 for t in mine if t.status != TodoStatus.INCOMING),
            completed_this_week=sum(
                1
                for t in mine
                if t.status == TodoStatus.INCOMING and get_day_boundaries(t.updated_at, self._zone).day >= week_start
            ),
            next_leave_date=upcoming[0] if upcoming else None,
            last_attendance_kind=last.kind if last else None,
            last_attendance_at=last.occurred_at if last else None,
        )

    def get_team_overview(self) -> TeamOverview:
        boundaries = get_day_boundaries(self._clock(), self._zone)
        todos = list(self._todos.values())
        last_by_user: Dict[str, AttendanceEvent] = {}
        for event in sorted(self._events, key=lambda e: e.occurred_at):
            last_by_user[event.user_id] = event
        # A punch-in left open from an earlier day counts as an alert.
        alerts = sum(
            1
            for e in last_by_user.values()
            if e.kind == PunchKind.PUNCH_IN and to_utc(e.occurred_at) < boundaries.start_utc
        )
        return TeamOverview(
            total_members=len(self._members),
            active_projects=len({t.project_id for t in todos if t.project_id and t.status != TodoStatus.INCOMING}),
            overdue_todos=sum(1 for t in todos if t.due_date is not None and t.due_date < boundaries.day),
            attendance_alerts=alerts,
        )

    def list_announcements(self, role: Role) -> Sequence[Announcement]:
        visible = [a for a, admin_only in self._announcements if role == Role.ADMIN or not admin_only]
        return sorted(visible, key=lambda a: a.published_at, reverse=True)

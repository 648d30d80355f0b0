from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.calendar_service import LeaveCalendarService
from .attendance.service import AttendanceService
from .common.clock import Clock, system_clock
from .core.constants import DEFAULT_EDIT_LOCK_HOUR, DEFAULT_TIMEZONE
from .dashboard.service import DashboardService
from .storage.memory import InMemoryStore
from .todos.service import TodoService


@dataclass(frozen=True)
class Container:
    store: InMemoryStore
    clock: Clock

    attendance_service: AttendanceService
    leave_calendar_service: LeaveCalendarService
    todo_service: TodoService
    dashboard_service: DashboardService


def build_container(
    *,
    zone: str = DEFAULT_TIMEZONE,
    lock_hour: int = DEFAULT_EDIT_LOCK_HOUR,
    clock: Optional[Clock] = None,
    store: Optional[InMemoryStore] = None,
) -> Container:
    clock = clock or system_clock
    store = store or InMemoryStore(clock=clock, zone=zone)

    return Container(
        store=store,
        clock=clock,
        attendance_service=AttendanceService(store, store, clock=clock, zone=zone),
        leave_calendar_service=LeaveCalendarService(store, clock=clock),
        todo_service=TodoService(store, clock=clock, zone=zone, lock_hour=lock_hour),
        dashboard_service=DashboardService(store, clock=clock),
    )

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from team_todo.attendance import messages
from team_todo.attendance.calendar import build_month_matrix, month_range, pick_leave_entries
from team_todo.attendance.calendar_service import LeaveCalendarService
from team_todo.attendance.model import LeaveDay
from team_todo.auth.context import UserContext
from team_todo.common.clock import fixed_clock
from team_todo.core.enums import ErrorCategory, LeaveKind, LeaveShading, Role
from team_todo.core.exceptions import ValidationError

NOW = datetime(2025, 9, 26, 1, 0, tzinfo=timezone.utc)
MEMBER = UserContext(user_id="user-1", role=Role.MEMBER)


def leave(day, *, full=True, kind=LeaveKind.ANNUAL_LEAVE, note=None, user_id="user-1"):
    return LeaveDay(user_id=user_id, day=day, is_full_day=full, kind=kind, note=note)


class FakeLeaveRepo:
    def __init__(self, entries=None, *, fail=False):
        self.entries = list(entries or [])
        self.fail = fail
        self.calls = []

    def list_leave_entries(self, user_id, start_date, end_date):
        self.calls.append((user_id, start_date, end_date))
        if self.fail:
            raise RuntimeError("db down")
        return [e for e in self.entries if e.user_id == user_id and start_date <= e.day <= end_date]


def test_matrix_is_always_six_weeks_of_seven_days():
    for year, month in [(2025, 2), (2025, 9), (2026, 2), (2015, 2), (2100, 12), (1970, 1)]:
        matrix = build_month_matrix(year, month, [])
        assert len(matrix) == 6
        assert all(len(week) == 7 for week in matrix)


def test_matrix_starts_on_sunday_and_days_are_consecutive():
    matrix = build_month_matrix(2025, 9, [])
    days = [cell.day for week in matrix for cell in week]

    # 2025-09-01 is a Monday
    assert days[0] == date(2025, 8, 31)
    assert days[0].weekday() == 6
    assert all((b - a).days == 1 for a, b in zip(days, days[1:]))
    assert days[-1] == date(2025, 10, 11)


def test_month_starting_on_sunday_has_no_leading_padding():
    # 2025-06-01 is a Sunday
    matrix = build_month_matrix(2025, 6, [])

    assert matrix[0][0].day == date(2025, 6, 1)
    assert matrix[0][0].is_current_month is True


def test_current_month_flag():
    cells = [cell for week in build_month_matrix(2025, 9, []) for cell in week]

    assert sum(cell.is_current_month for cell in cells) == 30
    assert all(cell.is_current_month == (cell.day.month == 9) for cell in cells)


def test_leave_shading_and_label():
    entries = [
        leave(date(2025, 9, 10), note="family trip"),
        leave(date(2025, 9, 11), full=False, kind=LeaveKind.HALF_DAY_PM),
    ]
    cells = {cell.day: cell for week in build_month_matrix(2025, 9, entries) for cell in week}

    full = cells[date(2025, 9, 10)]
    assert full.shading == LeaveShading.FULL
    assert full.leave_kind == LeaveKind.ANNUAL_LEAVE
    assert full.label == "Annual leave"
    assert full.note == "family trip"
    half = cells[date(2025, 9, 11)]
    assert half.shading == LeaveShading.HALF
    assert half.label == "Half day (PM)"
    plain = cells[date(2025, 9, 12)]
    assert plain.shading == LeaveShading.NONE
    assert plain.leave_kind is None
    assert plain.label is None


def test_leave_on_padding_day_is_shaded():
    cells = {cell.day: cell for week in build_month_matrix(2025, 9, [leave(date(2025, 8, 31))]) for cell in week}

    assert cells[date(2025, 8, 31)].shading == LeaveShading.FULL
    assert cells[date(2025, 8, 31)].is_current_month is False


def test_full_day_entry_wins_over_half_day_on_same_date():
    day = date(2025, 9, 15)
    half = leave(day, full=False, kind=LeaveKind.HALF_DAY_AM)
    full = leave(day, kind=LeaveKind.SICK_LEAVE)

    assert pick_leave_entries([half, full])[day] == full
    assert pick_leave_entries([full, half])[day] == full


def test_same_priority_entries_keep_first_seen():
    day = date(2025, 9, 15)
    first = leave(day, kind=LeaveKind.BUSINESS_TRIP)
    second = leave(day, kind=LeaveKind.OTHER)

    assert pick_leave_entries([first, second])[day] == first


@pytest.mark.parametrize(
    "year,month,message",
    [
        (2025, 13, messages.INVALID_MONTH),
        (2025, 0, messages.INVALID_MONTH),
        (1969, 5, messages.INVALID_YEAR),
        (2101, 5, messages.INVALID_YEAR),
        (True, 5, messages.INVALID_YEAR),
    ],
)
def test_out_of_range_year_or_month_is_rejected(year, month, message):
    with pytest.raises(ValidationError) as exc:
        build_month_matrix(year, month, [])
    assert str(exc.value) == message


def test_month_range_handles_december_and_leap_years():
    assert month_range(2025, 12) == (date(2025, 12, 1), date(2025, 12, 31))
    assert month_range(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))


def test_service_returns_matrix_for_own_leave_only():
    repo = FakeLeaveRepo([leave(date(2025, 9, 3)), leave(date(2025, 9, 4), user_id="user-2")])
    service = LeaveCalendarService(repo, clock=fixed_clock(NOW))

    res = service.get_monthly_calendar(MEMBER, 2025, 9)

    assert res.ok is True
    assert repo.calls == [("user-1", date(2025, 9, 1), date(2025, 9, 30))]
    cells = {cell.day: cell for week in res.data["calendar"] for cell in week}
    assert cells[date(2025, 9, 3)].shading == LeaveShading.FULL
    assert cells[date(2025, 9, 4)].shading == LeaveShading.NONE


def test_service_rejects_invalid_month_without_store_call():
    repo = FakeLeaveRepo()
    service = LeaveCalendarService(repo, clock=fixed_clock(NOW))

    res = service.get_monthly_calendar(MEMBER, 2025, 13)

    assert res.ok is False
    assert res.error == messages.INVALID_MONTH
    assert res.category == ErrorCategory.VALIDATION
    assert repo.calls == []


def test_service_forbids_guest():
    repo = FakeLeaveRepo()
    service = LeaveCalendarService(repo, clock=fixed_clock(NOW))

    res = service.get_monthly_calendar(UserContext(user_id="g", role=Role.GUEST), 2025, 9)

    assert res.category == ErrorCategory.AUTHORIZATION
    assert res.error == messages.CALENDAR_FORBIDDEN
    assert repo.calls == []


def test_service_store_failure():
    service = LeaveCalendarService(FakeLeaveRepo(fail=True), clock=fixed_clock(NOW))

    res = service.get_monthly_calendar(MEMBER, 2025, 9)

    assert res.ok is False
    assert res.error == messages.CALENDAR_LOAD_FAILED
    assert res.category == ErrorCategory.INFRASTRUCTURE

from __future__ import annotations

from datetime import date, timedelta
from typing import Dict, Iterable, List

from ..core.constants import CALENDAR_MAX_YEAR, CALENDAR_MIN_YEAR, CALENDAR_WEEKS, DAYS_PER_WEEK
from ..core.enums import LeaveShading
from ..core.exceptions import ValidationError
from . import messages
from .model import CalendarCell, LeaveDay

CalendarMatrix = List[List[CalendarCell]]


def validate_year_month(year: int, month: int) -> None:
    if isinstance(year, bool) or not isinstance(year, int) or not CALENDAR_MIN_YEAR <= year <= CALENDAR_MAX_YEAR:
        raise ValidationError(messages.INVALID_YEAR)
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise ValidationError(messages.INVALID_MONTH)


def month_range(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of the month."""
    validate_year_month(year, month)
    first = date(year, month, 1)
    next_first = date(year + 1, 1, 1) if month == 12 else date(year, month + 1, 1)
    return first, next_first - timedelta(days=1)


def pick_leave_entries(entries: Iterable[LeaveDay]) -> Dict[date, LeaveDay]:
    """One entry per date: full-day beats half-day, otherwise the first one seen wins."""
    picked: Dict[date, LeaveDay] = {}
    for entry in entries:
        previous = picked.get(entry.day)
        if previous is None or (entry.is_full_day and not previous.is_full_day):
            picked[entry.day] = entry
    return picked


def calendar_start(year: int, month: int) -> date:
    """The Sunday on or before the 1st."""
    first = date(year, month, 1)
    # date.weekday(): Monday=0 ... Sunday=6
    return first - timedelta(days=(first.weekday() + 1) % DAYS_PER_WEEK)


def build_month_matrix(year: int, month: int, entries: Iterable[LeaveDay]) -> CalendarMatrix:
    """6x7 Sunday-first grid for the month, shaded by registered leave.

    Always 42 cells, padded with days of the neighbouring months, so the grid
    height never changes. Raises ValidationError for out-of-range year/month.
    """
    validate_year_month(year, month)
    by_day = pick_leave_entries(entries)
    cursor = calendar_start(year, month)

    matrix: CalendarMatrix = []
    for _ in range(CALENDAR_WEEKS):
        week: List[CalendarCell] = []
        for _ in range(DAYS_PER_WEEK):
            entry = by_day.get(cursor)
            if entry is None:
                cell = CalendarCell(day=cursor, is_current_month=cursor.month == month, shading=LeaveShading.NONE)
            else:
                cell = CalendarCell(
                    day=cursor,
                    is_current_month=cursor.month == month,
                    shading=LeaveShading.FULL if entry.is_full_day else LeaveShading.HALF,
                    leave_kind=entry.kind,
                    label=messages.LEAVE_LABELS.get(entry.kind),
                    note=entry.note,
                )
            week.append(cell)
            cursor += timedelta(days=1)
        matrix.append(week)
    return matrix

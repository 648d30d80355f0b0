from __future__ import annotations

from typing import Optional

import structlog

from ..auth.capabilities import has_base_access
from ..auth.context import UserContext
from ..common.clock import Clock, system_clock
from ..common.envelope import ApiResponse, build_error, build_response
from ..core.exceptions import AuthorizationError, DomainError, InfrastructureError
from . import messages
from .calendar import build_month_matrix, month_range
from .repository import LeaveRepository

logger = structlog.get_logger(__name__)


class LeaveCalendarService:
    """Use case: monthly leave calendar for the acting user."""

    def __init__(self, leaves: LeaveRepository, *, clock: Optional[Clock] = None):
        self._leaves = leaves
        self._clock = clock or system_clock

    def get_monthly_calendar(self, user: UserContext, year: int, month: int) -> ApiResponse:
        now = self._clock()
        try:
            if not has_base_access(user.role):
                raise AuthorizationError(messages.CALENDAR_FORBIDDEN)

            start, end = month_range(year, month)
            try:
                entries = list(self._leaves.list_leave_entries(user.user_id, start, end))
            except Exception as exc:
                logger.exception("leave_calendar_load_failed", user_id=user.user_id, year=year, month=month)
                raise InfrastructureError(messages.CALENDAR_LOAD_FAILED) from exc

            return build_response({"calendar": build_month_matrix(year, month, entries)}, None, now)
        except DomainError as e:
            return build_error(e, now)

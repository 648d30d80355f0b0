from __future__ import annotations

from typing import Optional

import structlog

from ..auth.capabilities import resolve
from ..auth.context import UserContext
from ..common.clock import Clock, system_clock
from ..common.envelope import ApiResponse, build_error, build_response
from ..core.exceptions import InfrastructureError
from .model import DashboardOverview
from .repository import DashboardRepository

LOAD_FAILED = "Could not load the dashboard."

logger = structlog.get_logger(__name__)


class DashboardService:
    """Use case: role-shaped dashboard overview.

    The capability record decides which of the three fetches run at all; a
    withheld section is returned as None and its store call is never made.
    """

    def __init__(self, dashboard: DashboardRepository, *, clock: Optional[Clock] = None):
        self._dashboard = dashboard
        self._clock = clock or system_clock

    def get_overview(self, user: UserContext) -> ApiResponse:
        now = self._clock()
        permissions = resolve(user.role)
        try:
            personal = (
                self._dashboard.get_personal_overview(user.user_id) if permissions.can_view_personal_summary else None
            )
            team = self._dashboard.get_team_overview() if permissions.can_view_team_summary else None
            announcements = (
                list(self._dashboard.list_announcements(user.role)) if permissions.can_view_announcements else None
            )
        except Exception:
            logger.exception("dashboard_load_failed", user_id=user.user_id, role=user.role.value)
            return build_error(InfrastructureError(LOAD_FAILED), now)

        overview = DashboardOverview(
            role=user.role,
            permissions=permissions,
            personal_summary=personal,
            team_summary=team,
            announcements=announcements,
        )
        return build_response({"overview": overview}, None, now)

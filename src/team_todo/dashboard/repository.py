from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import Role
from .model import Announcement, PersonalOverview, TeamOverview


class DashboardRepository(Protocol):
    def get_personal_overview(self, user_id: str) -> PersonalOverview:
        raise NotImplementedError

    def get_team_overview(self) -> TeamOverview:
        raise NotImplementedError

    def list_announcements(self, role: Role) -> Sequence[Announcement]:
        raise NotImplementedError

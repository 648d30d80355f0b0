from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for access control."""

    ADMIN = "admin"
    MEMBER = "member"
    GUEST = "guest"

    @classmethod
    def parse(cls, value: str | None) -> Role:
        """Unknown or missing roles degrade to GUEST."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.GUEST


class PunchKind(str, Enum):
    PUNCH_IN = "PUNCH_IN"
    PUNCH_OUT = "PUNCH_OUT"


class TodoStatus(str, Enum):
    """Kanban stages. Declaration order is the column order."""

    PREWORK = "prework"
    DESIGN = "design"
    HOLD = "hold"
    PO_PLACED = "po_placed"
    INCOMING = "incoming"


class LeaveKind(str, Enum):
    ANNUAL_LEAVE = "annual_leave"
    HALF_DAY_AM = "half_day_am"
    HALF_DAY_PM = "half_day_pm"
    SICK_LEAVE = "sick_leave"
    BUSINESS_TRIP = "business_trip"
    OTHER = "other"


class LeaveShading(str, Enum):
    NONE = "none"
    HALF = "half"
    FULL = "full"


class WidgetKey(str, Enum):
    TEAM_OVERVIEW = "team_overview"
    PERSONAL_OVERVIEW = "personal_overview"
    ANNOUNCEMENTS = "announcements"


class AlertLevel(str, Enum):
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Which kind of failure ended a request; the HTTP layer maps it to a status."""

    VALIDATION = "validation"
    AUTHORIZATION = "authorization"
    NOT_FOUND = "not_found"
    INFRASTRUCTURE = "infrastructure"

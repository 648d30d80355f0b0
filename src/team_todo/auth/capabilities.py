"""Role -> capability table.

The table is configuration: one static, read-only entry per role. ``resolve``
hands out a fresh ``Capabilities`` each call, so a caller mutating its copy
(e.g. trimming ``allowed_widgets``) never leaks into anyone else's result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List

from ..core.enums import Role, WidgetKey


@dataclass
class Capabilities:
    can_view_team_summary: bool = False
    can_view_personal_summary: bool = False
    can_view_announcements: bool = False
    can_punch: bool = False
    can_create_todo: bool = False
    can_delete_todo: bool = False
    can_edit_after_lock: bool = False
    allowed_widgets: List[WidgetKey] = field(default_factory=list)


@dataclass(frozen=True)
class _CapabilityRow:
    can_view_team_summary: bool
    can_view_personal_summary: bool
    can_view_announcements: bool
    can_punch: bool
    can_create_todo: bool
    can_delete_todo: bool
    can_edit_after_lock: bool
    allowed_widgets: tuple


ROLE_CAPABILITIES = MappingProxyType(
    {
        Role.ADMIN: _CapabilityRow(
            can_view_team_summary=True,
            can_view_personal_summary=True,
            can_view_announcements=True,
            can_punch=True,
            can_create_todo=True,
            can_delete_todo=True,
            can_edit_after_lock=True,
            allowed_widgets=(WidgetKey.TEAM_OVERVIEW, WidgetKey.PERSONAL_OVERVIEW, WidgetKey.ANNOUNCEMENTS),
        ),
        Role.MEMBER: _CapabilityRow(
            can_view_team_summary=False,
            can_view_personal_summary=True,
            can_view_announcements=True,
            can_punch=True,
            can_create_todo=True,
            can_delete_todo=False,
            can_edit_after_lock=False,
            allowed_widgets=(WidgetKey.PERSONAL_OVERVIEW, WidgetKey.ANNOUNCEMENTS),
        ),
        Role.GUEST: _CapabilityRow(
            can_view_team_summary=False,
            can_view_personal_summary=False,
            can_view_announcements=False,
            can_punch=False,
            can_create_todo=False,
            can_delete_todo=False,
            can_edit_after_lock=False,
            allowed_widgets=(),
        ),
    }
)

BASE_ACCESS_ROLES = frozenset({Role.ADMIN, Role.MEMBER})
PRIVILEGED_ROLE = Role.ADMIN


def resolve(role: Role) -> Capabilities:
    row = ROLE_CAPABILITIES.get(role, ROLE_CAPABILITIES[Role.GUEST])
    return Capabilities(
        can_view_team_summary=row.can_view_team_summary,
        can_view_personal_summary=row.can_view_personal_summary,
        can_view_announcements=row.can_view_announcements,
        can_punch=row.can_punch,
        can_create_todo=row.can_create_todo,
        can_delete_todo=row.can_delete_todo,
        can_edit_after_lock=row.can_edit_after_lock,
        allowed_widgets=list(row.allowed_widgets),
    )


def has_base_access(role: Role) -> bool:
    """Whether the role may use attendance/todo features at all."""
    return role in BASE_ACCESS_ROLES

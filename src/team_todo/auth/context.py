from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from ..core.enums import Role

HEADER_USER_ID = "X-User-Id"
HEADER_USER_ROLE = "X-User-Role"
HEADER_USER_NAME = "X-User-Name"


@dataclass(frozen=True)
class UserContext:
    """The acting user, as handed over by the authentication layer."""

    user_id: str
    role: Role
    name: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> Optional[UserContext]:
        user_id = (headers.get(HEADER_USER_ID) or "").strip()
        role = headers.get(HEADER_USER_ROLE)
        if not user_id or not role:
            return None
        return cls(user_id=user_id, role=Role.parse(role), name=headers.get(HEADER_USER_NAME) or None)

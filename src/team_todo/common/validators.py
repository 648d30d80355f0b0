from __future__ import annotations

import re
from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_text(value: Any, field_name: str) -> None:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")


def require_non_empty(value: Any, field_name: str) -> str:
    require_text(value, field_name)
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_max_length(value: Any, field_name: str, max_len: int) -> Optional[str]:
    require_text(value, field_name)
    if value is not None and len(value) > max_len:
        raise ValidationError(f"{field_name} must be at most {max_len} characters")
    return value


def optional_text(value: Any, field_name: str) -> Optional[str]:
    """Strip text; blank becomes None."""
    require_text(value, field_name)
    if value is None:
        return None
    return value.strip() or None


def require_pattern(value: Any, field_name: str, pattern: re.Pattern) -> str:
    require_text(value, field_name)
    if value is None or not pattern.fullmatch(value):
        raise ValidationError(f"Invalid {field_name.lower()}")
    return value

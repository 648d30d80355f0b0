"""Uniform response envelope.

Every service returns ``{ok, data, error, timestamp}``. The error category is
kept on the object for the HTTP layer but is not part of the serialized body.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from ..core.enums import ErrorCategory
from ..core.exceptions import DomainError
from .datetime_utils import to_utc_iso

T = TypeVar("T")

_STATUS_BY_CATEGORY = {
    ErrorCategory.VALIDATION: 400,
    ErrorCategory.AUTHORIZATION: 403,
    ErrorCategory.NOT_FOUND: 404,
    ErrorCategory.INFRASTRUCTURE: 500,
}


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    ok: bool
    data: Optional[T]
    error: Optional[str]
    timestamp: str
    category: Optional[ErrorCategory] = None

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "data": to_primitive(self.data),
            "error": self.error,
            "timestamp": self.timestamp,
        }


def build_response(
    data: Optional[T],
    error: Optional[str],
    now: datetime,
    category: Optional[ErrorCategory] = None,
) -> ApiResponse[T]:
    if error and category is None:
        category = ErrorCategory.VALIDATION
    return ApiResponse(
        ok=not error,
        data=data,
        error=error,
        timestamp=to_utc_iso(now),
        category=category if error else None,
    )


def build_error(exc: DomainError, now: datetime) -> ApiResponse:
    return build_response(None, str(exc), now, exc.category)


def status_for(response: ApiResponse) -> int:
    if response.ok:
        return 200
    return _STATUS_BY_CATEGORY.get(response.category, 400)


def to_primitive(value: Any) -> Any:
    """Convert dataclasses/enums/dates into JSON-safe values."""
    if value is None or isinstance(value, (bool, int, float, str)) and not isinstance(value, Enum):
        return value
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return to_utc_iso(value)
    if isinstance(value, date):
        return value.isoformat()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_primitive(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, dict):
        return {to_primitive(k): to_primitive(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_primitive(v) for v in value]
    return value

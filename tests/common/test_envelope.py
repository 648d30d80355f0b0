from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone

from team_todo.common.envelope import build_error, build_response, status_for, to_primitive
from team_todo.core.enums import ErrorCategory, PunchKind
from team_todo.core.exceptions import AuthorizationError, InfrastructureError, NotFoundError, ValidationError

NOW = datetime(2025, 9, 26, 0, 0, tzinfo=timezone.utc)


@dataclass(frozen=True)
class Sample:
    kind: PunchKind
    day: date
    at: datetime


def test_success_envelope_shape():
    res = build_response({"x": 1}, None, NOW)

    assert res.to_dict() == {"ok": True, "data": {"x": 1}, "error": None, "timestamp": "2025-09-26T00:00:00.000Z"}
    assert res.category is None
    assert status_for(res) == 200


def test_ok_is_always_not_error():
    res = build_response(None, "nope", NOW)

    assert res.ok is False
    assert res.category == ErrorCategory.VALIDATION
    assert status_for(res) == 400


def test_error_categories_map_to_statuses():
    assert status_for(build_error(ValidationError("a"), NOW)) == 400
    assert status_for(build_error(AuthorizationError("b"), NOW)) == 403
    assert status_for(build_error(NotFoundError("c"), NOW)) == 404
    assert status_for(build_error(InfrastructureError("d"), NOW)) == 500


def test_build_error_keeps_message():
    res = build_error(NotFoundError("Todo not found."), NOW)

    assert res.error == "Todo not found."
    assert res.data is None
    assert res.category == ErrorCategory.NOT_FOUND


def test_to_primitive_converts_nested_values():
    value = {"items": [Sample(kind=PunchKind.PUNCH_IN, day=date(2025, 9, 26), at=NOW)]}

    assert to_primitive(value) == {
        "items": [{"kind": "PUNCH_IN", "day": "2025-09-26", "at": "2025-09-26T00:00:00.000Z"}]
    }

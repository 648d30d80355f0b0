from __future__ import annotations

from datetime import datetime, timezone
from itertools import permutations

from team_todo.attendance import messages
from team_todo.attendance.model import AttendanceEvent, LeaveInfo
from team_todo.attendance.state_machine import (
    create_punch_payload,
    derive_status,
    sort_events,
    validate_transition,
)
from team_todo.core.enums import PunchKind


def kst_event(event_id: str, kind: PunchKind, hour: int, minute: int = 0) -> AttendanceEvent:
    # KST = UTC+9 on 2025-09-26
    return AttendanceEvent(
        event_id=event_id,
        user_id="user-1",
        kind=kind,
        occurred_at=datetime(2025, 9, 26, hour - 9, minute, tzinfo=timezone.utc),
        origin="127.0.0.1",
    )


IN_0900 = kst_event("rec-1", PunchKind.PUNCH_IN, 9)
OUT_1200 = kst_event("rec-2", PunchKind.PUNCH_OUT, 12)
IN_1300 = kst_event("rec-3", PunchKind.PUNCH_IN, 13)
OUT_1800 = kst_event("rec-4", PunchKind.PUNCH_OUT, 18)


def test_no_events_allows_punch_in_only():
    state = derive_status([])

    assert state.can_punch_in is True
    assert state.can_punch_out is False
    assert state.is_on_leave is False
    assert state.last_event is None
    assert state.message == messages.NEED_PUNCH_IN


def test_after_punch_in_only_punch_out_is_allowed():
    state = derive_status([IN_0900])

    assert state.can_punch_in is False
    assert state.can_punch_out is True
    assert state.last_event == IN_0900


def test_after_punch_out_day_is_closed():
    state = derive_status([IN_0900, OUT_1800])

    assert state.can_punch_in is False
    assert state.can_punch_out is False
    assert state.message == messages.COMPLETED
    assert state.last_event == OUT_1800


def test_result_does_not_depend_on_input_order():
    events = [IN_0900, OUT_1200, IN_1300]
    expected = derive_status(events)

    for perm in permutations(events):
        assert derive_status(list(perm)) == expected
    assert expected.can_punch_out is True
    assert expected.last_event == IN_1300


def test_sort_events_returns_new_list():
    events = [OUT_1800, IN_0900]

    assert sort_events(events) == [IN_0900, OUT_1800]
    assert events == [OUT_1800, IN_0900]


def test_leave_disables_both_buttons_and_names_the_kind():
    for events in ([], [IN_0900], [IN_0900, OUT_1800]):
        state = derive_status(events, LeaveInfo(is_on_leave=True, kind_label="Annual leave"))

        assert state.can_punch_in is False
        assert state.can_punch_out is False
        assert state.is_on_leave is True
        assert "Annual leave" in state.message


def test_leave_without_kind_uses_generic_label():
    state = derive_status([], LeaveInfo(is_on_leave=True))

    assert messages.LEAVE_FALLBACK_LABEL in state.message


def test_leave_flag_false_is_ignored():
    assert derive_status([], LeaveInfo(is_on_leave=False, kind_label="Annual leave")).can_punch_in is True


def test_punch_in_allowed_on_empty_day_and_after_punch_out():
    assert validate_transition([], PunchKind.PUNCH_IN).ok is True
    assert validate_transition([IN_0900, OUT_1200], PunchKind.PUNCH_IN).ok is True


def test_double_punch_in_is_rejected():
    result = validate_transition([IN_0900], PunchKind.PUNCH_IN)

    assert result.ok is False
    assert result.reason == "already punched in"


def test_punch_out_needs_prior_punch_in():
    result = validate_transition([], PunchKind.PUNCH_OUT)

    assert result.ok is False
    assert result.reason == "needs prior punch-in"


def test_second_punch_out_is_rejected():
    result = validate_transition([OUT_1800, IN_0900], PunchKind.PUNCH_OUT)

    assert result.ok is False
    assert result.reason == "already punched out"


def test_punch_out_after_punch_in_is_ok():
    assert validate_transition([IN_0900], PunchKind.PUNCH_OUT).ok is True


def test_string_kinds_are_accepted_and_unknown_kinds_rejected():
    assert validate_transition([], "PUNCH_IN").ok is True
    assert validate_transition([], "LEAVE").reason == "unsupported kind"
    assert validate_transition([IN_0900], None).reason == "unsupported kind"


def test_create_punch_payload():
    at = datetime(2025, 9, 26, 0, 0, tzinfo=timezone.utc)
    payload = create_punch_payload("user-1", PunchKind.PUNCH_IN, at, "10.0.0.1")

    assert payload.user_id == "user-1"
    assert payload.kind == PunchKind.PUNCH_IN
    assert payload.occurred_at == at
    assert payload.origin == "10.0.0.1"
    assert payload.note is None

"""Punch state machine.

NoPunch -> PunchedIn -> PunchedOut (closed for the day). A leave flag overrides
everything and disables both buttons. Pure functions over already-fetched
events; they sort internally so input order never matters.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Optional, Union

from ..core.enums import PunchKind
from . import messages
from .model import AttendanceEvent, LeaveInfo, PunchPayload, PunchState, TransitionResult


def sort_events(events: Iterable[AttendanceEvent]) -> List[AttendanceEvent]:
    """New list ordered by ``occurred_at``; the input is left untouched."""
    return sorted(events, key=lambda e: e.occurred_at)


def last_event(events: Iterable[AttendanceEvent]) -> Optional[AttendanceEvent]:
    ordered = sort_events(events)
    return ordered[-1] if ordered else None


def leave_message(leave: LeaveInfo) -> str:
    label = leave.kind_label or messages.LEAVE_FALLBACK_LABEL
    return messages.ON_LEAVE_TEMPLATE.format(label=label)


def derive_status(events: Iterable[AttendanceEvent], leave: Optional[LeaveInfo] = None) -> PunchState:
    last = last_event(events)

    if leave and leave.is_on_leave:
        return PunchState(
            can_punch_in=False,
            can_punch_out=False,
            is_on_leave=True,
            message=leave_message(leave),
            last_event=last,
        )

    if last is None:
        return PunchState(
            can_punch_in=True,
            can_punch_out=False,
            is_on_leave=False,
            message=messages.NEED_PUNCH_IN,
        )

    if last.kind == PunchKind.PUNCH_IN:
        return PunchState(
            can_punch_in=False,
            can_punch_out=True,
            is_on_leave=False,
            message=messages.READY_FOR_PUNCH_OUT,
            last_event=last,
        )

    return PunchState(
        can_punch_in=False,
        can_punch_out=False,
        is_on_leave=False,
        message=messages.COMPLETED,
        last_event=last,
    )


def validate_transition(events: Iterable[AttendanceEvent], proposed: Union[PunchKind, str]) -> TransitionResult:
    try:
        kind = PunchKind(proposed)
    except ValueError:
        return TransitionResult.reject(messages.UNSUPPORTED_KIND)

    last = last_event(events)

    if kind == PunchKind.PUNCH_IN:
        if last is None or last.kind == PunchKind.PUNCH_OUT:
            return TransitionResult.accept()
        return TransitionResult.reject(messages.ALREADY_PUNCHED_IN)

    if last is None:
        return TransitionResult.reject(messages.NEEDS_PRIOR_PUNCH_IN)
    if last.kind != PunchKind.PUNCH_IN:
        return TransitionResult.reject(messages.ALREADY_PUNCHED_OUT)
    return TransitionResult.accept()


def create_punch_payload(
    user_id: str,
    kind: PunchKind,
    occurred_at: datetime,
    origin: str,
    note: Optional[str] = None,
) -> PunchPayload:
    return PunchPayload(user_id=user_id, kind=kind, occurred_at=occurred_at, origin=origin, note=note)

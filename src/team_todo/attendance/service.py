from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Sequence

import structlog

from ..auth.capabilities import has_base_access
from ..auth.context import UserContext
from ..common.clock import Clock, system_clock
from ..common.datetime_utils import DayBoundaries, get_day_boundaries
from ..common.envelope import ApiResponse, build_error, build_response
from ..common.validators import optional_text, require_max_length
from ..core.constants import DEFAULT_TIMEZONE, PUNCH_NOTE_MAX_LENGTH
from ..core.enums import PunchKind
from ..core.exceptions import AuthorizationError, DomainError, InfrastructureError, ValidationError
from . import messages
from .calendar import pick_leave_entries
from .model import AttendanceEvent, LeaveInfo
from .repository import AttendanceRepository, LeaveRepository
from .state_machine import create_punch_payload, derive_status, validate_transition

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class DailyContext:
    events: Sequence[AttendanceEvent]
    leave: Optional[LeaveInfo]
    boundaries: DayBoundaries


class AttendanceService:
    """Use cases: today's punch status, punch in, punch out.

    Reads the day, decides with the pure state machine, then writes. Two
    concurrent punches for the same user can both pass the check before either
    is stored; that race is left to the store.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        leaves: Optional[LeaveRepository] = None,
        *,
        clock: Optional[Clock] = None,
        zone: str = DEFAULT_TIMEZONE,
    ):
        self._attendance = attendance
        self._leaves = leaves
        self._clock = clock or system_clock
        self._zone = zone

    def get_today_status(self, user: UserContext) -> ApiResponse:
        now = self._clock()
        try:
            self._require_access(user)
            ctx = self._load_day(user.user_id, now)
            return build_response({"state": derive_status(ctx.events, ctx.leave)}, None, now)
        except DomainError as e:
            return build_error(e, now)

    def punch_in(self, user: UserContext, origin: str, note: Optional[str] = None) -> ApiResponse:
        return self._handle_punch(user, origin, PunchKind.PUNCH_IN, note)

    def punch_out(self, user: UserContext, origin: str, note: Optional[str] = None) -> ApiResponse:
        return self._handle_punch(user, origin, PunchKind.PUNCH_OUT, note)

    def _handle_punch(self, user: UserContext, origin: str, kind: PunchKind, note: Optional[str]) -> ApiResponse:
        now = self._clock()
        try:
            self._require_access(user)
            note = optional_text(require_max_length(note, "Note", PUNCH_NOTE_MAX_LENGTH), "Note")
            ctx = self._load_day(user.user_id, now)

            # Leave wins over transition rules and has its own message.
            if ctx.leave and ctx.leave.is_on_leave:
                raise ValidationError(messages.BLOCKED_BY_LEAVE)

            verdict = validate_transition(ctx.events, kind)
            if not verdict.ok:
                raise ValidationError(verdict.reason)

            payload = create_punch_payload(user.user_id, kind, now, origin or "", note)
            try:
                saved = self._attendance.create_event(payload)
            except Exception as exc:
                logger.exception("punch_save_failed", user_id=user.user_id, kind=kind.value)
                raise InfrastructureError(messages.SAVE_FAILED) from exc

            logger.info("punch_saved", user_id=user.user_id, kind=kind.value, day=ctx.boundaries.iso_date)
            state = derive_status([*ctx.events, saved], ctx.leave)
            return build_response({"record": saved, "state": state}, None, now)
        except DomainError as e:
            return build_error(e, now)

    @staticmethod
    def _require_access(user: UserContext) -> None:
        if not has_base_access(user.role):
            raise AuthorizationError(messages.FORBIDDEN)

    def _load_day(self, user_id: str, now: datetime) -> DailyContext:
        boundaries = get_day_boundaries(now, self._zone)
        try:
            events = list(
                self._attendance.list_events_for_user_and_range(user_id, boundaries.start_utc, boundaries.end_utc)
            )
            leave = self._leave_for(user_id, boundaries.day)
        except Exception as exc:
            logger.exception("attendance_load_failed", user_id=user_id, day=boundaries.iso_date)
            raise InfrastructureError(messages.LOAD_FAILED) from exc
        return DailyContext(events=events, leave=leave, boundaries=boundaries)

    def _leave_for(self, user_id: str, day: date) -> Optional[LeaveInfo]:
        if not self._leaves:
            return None
        entry = pick_leave_entries(self._leaves.list_leave_entries(user_id, day, day)).get(day)
        if entry is None:
            return None
        # Only full-day leave blocks punching.
        return LeaveInfo(is_on_leave=entry.is_full_day, kind_label=messages.LEAVE_LABELS.get(entry.kind))

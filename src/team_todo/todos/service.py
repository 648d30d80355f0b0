from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar

import structlog

from ..auth.capabilities import has_base_access, resolve
from ..auth.context import UserContext
from ..common.clock import Clock, system_clock
from ..common.datetime_utils import local_today, parse_iso_date
from ..common.envelope import ApiResponse, build_error, build_response
from ..common.validators import optional_text, require_non_empty
from ..core.constants import DEFAULT_EDIT_LOCK_HOUR, DEFAULT_TIMEZONE
from ..core.enums import TodoStatus
from ..core.exceptions import (
    AuthorizationError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    ValidationError,
)
from . import messages
from .board import build_board, sort_by_priority
from .lock import compute_lock_deadline, edit_lock_status, is_locked
from .model import NewTodo, TodoFilters, TodoItem
from .repository import TodoRepository

logger = structlog.get_logger(__name__)

R = TypeVar("R")

UPDATABLE_FIELDS = frozenset({"title", "description", "status", "issue", "solution", "decision", "notes", "due_date"})
_TEXT_FIELDS = ("description", "issue", "solution", "decision", "notes")


def parse_status(value: Any) -> TodoStatus:
    try:
        return TodoStatus(value)
    except ValueError:
        raise ValidationError(messages.INVALID_STATUS)


def parse_due_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    return parse_iso_date(value)


def sanitize_patch(raw: Mapping[str, Any]) -> Dict[str, Any]:
    """Validate a partial update. ``locked_at`` and unknown keys are rejected."""
    if not raw:
        raise ValidationError(messages.NO_FIELDS)

    clean: Dict[str, Any] = {}
    for name, value in raw.items():
        if name not in UPDATABLE_FIELDS:
            raise ValidationError(messages.UNKNOWN_FIELD.format(name=name))
        if name == "title":
            clean[name] = require_non_empty(value, "Title")
        elif name == "status":
            clean[name] = parse_status(value)
        elif name == "due_date":
            clean[name] = parse_due_date(value)
        else:
            clean[name] = optional_text(value, name.capitalize())
    return clean


class TodoService:
    """Use cases: kanban board, listing, create/update/delete with edit locks.

    Members only see and change todos assigned to them and lose edit rights at
    the item's lock deadline; admins are unrestricted.
    """

    def __init__(
        self,
        todos: TodoRepository,
        *,
        clock: Optional[Clock] = None,
        zone: str = DEFAULT_TIMEZONE,
        lock_hour: int = DEFAULT_EDIT_LOCK_HOUR,
    ):
        self._todos = todos
        self._clock = clock or system_clock
        self._zone = zone
        self._lock_hour = int(lock_hour)

    def get_board(self, user: UserContext, filters: Optional[TodoFilters] = None) -> ApiResponse:
        now = self._clock()
        try:
            items = self._visible_todos(user, filters or TodoFilters())
            return build_response({"board": build_board(items, self._today(now))}, None, now)
        except DomainError as e:
            return build_error(e, now)

    def list_todos(self, user: UserContext, filters: Optional[TodoFilters] = None) -> ApiResponse:
        now = self._clock()
        try:
            items = self._visible_todos(user, filters or TodoFilters())
            return build_response({"todos": sort_by_priority(items, self._today(now))}, None, now)
        except DomainError as e:
            return build_error(e, now)

    def get_todo(self, user: UserContext, todo_id: str) -> ApiResponse:
        now = self._clock()
        try:
            self._require_access(user)
            item = self._get_owned(user, todo_id)
            return build_response({"todo": item, "edit_lock": edit_lock_status(item, user.role, now)}, None, now)
        except DomainError as e:
            return build_error(e, now)

    def create_todo(self, user: UserContext, data: Mapping[str, Any]) -> ApiResponse:
        now = self._clock()
        try:
            self._require_access(user)
            if not resolve(user.role).can_create_todo:
                raise AuthorizationError(messages.CREATE_FORBIDDEN)

            # Members always create for themselves; admins may assign.
            assignee_id = user.user_id
            assignee_name = user.name or ""
            if user.is_admin and data.get("assignee_id"):
                assignee_id = str(data["assignee_id"])
                assignee_name = str(data.get("assignee_name") or "")

            payload = NewTodo(
                assignee_id=assignee_id,
                assignee_name=assignee_name,
                title=require_non_empty(data.get("title"), "Title"),
                status=parse_status(data.get("status") or TodoStatus.PREWORK),
                project_id=str(data.get("project_id") or ""),
                due_date=parse_due_date(data.get("due_date")),
                created_at=now,
                locked_at=self._next_lock(now),
                **{name: optional_text(data.get(name), name.capitalize()) for name in _TEXT_FIELDS},
            )
            created = self._store(messages.SAVE_FAILED, "todo_create_failed", lambda: self._todos.create_todo(payload))
            logger.info("todo_created", user_id=user.user_id, todo_id=created.todo_id)
            return build_response({"todo": created}, None, now)
        except DomainError as e:
            return build_error(e, now)

    def update_todo(self, user: UserContext, todo_id: str, patch: Mapping[str, Any]) -> ApiResponse:
        now = self._clock()
        try:
            self._require_access(user)
            clean = sanitize_patch(patch)
            return build_response({"todo": self._mutate(user, todo_id, clean, now)}, None, now)
        except DomainError as e:
            return build_error(e, now)

    def update_status(self, user: UserContext, todo_id: str, status: Any) -> ApiResponse:
        now = self._clock()
        try:
            self._require_access(user)
            clean = {"status": parse_status(status)}
            return build_response({"todo": self._mutate(user, todo_id, clean, now)}, None, now)
        except DomainError as e:
            return build_error(e, now)

    def delete_todo(self, user: UserContext, todo_id: str) -> ApiResponse:
        now = self._clock()
        try:
            self._require_access(user)
            self._find(todo_id)
            if not resolve(user.role).can_delete_todo:
                raise AuthorizationError(messages.DELETE_FORBIDDEN)
            deleted = self._store(
                messages.DELETE_FAILED, "todo_delete_failed", lambda: self._todos.delete_todo(todo_id)
            )
            logger.info("todo_deleted", user_id=user.user_id, todo_id=todo_id)
            return build_response({"deleted": bool(deleted)}, None, now)
        except DomainError as e:
            return build_error(e, now)

    def _mutate(self, user: UserContext, todo_id: str, clean: Dict[str, Any], now: datetime) -> TodoItem:
        existing = self._get_owned(user, todo_id)
        if is_locked(existing.locked_at, now, user.role):
            raise AuthorizationError(messages.LOCKED)

        # The deadline always moves to the next one after this touch.
        patch = {**clean, "updated_at": now, "locked_at": self._next_lock(now)}
        updated = self._store(messages.SAVE_FAILED, "todo_update_failed", lambda: self._todos.update_todo(todo_id, patch))
        logger.info("todo_updated", user_id=user.user_id, todo_id=todo_id, fields=sorted(clean))
        return updated

    def _visible_todos(self, user: UserContext, filters: TodoFilters) -> List[TodoItem]:
        self._require_access(user)
        if not user.is_admin:
            filters = replace(filters, assignee_ids=(user.user_id,))
        items = self._store(messages.LOAD_FAILED, "todo_list_failed", lambda: list(self._todos.list_todos(filters)))
        if not user.is_admin:
            items = [t for t in items if t.assignee_id == user.user_id]
        return items

    def _get_owned(self, user: UserContext, todo_id: str) -> TodoItem:
        item = self._find(todo_id)
        if not user.is_admin and item.assignee_id != user.user_id:
            raise AuthorizationError(messages.NOT_ASSIGNED)
        return item

    def _find(self, todo_id: str) -> TodoItem:
        item = self._store(messages.LOAD_FAILED, "todo_get_failed", lambda: self._todos.get_todo(todo_id))
        if item is None:
            raise NotFoundError(messages.NOT_FOUND)
        return item

    def _next_lock(self, now: datetime) -> datetime:
        return compute_lock_deadline(now, self._zone, lock_hour=self._lock_hour)

    def _today(self, now: datetime) -> date:
        return local_today(now, self._zone)

    @staticmethod
    def _require_access(user: UserContext) -> None:
        if not has_base_access(user.role):
            raise AuthorizationError(messages.FORBIDDEN)

    @staticmethod
    def _store(message: str, event: str, call: Callable[[], R]) -> R:
        """Run a store call; any failure becomes a generic infrastructure error."""
        try:
            return call()
        except Exception as exc:
            logger.exception(event)
            raise InfrastructureError(message) from exc

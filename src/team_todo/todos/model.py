from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, List, Optional, Tuple

from ..core.enums import TodoStatus


@dataclass(frozen=True)
class TodoItem:
    """Domain entity: one task on the board."""

    todo_id: str
    assignee_id: str
    title: str
    status: TodoStatus
    created_at: datetime
    updated_at: datetime
    locked_at: Optional[datetime] = None
    due_date: Optional[date] = None
    assignee_name: str = ""
    project_id: str = ""
    project_code: str = ""
    project_name: str = ""
    description: Optional[str] = None
    issue: Optional[str] = None
    solution: Optional[str] = None
    decision: Optional[str] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class NewTodo:
    """Creation payload handed to the store. ``locked_at`` is set by the service."""

    assignee_id: str
    title: str
    status: TodoStatus
    created_at: datetime
    locked_at: datetime
    due_date: Optional[date] = None
    assignee_name: str = ""
    project_id: str = ""
    description: Optional[str] = None
    issue: Optional[str] = None
    solution: Optional[str] = None
    decision: Optional[str] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class TodoFilters:
    statuses: Tuple[TodoStatus, ...] = ()
    project_ids: Tuple[str, ...] = ()
    assignee_ids: Tuple[str, ...] = ()
    due_from: Optional[date] = None
    due_to: Optional[date] = None
    search_text: Optional[str] = None


@dataclass(frozen=True)
class EditLockStatus:
    is_locked: bool
    can_edit: bool
    locked_at: Optional[datetime] = None
    reason: Optional[str] = None


@dataclass(frozen=True)
class BoardCard:
    item: TodoItem
    is_overdue: bool
    is_due_today: bool


@dataclass(frozen=True)
class BoardColumn:
    status: TodoStatus
    label: str
    items: List[BoardCard] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class BoardStats:
    total: int
    by_status: Dict[TodoStatus, int]
    overdue: int
    due_today: int


@dataclass(frozen=True)
class Board:
    columns: List[BoardColumn]
    stats: BoardStats

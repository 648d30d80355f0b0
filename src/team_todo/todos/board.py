"""Kanban aggregation over already-fetched todo items."""

from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, List

from ..core.enums import TodoStatus
from . import messages
from .model import Board, BoardCard, BoardColumn, BoardStats, TodoFilters, TodoItem

COLUMN_ORDER = tuple(TodoStatus)

_STATUS_PRIORITY = {
    TodoStatus.INCOMING: 5,
    TodoStatus.PO_PLACED: 4,
    TodoStatus.DESIGN: 3,
    TodoStatus.HOLD: 2,
    TodoStatus.PREWORK: 1,
}


def is_overdue(item: TodoItem, today: date) -> bool:
    return item.due_date is not None and item.due_date < today


def is_due_today(item: TodoItem, today: date) -> bool:
    return item.due_date is not None and item.due_date == today


def build_board(items: Iterable[TodoItem], today: date) -> Board:
    """Group items into the fixed status columns.

    Column order never depends on the items; inside a column items keep the
    order they were given in.
    """
    buckets: Dict[TodoStatus, List[BoardCard]] = {status: [] for status in COLUMN_ORDER}
    overdue = 0
    due_today = 0
    total = 0

    for item in items:
        card = BoardCard(item=item, is_overdue=is_overdue(item, today), is_due_today=is_due_today(item, today))
        buckets[TodoStatus(item.status)].append(card)
        total += 1
        overdue += card.is_overdue
        due_today += card.is_due_today

    columns = [
        BoardColumn(status=status, label=messages.STATUS_LABELS[status], items=buckets[status])
        for status in COLUMN_ORDER
    ]
    stats = BoardStats(
        total=total,
        by_status={status: len(buckets[status]) for status in COLUMN_ORDER},
        overdue=overdue,
        due_today=due_today,
    )
    return Board(columns=columns, stats=stats)


def filter_todos(items: Iterable[TodoItem], filters: TodoFilters) -> List[TodoItem]:
    result = list(items)

    if filters.statuses:
        result = [t for t in result if t.status in filters.statuses]
    if filters.project_ids:
        result = [t for t in result if t.project_id in filters.project_ids]
    if filters.assignee_ids:
        result = [t for t in result if t.assignee_id in filters.assignee_ids]
    if filters.due_from:
        result = [t for t in result if t.due_date is not None and t.due_date >= filters.due_from]
    if filters.due_to:
        result = [t for t in result if t.due_date is not None and t.due_date <= filters.due_to]
    if filters.search_text:
        needle = filters.search_text.lower()
        result = [
            t
            for t in result
            if needle in t.title.lower()
            or needle in (t.description or "").lower()
            or needle in t.project_code.lower()
            or needle in t.project_name.lower()
        ]

    return result


def priority_of(item: TodoItem, today: date) -> int:
    """Later stages rank higher; due dates bump the score."""
    score = _STATUS_PRIORITY[TodoStatus(item.status)]
    if item.due_date is None:
        return score
    days_left = (item.due_date - today).days
    if days_left < 0:
        score += 10
    elif days_left == 0:
        score += 5
    elif days_left <= 3:
        score += 2
    return score


def sort_by_priority(items: Iterable[TodoItem], today: date) -> List[TodoItem]:
    return sorted(items, key=lambda t: priority_of(t, today), reverse=True)

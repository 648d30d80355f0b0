from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import NewTodo, TodoFilters, TodoItem


class TodoRepository(Protocol):
    def list_todos(self, filters: TodoFilters) -> Sequence[TodoItem]:
        raise NotImplementedError

    def get_todo(self, todo_id: str) -> Optional[TodoItem]:
        raise NotImplementedError

    def create_todo(self, payload: NewTodo) -> TodoItem:
        raise NotImplementedError

    def update_todo(self, todo_id: str, patch: Mapping[str, Any]) -> TodoItem:
        """Apply ``patch`` (field name -> new value) and return the stored item."""

        raise NotImplementedError

    def delete_todo(self, todo_id: str) -> bool:
        raise NotImplementedError

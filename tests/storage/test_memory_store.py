from __future__ import annotations

from datetime import datetime, timezone

import pytest

from team_todo.common.clock import fixed_clock
from team_todo.core.enums import TodoStatus
from team_todo.core.exceptions import ValidationError
from team_todo.storage.memory import InMemoryStore
from team_todo.todos.model import NewTodo

NOW = datetime(2025, 9, 25, 10, 0, tzinfo=timezone.utc)


def make_store():
    return InMemoryStore(clock=fixed_clock(NOW), zone="Asia/Seoul")


def test_project_code_and_name_are_copied_onto_new_todos():
    store = make_store()
    store.add_project("p1", "PJ01", "Pump housing")

    item = store.create_todo(
        NewTodo(
            assignee_id="user-1",
            title="Order bearings",
            status=TodoStatus.PREWORK,
            created_at=NOW,
            locked_at=NOW,
            project_id="p1",
        )
    )

    assert item.project_code == "PJ01"
    assert item.project_name == "Pump housing"


@pytest.mark.parametrize("code", ["pj01", "PJ1", "PROJ1", "P-01"])
def test_malformed_project_code_is_rejected(code):
    store = make_store()

    with pytest.raises(ValidationError, match="Invalid project code"):
        store.add_project("p1", code, "Pump housing")


def test_project_needs_a_name():
    with pytest.raises(ValidationError, match="Project name is required"):
        make_store().add_project("p1", "PJ01", "  ")

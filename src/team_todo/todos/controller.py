from __future__ import annotations

from flask import Flask, g, request

from ..common.datetime_utils import parse_iso_date
from ..common.envelope import build_error
from ..common.web import make_user_required, respond
from ..container import Container
from ..core.exceptions import ValidationError
from .model import TodoFilters
from .service import parse_status


def _split(name: str) -> tuple:
    values = []
    for raw in request.args.getlist(name):
        values.extend(v.strip() for v in raw.split(",") if v.strip())
    return tuple(values)


def filters_from_args() -> TodoFilters:
    due_from = request.args.get("due_from")
    due_to = request.args.get("due_to")
    return TodoFilters(
        statuses=tuple(parse_status(s) for s in _split("status")),
        project_ids=_split("project_id"),
        assignee_ids=_split("assignee_id"),
        due_from=parse_iso_date(due_from) if due_from else None,
        due_to=parse_iso_date(due_to) if due_to else None,
        search_text=(request.args.get("q") or "").strip() or None,
    )


def register(app: Flask, container: Container) -> None:
    user_required = make_user_required(container.clock)
    service = container.todo_service

    def _body() -> dict:
        body = request.get_json(silent=True)
        return body if isinstance(body, dict) else {}

    @app.route("/todos/board", methods=["GET"], endpoint="todos_board")
    @user_required
    def board():
        try:
            filters = filters_from_args()
        except ValidationError as e:
            return respond(build_error(e, container.clock()))
        return respond(service.get_board(g.user, filters))

    @app.route("/todos", methods=["GET"], endpoint="todos_list")
    @user_required
    def list_todos():
        try:
            filters = filters_from_args()
        except ValidationError as e:
            return respond(build_error(e, container.clock()))
        return respond(service.list_todos(g.user, filters))

    @app.route("/todos", methods=["POST"], endpoint="todos_create")
    @user_required
    def create_todo():
        return respond(service.create_todo(g.user, _body()))

    @app.route("/todos/<todo_id>", methods=["GET"], endpoint="todos_get")
    @user_required
    def get_todo(todo_id: str):
        return respond(service.get_todo(g.user, todo_id))

    @app.route("/todos/<todo_id>", methods=["PATCH"], endpoint="todos_update")
    @user_required
    def update_todo(todo_id: str):
        return respond(service.update_todo(g.user, todo_id, _body()))

    @app.route("/todos/<todo_id>/status", methods=["PATCH"], endpoint="todos_update_status")
    @user_required
    def update_status(todo_id: str):
        return respond(service.update_status(g.user, todo_id, _body().get("status")))

    @app.route("/todos/<todo_id>", methods=["DELETE"], endpoint="todos_delete")
    @user_required
    def delete_todo(todo_id: str):
        return respond(service.delete_todo(g.user, todo_id))

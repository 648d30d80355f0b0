from __future__ import annotations

from flask import Flask, g, request

from ..common.web import client_origin, make_user_required, respond
from ..container import Container


def register(app: Flask, container: Container) -> None:
    user_required = make_user_required(container.clock)

    def _note():
        body = request.get_json(silent=True)
        return body.get("note") if isinstance(body, dict) else None

    @app.route("/attendance/today", methods=["GET"], endpoint="attendance_today")
    @user_required
    def today():
        return respond(container.attendance_service.get_today_status(g.user))

    @app.route("/attendance/punch-in", methods=["POST"], endpoint="attendance_punch_in")
    @user_required
    def punch_in():
        return respond(container.attendance_service.punch_in(g.user, client_origin(), _note()))

    @app.route("/attendance/punch-out", methods=["POST"], endpoint="attendance_punch_out")
    @user_required
    def punch_out():
        return respond(container.attendance_service.punch_out(g.user, client_origin(), _note()))

    @app.route("/attendance/calendar", methods=["GET"], endpoint="attendance_calendar")
    @user_required
    def calendar():
        # Non-numeric values fall through to the service's range validation.
        year = request.args.get("year", type=int, default=0)
        month = request.args.get("month", type=int, default=0)
        return respond(container.leave_calendar_service.get_monthly_calendar(g.user, year, month))

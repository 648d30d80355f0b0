from __future__ import annotations

from flask import Flask, g

from ..common.web import make_user_required, respond
from ..container import Container


def register(app: Flask, container: Container) -> None:
    user_required = make_user_required(container.clock)

    @app.route("/dashboard/overview", methods=["GET"], endpoint="dashboard_overview")
    @user_required
    def overview():
        return respond(container.dashboard_service.get_overview(g.user))

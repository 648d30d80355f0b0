from __future__ import annotations

import importlib
from typing import Optional

import structlog
from dotenv import load_dotenv
from flask import Flask, jsonify

from .attendance.controller import register as register_attendance
from .common.clock import Clock
from .config import get_settings_module
from .container import Container, build_container
from .dashboard.controller import register as register_dashboard
from .logging import setup_logging
from .todos.controller import register as register_todos


def create_app(*, container: Optional[Container] = None, clock: Optional[Clock] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["TIMEZONE"] = getattr(settings, "TIMEZONE", "Asia/Seoul")
    app.config["EDIT_LOCK_HOUR"] = int(getattr(settings, "EDIT_LOCK_HOUR", 9))

    setup_logging(getattr(settings, "LOG_LEVEL", None))
    structlog.get_logger(__name__).info(
        "app_configured",
        settings=settings_module,
        timezone=app.config["TIMEZONE"],
        edit_lock_hour=app.config["EDIT_LOCK_HOUR"],
    )

    container = container or build_container(
        zone=app.config["TIMEZONE"],
        lock_hour=app.config["EDIT_LOCK_HOUR"],
        clock=clock,
    )

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"}), 200

    register_attendance(app, container)
    register_todos(app, container)
    register_dashboard(app, container)

    return app

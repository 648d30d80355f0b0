"""Flask helpers shared by the feature controllers."""

from __future__ import annotations

from functools import wraps

from flask import g, jsonify, request

from ..auth.context import UserContext
from .clock import Clock
from .envelope import ApiResponse, build_response, status_for

UNAUTHENTICATED = "User authentication headers are required."


def respond(response: ApiResponse):
    return jsonify(response.to_dict()), status_for(response)


def make_user_required(clock: Clock):
    def user_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user = UserContext.from_headers(request.headers)
            if user is None:
                return jsonify(build_response(None, UNAUTHENTICATED, clock()).to_dict()), 401
            g.user = user
            return view(*args, **kwargs)

        return wrapper

    return user_required


def client_origin() -> str:
    forwarded = request.headers.get("X-Forwarded-For", "")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or ""

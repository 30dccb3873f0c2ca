"""Flask helpers shared by the feature controllers."""

from __future__ import annotations

from enum import Enum
from functools import wraps
from typing import Optional, Type, TypeVar

from flask import Flask, jsonify, request, session

from ..core.exceptions import AuthenticationError, InvalidStateError, NotFoundError, ValidationError
from .validators import require_enum

E = TypeVar("E", bound=Enum)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"error": "Please log in to continue"}), 401
        return view(*args, **kwargs)

    return wrapper


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def query_text(name: str) -> str:
    return request.args.get(name, "", type=str)


def query_enum(name: str, enum_cls: Type[E]) -> Optional[E]:
    """Optional enum filter; missing, empty or 'all' means no filter."""
    value = request.args.get(name, "", type=str).strip()
    if not value or value.lower() == "all":
        return None
    return require_enum(value, enum_cls, name)


def not_found(message: str):
    return jsonify({"error": message}), 404


def register_error_handlers(app: Flask) -> None:
    def _handler(status: int):
        def handle(exc):
            return jsonify({"error": str(exc)}), status

        return handle

    app.register_error_handler(ValidationError, _handler(400))
    app.register_error_handler(AuthenticationError, _handler(401))
    app.register_error_handler(NotFoundError, _handler(404))
    app.register_error_handler(InvalidStateError, _handler(409))

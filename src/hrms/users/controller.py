from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.web import json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        s_user = container.auth_service.authenticate(str(data.get("email", "")), str(data.get("password", "")))

        session.clear()
        session["user_id"] = s_user.user_id
        session["email"] = s_user.email
        session["name"] = s_user.name
        session["role"] = s_user.role
        return jsonify({"user": s_user.to_dict()})

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"ok": True})

    @app.route("/api/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        return jsonify(
            {
                "user": {
                    "user_id": session["user_id"],
                    "email": session.get("email"),
                    "name": session.get("name"),
                    "role": session.get("role"),
                }
            }
        )

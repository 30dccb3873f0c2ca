from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import json_body, login_required, not_found, query_enum, query_text
from ..container import Container
from ..core.enums import AttendanceStatus, LeaveStatus
from .summary import attendance_by_date, attendance_rows, attendance_totals, leave_rows


def register(app: Flask, container: Container) -> None:
    store = container.store

    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    @login_required
    def list_attendance():
        snapshot = store.snapshot()
        rows = attendance_rows(snapshot, query=query_text("q"), status=query_enum("status", AttendanceStatus))
        totals = attendance_totals([a.attendance_log for a in snapshot])
        return jsonify({"records": [r.to_dict() for r in rows], "totals": totals.to_dict()})

    @app.route("/api/attendance/by-date", methods=["GET"], endpoint="attendance_by_date")
    @login_required
    def attendance_chart():
        return jsonify({"days": [d.to_dict() for d in attendance_by_date(store.attendance_logs())]})

    @app.route("/api/attendance/<int:employee_id>", methods=["GET"], endpoint="get_attendance")
    @login_required
    def get_attendance(employee_id: int):
        log = store.get_attendance(employee_id)
        if not log:
            return not_found(f"Employee {employee_id} does not exist")
        return jsonify({"attendance": log.to_dict()})

    @app.route("/api/leave-requests", methods=["GET"], endpoint="list_leave_requests")
    @login_required
    def list_leave_requests():
        rows = leave_rows(store.snapshot(), query=query_text("q"), status=query_enum("status", LeaveStatus))
        return jsonify({"leave_requests": [r.to_dict() for r in rows]})

    @app.route(
        "/api/leave-requests/<int:employee_id>/<leave_date>/decision",
        methods=["POST"],
        endpoint="decide_leave_request",
    )
    @login_required
    def decide_leave_request(employee_id: int, leave_date: str):
        decision = json_body().get("status")
        log = store.decide_leave_request(employee_id, leave_date, decision) and store.get_attendance(employee_id)
        if not log:
            return not_found(f"No leave request for employee {employee_id} on {leave_date}")
        return jsonify({"attendance": log.to_dict()})

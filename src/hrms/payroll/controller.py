from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import login_required, not_found, query_text
from ..container import Container


def register(app: Flask, container: Container) -> None:
    store = container.store
    reports = container.payroll_report_service

    @app.route("/api/payroll", methods=["GET"], endpoint="list_payroll")
    @login_required
    def list_payroll():
        snapshot = store.snapshot()
        rows = reports.build_rows(snapshot, query=query_text("q"))
        totals = reports.totals([a.payroll for a in snapshot])
        return jsonify({"records": rows, "totals": totals.to_dict()})

    @app.route("/api/payroll/<int:employee_id>", methods=["GET"], endpoint="get_payroll")
    @login_required
    def get_payroll(employee_id: int):
        payroll = store.get_payroll(employee_id)
        if not payroll:
            return not_found(f"Employee {employee_id} does not exist")
        return jsonify({"payroll": payroll.to_dict()})

    @app.route("/api/payroll/<int:employee_id>/payslip", methods=["GET"], endpoint="get_payslip")
    @login_required
    def get_payslip(employee_id: int):
        agg = store.get_aggregate(employee_id)
        if not agg:
            return not_found(f"Employee {employee_id} does not exist")
        return jsonify({"payslip": reports.build_payslip(agg.employee, agg.payroll).to_dict()})

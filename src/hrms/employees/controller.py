from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import json_body, login_required, not_found, query_enum, query_text
from ..container import Container
from ..core.enums import Department
from .summary import department_headcount, search_employees


def register(app: Flask, container: Container) -> None:
    store = container.store

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @login_required
    def list_employees():
        employees = search_employees(
            store.employees(),
            query=query_text("q"),
            department=query_enum("department", Department),
        )
        return jsonify({"employees": [e.to_dict() for e in employees], "total": len(store)})

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    @login_required
    def add_employee():
        employee = store.add_employee(json_body())
        return jsonify({"employee": employee.to_dict()}), 201

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="get_employee")
    @login_required
    def get_employee(employee_id: int):
        employee = store.get_employee(employee_id)
        if not employee:
            return not_found(f"Employee {employee_id} does not exist")
        return jsonify({"employee": employee.to_dict()})

    @app.route("/api/employees/<int:employee_id>", methods=["PATCH"], endpoint="update_employee")
    @login_required
    def update_employee(employee_id: int):
        employee = store.update_employee(employee_id, json_body()) and store.get_employee(employee_id)
        if not employee:
            return not_found(f"Employee {employee_id} does not exist")
        return jsonify({"employee": employee.to_dict()})

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @login_required
    def delete_employee(employee_id: int):
        if not store.delete_employee(employee_id):
            return not_found(f"Employee {employee_id} does not exist")
        return "", 204

    @app.route("/api/departments", methods=["GET"], endpoint="list_departments")
    @login_required
    def list_departments():
        headcount = department_headcount(store.employees())
        return jsonify(
            {
                "departments": [d.value for d in Department],
                "headcount": [{"department": d.value, "count": n} for d, n in headcount.items()],
            }
        )

from __future__ import annotations

import pytest

from hrms.main import create_app


@pytest.fixture
def app():
    return create_app("hrms.settings.testing")


@pytest.fixture
def client(app):
    c = app.test_client()
    resp = c.post("/api/login", json={"email": "demo@hrms.com", "password": "demo123"})
    assert resp.status_code == 200
    return c


def test_data_routes_require_login(app):
    c = app.test_client()

    assert c.get("/api/employees").status_code == 401
    assert c.get("/api/dashboard").status_code == 401


def test_wrong_password_is_401(app):
    resp = app.test_client().post("/api/login", json={"email": "demo@hrms.com", "password": "nope"})

    assert resp.status_code == 401
    assert resp.get_json()["error"] == "Invalid email or password"


def test_logout_clears_session(client):
    assert client.get("/api/me").get_json()["user"]["name"] == "Demo User"

    client.post("/api/logout")

    assert client.get("/api/me").status_code == 401


def test_employee_crud_round(client):
    resp = client.post(
        "/api/employees",
        json={
            "name": "Lerato Mokoena",
            "position": "Recruiter",
            "department": "HR",
            "salary": 41000,
            "contact": "lerato@moderntech.com",
        },
    )
    assert resp.status_code == 201
    new_id = resp.get_json()["employee"]["employee_id"]
    assert new_id == 11

    assert client.get(f"/api/payroll/{new_id}").get_json()["payroll"]["final_salary"] == 41000

    resp = client.patch(f"/api/employees/{new_id}", json={"salary": 45000})
    assert resp.get_json()["employee"]["salary"] == 45000

    assert client.delete(f"/api/employees/{new_id}").status_code == 204
    assert client.get(f"/api/employees/{new_id}").status_code == 404
    assert client.get(f"/api/attendance/{new_id}").status_code == 404
    assert client.get(f"/api/payroll/{new_id}").status_code == 404


def test_invalid_employee_is_400(client):
    resp = client.post("/api/employees", json={"name": "X", "department": "Legal"})

    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_infinite_salary_is_400(client):
    body = (
        '{"name": "X", "position": "Dev", "department": "QA",'
        ' "salary": Infinity, "contact": "x@moderntech.com"}'
    )
    resp = client.post("/api/employees", data=body, content_type="application/json")

    assert resp.status_code == 400
    resp = client.patch("/api/employees/1", data='{"salary": Infinity}', content_type="application/json")
    assert resp.status_code == 400
    assert client.get("/api/payroll/1/payslip").status_code == 200


def test_unknown_employee_is_404(client):
    assert client.patch("/api/employees/999", json={"salary": 1}).status_code == 404
    assert client.delete("/api/employees/999").status_code == 404


def test_record_deleted_after_command_is_404(app, client, monkeypatch):
    store = app.extensions["hrms"].store
    monkeypatch.setattr(store, "get_employee", lambda employee_id: None)
    monkeypatch.setattr(store, "get_attendance", lambda employee_id: None)

    assert client.patch("/api/employees/1", json={"salary": 1}).status_code == 404
    resp = client.post("/api/leave-requests/7/2025-07-22/decision", json={"status": "Approved"})
    assert resp.status_code == 404


def test_employee_search_and_departments(client):
    data = client.get("/api/employees?q=zulu").get_json()
    assert [e["name"] for e in data["employees"]] == ["Sipho Zulu"]

    data = client.get("/api/employees?department=Marketing").get_json()
    assert {e["employee_id"] for e in data["employees"]} == {5, 8}

    assert client.get("/api/employees?department=Legal").status_code == 400

    data = client.get("/api/departments").get_json()
    assert "Support" in data["departments"]
    assert sum(h["count"] for h in data["headcount"]) == 10


def test_leave_decision_flow(client):
    resp = client.post("/api/leave-requests/7/2025-07-22/decision", json={"status": "Approved"})
    assert resp.status_code == 200
    assert resp.get_json()["attendance"]["leave_requests"][0]["status"] == "Approved"

    pending = client.get("/api/leave-requests?status=Pending").get_json()["leave_requests"]
    assert 7 not in {r["employee_id"] for r in pending}

    resp = client.post("/api/leave-requests/7/2025-07-22/decision", json={"status": "Pending"})
    assert resp.status_code == 400

    resp = client.post("/api/leave-requests/7/2030-01-01/decision", json={"status": "Denied"})
    assert resp.status_code == 404


def test_attendance_tables(client):
    data = client.get("/api/attendance?status=Absent&q=karabo").get_json()
    assert [r["date"] for r in data["records"]] == ["2025-07-27"]
    assert data["totals"]["absent"] == 10

    days = client.get("/api/attendance/by-date").get_json()["days"]
    assert days[-1] == {"date": "2025-07-29", "present": 9, "absent": 1}


def test_payroll_and_payslip(client):
    data = client.get("/api/payroll?q=lungile").get_json()
    assert data["records"][0]["final_salary"] == 79000
    assert data["totals"]["headcount"] == 10

    slip = client.get("/api/payroll/2/payslip").get_json()["payslip"]
    assert slip["employee_code"] == "#0002"
    assert slip["tax_estimate"] == 14400
    assert slip["uif"] == 800
    assert slip["other_deductions"] == -14200
    assert slip["other_deductions_display"] == 0
    assert slip["pay_period"] == "December 2025"


def test_dashboard_overview(client):
    data = client.get("/api/dashboard").get_json()

    assert data["stats"]["total_employees"] == 10
    assert data["stats"]["attendance_rate"] == 90
    assert len(data["recent_leave_requests"]) == 5

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from ..attendance.model import AttendanceLog, AttendanceRecord, LeaveRequest
from ..common.datetime_utils import coerce_date
from ..common.validators import require_enum, require_non_empty, require_non_negative
from ..core.enums import AttendanceStatus, LeaveStatus
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..employees.validation import validate_new_employee
from ..payroll.model import PayrollRecord
from ..store.memory_repository import InMemoryAggregateRepository
from ..store.model import EmployeeAggregate
from ..store.service import RecordStore
from . import demo_data

logger = logging.getLogger(__name__)

Row = Mapping[str, Any]


def _employee_id(row: Row, source: str) -> int:
    value = row.get("employee_id")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(f"{source}: employee_id must be a positive integer")
    return value


def _build_employee(row: Row) -> Employee:
    employee_id = _employee_id(row, "employees")
    fields = validate_new_employee({k: v for k, v in row.items() if k != "employee_id"})
    return Employee(employee_id=employee_id, **fields)


def _build_log(employee_id: int, row: Row) -> AttendanceLog:
    records = []
    seen = set()
    for r in row.get("attendance") or ():
        day = coerce_date(r.get("date"), "attendance date")
        if day in seen:
            raise ValidationError(f"attendance: employee {employee_id} has two records on {day.isoformat()}")
        seen.add(day)
        records.append(AttendanceRecord(date=day, status=require_enum(r.get("status"), AttendanceStatus, "status")))

    requests = [
        LeaveRequest(
            date=coerce_date(r.get("date"), "leave date"),
            reason=require_non_empty(r.get("reason"), "reason"),
            status=require_enum(r.get("status", LeaveStatus.PENDING), LeaveStatus, "status"),
        )
        for r in row.get("leave_requests") or ()
    ]
    return AttendanceLog(employee_id=employee_id, attendance=tuple(records), leave_requests=tuple(requests))


def _build_payroll(employee_id: int, row: Row) -> PayrollRecord:
    return PayrollRecord(
        employee_id=employee_id,
        hours_worked=require_non_negative(row.get("hours_worked", 0), "hours_worked"),
        leave_deductions=require_non_negative(row.get("leave_deductions", 0), "leave_deductions"),
        final_salary=require_non_negative(row.get("final_salary"), "final_salary"),
    )


def _index(rows: Iterable[Row], source: str, known: Mapping[int, Employee]) -> dict[int, Row]:
    out: dict[int, Row] = {}
    for row in rows:
        employee_id = _employee_id(row, source)
        if employee_id not in known:
            raise ValidationError(f"{source}: employee {employee_id} does not exist")
        if employee_id in out:
            raise ValidationError(f"{source}: duplicate entry for employee {employee_id}")
        out[employee_id] = row
    return out


def build_aggregates(
    employees: Iterable[Row],
    attendance: Iterable[Row] = (),
    payroll: Iterable[Row] = (),
) -> list[EmployeeAggregate]:
    """Turn the three raw seed collections into aggregates.

    Attendance and payroll rows must reference a seeded employee. Employees
    without a row get an empty attendance log and a payroll record paying the
    full salary, the same companions add_employee creates.
    """
    by_id: dict[int, Employee] = {}
    for row in employees:
        emp = _build_employee(row)
        if emp.employee_id in by_id:
            raise ValidationError(f"employees: duplicate employee_id {emp.employee_id}")
        by_id[emp.employee_id] = emp

    logs = _index(attendance, "attendance", by_id)
    pays = _index(payroll, "payroll", by_id)

    aggregates = []
    for employee_id, emp in by_id.items():
        log_row = logs.get(employee_id)
        pay_row = pays.get(employee_id)
        aggregates.append(
            EmployeeAggregate(
                employee=emp,
                attendance_log=_build_log(employee_id, log_row) if log_row else AttendanceLog(employee_id=employee_id),
                payroll=(
                    _build_payroll(employee_id, pay_row)
                    if pay_row
                    else PayrollRecord(employee_id=employee_id, final_salary=emp.salary)
                ),
            )
        )
    return aggregates


def load_store(
    employees: Iterable[Row] = (),
    attendance: Iterable[Row] = (),
    payroll: Iterable[Row] = (),
    *,
    enforce_pending_only: bool = False,
    strict_not_found: bool = False,
) -> RecordStore:
    aggregates = build_aggregates(employees, attendance, payroll)
    logger.info("Loaded %d employees into the record store", len(aggregates))
    return RecordStore(
        InMemoryAggregateRepository(aggregates),
        enforce_pending_only=enforce_pending_only,
        strict_not_found=strict_not_found,
    )


def load_demo_store(*, enforce_pending_only: bool = False, strict_not_found: bool = False) -> RecordStore:
    return load_store(
        demo_data.EMPLOYEES,
        demo_data.ATTENDANCE,
        demo_data.PAYROLL,
        enforce_pending_only=enforce_pending_only,
        strict_not_found=strict_not_found,
    )
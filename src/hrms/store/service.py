from __future__ import annotations

import dataclasses
import logging
import threading
from datetime import date
from typing import Any, Mapping, Optional, Sequence, Union

from ..attendance.model import AttendanceLog
from ..common.datetime_utils import coerce_date
from ..common.validators import require_enum
from ..core.enums import LeaveStatus
from ..core.exceptions import InvalidStateError, NotFoundError, ValidationError
from ..employees.model import Employee, NewEmployee
from ..employees.validation import validate_new_employee, validate_patch
from ..payroll.model import PayrollRecord
from .memory_repository import InMemoryAggregateRepository
from .model import EmployeeAggregate
from .repository import AggregateRepository

logger = logging.getLogger(__name__)


class RecordStore:
    """Single owner of employees, attendance logs and payroll records.

    Every command runs under one lock and replaces whole aggregates, so an
    employee, its attendance log and its payroll record are always inserted
    and removed together.

    Missing targets are a no-op reported as ``False`` unless
    ``strict_not_found`` is set, in which case ``NotFoundError`` is raised.
    Leave decisions may overwrite an already decided request unless
    ``enforce_pending_only`` is set.
    """

    def __init__(
        self,
        repository: Optional[AggregateRepository] = None,
        *,
        enforce_pending_only: bool = False,
        strict_not_found: bool = False,
    ):
        self._repo = repository if repository is not None else InMemoryAggregateRepository()
        self._lock = threading.RLock()
        self._enforce_pending_only = bool(enforce_pending_only)
        self._strict_not_found = bool(strict_not_found)

    # Commands

    def add_employee(self, data: Union[NewEmployee, Mapping[str, Any]]) -> Employee:
        fields = validate_new_employee(data)

        with self._lock:
            employee_id = self._repo.max_id() + 1
            employee = Employee(employee_id=employee_id, **fields)
            self._repo.save(
                EmployeeAggregate(
                    employee=employee,
                    attendance_log=AttendanceLog(employee_id=employee_id),
                    payroll=PayrollRecord(
                        employee_id=employee_id,
                        hours_worked=0,
                        leave_deductions=0,
                        final_salary=employee.salary,
                    ),
                )
            )

        logger.info("Added employee %s (%s, %s)", employee_id, employee.name, employee.department.value)
        return employee

    def update_employee(self, employee_id: int, patch: Mapping[str, Any]) -> bool:
        changes = validate_patch(patch)

        with self._lock:
            agg = self._repo.get(employee_id)
            if not agg:
                return self._missing(f"Employee {employee_id} does not exist")
            if not changes:
                logger.debug("Empty patch for employee %s", employee_id)
                return True
            self._repo.save(dataclasses.replace(agg, employee=dataclasses.replace(agg.employee, **changes)))

        logger.info("Updated employee %s fields=%s", employee_id, sorted(changes))
        return True

    def delete_employee(self, employee_id: int) -> bool:
        with self._lock:
            if not self._repo.delete(employee_id):
                return self._missing(f"Employee {employee_id} does not exist")

        logger.info("Deleted employee %s with attendance and payroll", employee_id)
        return True

    def decide_leave_request(
        self,
        employee_id: int,
        leave_date: Union[date, str],
        decision: Union[LeaveStatus, str],
    ) -> bool:
        day = coerce_date(leave_date, "date")
        status = require_enum(decision, LeaveStatus, "decision")
        if status == LeaveStatus.PENDING:
            raise ValidationError("decision must be Approved or Denied")

        with self._lock:
            agg = self._repo.get(employee_id)
            log = agg.attendance_log if agg else None
            matches = [r for r in log.leave_requests if r.date == day] if log else []
            if not matches:
                return self._missing(f"No leave request for employee {employee_id} on {day.isoformat()}")

            if self._enforce_pending_only and any(r.status != LeaveStatus.PENDING for r in matches):
                raise InvalidStateError(f"Leave request on {day.isoformat()} has already been decided")

            requests = tuple(
                dataclasses.replace(r, status=status) if r.date == day else r for r in log.leave_requests
            )
            self._repo.save(dataclasses.replace(agg, attendance_log=dataclasses.replace(log, leave_requests=requests)))

        logger.info("Leave request of employee %s on %s -> %s", employee_id, day.isoformat(), status.value)
        return True

    # Point lookups

    def get_aggregate(self, employee_id: int) -> Optional[EmployeeAggregate]:
        with self._lock:
            return self._repo.get(employee_id)

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        agg = self.get_aggregate(employee_id)
        return agg.employee if agg else None

    def get_attendance(self, employee_id: int) -> Optional[AttendanceLog]:
        agg = self.get_aggregate(employee_id)
        return agg.attendance_log if agg else None

    def get_payroll(self, employee_id: int) -> Optional[PayrollRecord]:
        agg = self.get_aggregate(employee_id)
        return agg.payroll if agg else None

    # Snapshots for the derivation layer

    def snapshot(self) -> Sequence[EmployeeAggregate]:
        with self._lock:
            return tuple(self._repo.list_all())

    def employees(self) -> list[Employee]:
        return [a.employee for a in self.snapshot()]

    def attendance_logs(self) -> list[AttendanceLog]:
        return [a.attendance_log for a in self.snapshot()]

    def payroll_records(self) -> list[PayrollRecord]:
        return [a.payroll for a in self.snapshot()]

    def __len__(self) -> int:
        return len(self.snapshot())

    def __contains__(self, employee_id: object) -> bool:
        return isinstance(employee_id, int) and self.get_aggregate(employee_id) is not None

    # Helpers

    def _missing(self, message: str) -> bool:
        if self._strict_not_found:
            raise NotFoundError(message)
        logger.debug("No-op: %s", message)
        return False

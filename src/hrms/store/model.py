from __future__ import annotations

from dataclasses import dataclass

from ..attendance.model import AttendanceLog
from ..employees.model import Employee
from ..payroll.model import PayrollRecord


@dataclass(frozen=True)
class EmployeeAggregate:
    """Employee plus its attendance log and payroll record.

    The three are stored, replaced and removed as one value so they can never
    drift apart.
    """

    employee: Employee
    attendance_log: AttendanceLog
    payroll: PayrollRecord

    @property
    def employee_id(self) -> int:
        return self.employee.employee_id

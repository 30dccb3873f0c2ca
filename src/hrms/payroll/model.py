from __future__ import annotations

from dataclasses import dataclass

from ..common.money import Money


@dataclass(frozen=True)
class PayrollRecord:
    """Domain entity: compensation for the current pay period."""

    employee_id: int
    hours_worked: Money = 0
    leave_deductions: Money = 0
    final_salary: Money = 0

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "hours_worked": self.hours_worked,
            "leave_deductions": self.leave_deductions,
            "final_salary": self.final_salary,
        }

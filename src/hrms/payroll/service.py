from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..common.money import Money, round_half_up
from ..core.constants import (
    DEFAULT_PAY_PERIOD,
    EFFICIENCY_GOOD_THRESHOLD,
    EFFICIENCY_WARNING_THRESHOLD,
    STANDARD_MONTHLY_HOURS,
)
from ..core.enums import EfficiencyBand
from ..employees.model import Employee
from ..store.model import EmployeeAggregate
from .calculator.base import PayslipCalculator
from .calculator.standard_calculator import StandardPayslipCalculator
from .model import PayrollRecord


def efficiency_ratio(hours_worked: Money) -> int:
    """Hours worked as a whole percentage of the standard 176-hour month."""
    return round_half_up(hours_worked / STANDARD_MONTHLY_HOURS * 100)


def efficiency_band(ratio: int) -> EfficiencyBand:
    if ratio >= EFFICIENCY_GOOD_THRESHOLD:
        return EfficiencyBand.GOOD
    if ratio >= EFFICIENCY_WARNING_THRESHOLD:
        return EfficiencyBand.WARNING
    return EfficiencyBand.CRITICAL


@dataclass(frozen=True)
class Payslip:
    """Read view of one employee's pay for the period.

    ``other_deductions`` is left unclamped and may be negative when the final
    salary is higher than gross minus tax and UIF; ``other_deductions_display``
    is the value shown to users.
    """

    employee_id: int
    name: str
    department: str
    position: str
    pay_period: str
    hours_worked: Money
    leave_deduction_hours: Money
    gross_salary: Money
    tax_estimate: int
    uif: int
    total_deductions: Money
    other_deductions: Money
    net_salary: Money

    @property
    def employee_code(self) -> str:
        return f"#{self.employee_id:04d}"

    @property
    def other_deductions_display(self) -> Money:
        return max(0, self.other_deductions)

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "employee_code": self.employee_code,
            "name": self.name,
            "department": self.department,
            "position": self.position,
            "pay_period": self.pay_period,
            "hours_worked": self.hours_worked,
            "leave_deduction_hours": self.leave_deduction_hours,
            "gross_salary": self.gross_salary,
            "tax_estimate": self.tax_estimate,
            "uif": self.uif,
            "total_deductions": self.total_deductions,
            "other_deductions": self.other_deductions,
            "other_deductions_display": self.other_deductions_display,
            "net_salary": self.net_salary,
        }


@dataclass(frozen=True)
class PayrollTotals:
    total_payroll: Money
    total_hours: Money
    total_leave_deductions: Money
    headcount: int
    average_salary: Optional[float]

    def to_dict(self) -> dict:
        return {
            "total_payroll": self.total_payroll,
            "total_hours": self.total_hours,
            "total_leave_deductions": self.total_leave_deductions,
            "headcount": self.headcount,
            "average_salary": self.average_salary,
        }


def payroll_totals(records: Sequence[PayrollRecord]) -> PayrollTotals:
    """Sums over the payroll collection; average_salary is None when it is empty."""
    total = sum(r.final_salary for r in records)
    return PayrollTotals(
        total_payroll=total,
        total_hours=sum(r.hours_worked for r in records),
        total_leave_deductions=sum(r.leave_deductions for r in records),
        headcount=len(records),
        average_salary=(total / len(records)) if records else None,
    )


class PayrollReportService:
    def __init__(
        self,
        *,
        calculator: Optional[PayslipCalculator] = None,
        pay_period: str = DEFAULT_PAY_PERIOD,
    ):
        self._calculator = calculator or StandardPayslipCalculator()
        self._pay_period = pay_period

    def build_payslip(self, employee: Employee, payroll: PayrollRecord) -> Payslip:
        gross = employee.salary
        tax = self._calculator.tax_estimate(gross)
        uif = self._calculator.uif_contribution(gross)
        total_deductions = gross - payroll.final_salary

        return Payslip(
            employee_id=employee.employee_id,
            name=employee.name,
            department=employee.department.value,
            position=employee.position,
            pay_period=self._pay_period,
            hours_worked=payroll.hours_worked,
            leave_deduction_hours=payroll.leave_deductions,
            gross_salary=gross,
            tax_estimate=tax,
            uif=uif,
            total_deductions=total_deductions,
            other_deductions=total_deductions - tax - uif,
            net_salary=payroll.final_salary,
        )

    def build_rows(self, aggregates: Iterable[EmployeeAggregate], *, query: str = "") -> list[dict]:
        q = query.strip().lower()
        rows: list[dict] = []

        for agg in aggregates:
            emp, pay = agg.employee, agg.payroll
            if q and q not in emp.name.lower():
                continue

            ratio = efficiency_ratio(pay.hours_worked)
            rows.append(
                {
                    "employee_id": emp.employee_id,
                    "name": emp.name,
                    "position": emp.position,
                    "department": emp.department.value,
                    "salary": emp.salary,
                    "hours_worked": pay.hours_worked,
                    "leave_deductions": pay.leave_deductions,
                    "final_salary": pay.final_salary,
                    "efficiency": ratio,
                    "efficiency_band": efficiency_band(ratio).value,
                }
            )

        return rows

    def totals(self, records: Sequence[PayrollRecord]) -> PayrollTotals:
        return payroll_totals(records)

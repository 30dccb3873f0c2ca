from __future__ import annotations

import pytest

from hrms.core.enums import Department, EfficiencyBand
from hrms.employees.model import Employee
from hrms.payroll.calculator.base import PayslipCalculator
from hrms.payroll.model import PayrollRecord
from hrms.payroll.service import PayrollReportService, efficiency_band, efficiency_ratio, payroll_totals


def _employee(salary=10000):
    return Employee(
        employee_id=1,
        name="Sibongile Nkosi",
        position="Software Engineer",
        department=Department.DEVELOPMENT,
        salary=salary,
        contact="sibongile@moderntech.com",
    )


def test_payslip_breakdown_keeps_negative_other_deductions():
    payroll = PayrollRecord(employee_id=1, hours_worked=160, leave_deductions=8, final_salary=9500)

    slip = PayrollReportService().build_payslip(_employee(), payroll)

    assert slip.gross_salary == 10000
    assert slip.tax_estimate == 1800
    assert slip.uif == 100
    assert slip.total_deductions == 500
    assert slip.other_deductions == -1400
    assert slip.other_deductions_display == 0
    assert slip.net_salary == 9500


def test_payslip_does_not_change_payroll(single_store):
    agg = single_store.get_aggregate(1)

    PayrollReportService().build_payslip(agg.employee, agg.payroll)

    assert single_store.get_payroll(1).final_salary == 9500


def test_payslip_header_fields():
    svc = PayrollReportService(pay_period="July 2025")
    slip = svc.build_payslip(_employee(), PayrollRecord(employee_id=1, final_salary=7000))

    assert slip.employee_code == "#0001"
    assert slip.pay_period == "July 2025"
    assert slip.other_deductions == 3000 - 1800 - 100
    assert slip.to_dict()["department"] == "Development"


class FlatCalculator(PayslipCalculator):
    def tax_estimate(self, gross):
        return 1000

    def uif_contribution(self, gross):
        return 0


def test_payslip_uses_injected_calculator():
    slip = PayrollReportService(calculator=FlatCalculator()).build_payslip(
        _employee(), PayrollRecord(employee_id=1, final_salary=9000)
    )

    assert (slip.tax_estimate, slip.uif, slip.other_deductions) == (1000, 0, 0)


@pytest.mark.parametrize(
    "hours, ratio, band",
    [
        (176, 100, EfficiencyBand.GOOD),
        (160, 91, EfficiencyBand.GOOD),
        (150, 85, EfficiencyBand.WARNING),
        (132, 75, EfficiencyBand.WARNING),
        (100, 57, EfficiencyBand.CRITICAL),
        (0, 0, EfficiencyBand.CRITICAL),
    ],
)
def test_efficiency_ratio_and_band(hours, ratio, band):
    assert efficiency_ratio(hours) == ratio
    assert efficiency_band(ratio) == band


def test_totals_over_records():
    totals = payroll_totals(
        [
            PayrollRecord(employee_id=1, hours_worked=160, leave_deductions=8, final_salary=9500),
            PayrollRecord(employee_id=2, hours_worked=150, leave_deductions=2, final_salary=10500),
        ]
    )

    assert totals.total_payroll == 20000
    assert totals.total_hours == 310
    assert totals.total_leave_deductions == 10
    assert totals.headcount == 2
    assert totals.average_salary == 10000


def test_average_salary_of_empty_payroll_is_none():
    totals = payroll_totals([])

    assert totals.average_salary is None
    assert totals.total_payroll == 0


def test_build_rows_filters_by_name(demo_store):
    rows = PayrollReportService().build_rows(demo_store.snapshot(), query="naledi")

    assert len(rows) == 1
    assert rows[0]["employee_id"] == 7
    assert rows[0]["efficiency"] == 99
    assert rows[0]["efficiency_band"] == "good"

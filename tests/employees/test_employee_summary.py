from __future__ import annotations

from hrms.core.enums import Department
from hrms.employees.model import Employee
from hrms.employees.summary import department_headcount, search_employees


def _emp(employee_id, department, name="X", position="Dev", contact="x@moderntech.com"):
    return Employee(
        employee_id=employee_id,
        name=name,
        position=position,
        department=department,
        salary=1000,
        contact=contact,
    )


def test_headcount_sums_to_employee_count(demo_store):
    employees = demo_store.employees()

    counts = department_headcount(employees)

    assert sum(counts.values()) == len(employees)
    assert counts[Department.MARKETING] == 2


def test_headcount_omits_empty_departments():
    counts = department_headcount([_emp(1, Department.QA), _emp(2, Department.QA), _emp(3, Department.HR)])

    assert counts == {Department.QA: 2, Department.HR: 1}
    assert Department.SALES not in counts


def test_headcount_follows_current_store(demo_store):
    demo_store.delete_employee(4)

    assert Department.SALES not in department_headcount(demo_store.employees())


def test_search_matches_name_position_or_contact():
    employees = [
        _emp(1, Department.QA, name="Thabo Molefe", position="Quality Analyst"),
        _emp(2, Department.IT, name="Naledi", position="DevOps", contact="naledi@ops.io"),
    ]

    assert [e.employee_id for e in search_employees(employees, query="thabo")] == [1]
    assert [e.employee_id for e in search_employees(employees, query="ANALYST")] == [1]
    assert [e.employee_id for e in search_employees(employees, query="ops.io")] == [2]
    assert [e.employee_id for e in search_employees(employees, department=Department.IT)] == [2]
    assert len(search_employees(employees)) == 2

from __future__ import annotations

from typing import Iterable, Optional

from ..core.enums import Department
from .model import Employee


def department_headcount(employees: Iterable[Employee]) -> dict[Department, int]:
    """Employees per department, in order of first appearance.

    Departments nobody currently belongs to are left out rather than reported as 0.
    """
    counts: dict[Department, int] = {}
    for emp in employees:
        counts[emp.department] = counts.get(emp.department, 0) + 1
    return counts


def search_employees(
    employees: Iterable[Employee],
    *,
    query: str = "",
    department: Optional[Department] = None,
) -> list[Employee]:
    q = query.strip().lower()
    return [
        emp
        for emp in employees
        if (not q or q in emp.name.lower() or q in emp.position.lower() or q in emp.contact.lower())
        and (department is None or emp.department == department)
    ]

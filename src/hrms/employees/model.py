from __future__ import annotations

from dataclasses import dataclass

from ..common.money import Money
from ..core.enums import Department


@dataclass(frozen=True)
class NewEmployee:
    """Employee data before the store assigns an id."""

    name: str
    position: str
    department: Department
    salary: Money
    contact: str
    employment_history: str = ""


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Pure data object; the record store is the only component that creates or
    replaces instances.
    """

    employee_id: int
    name: str
    position: str
    department: Department
    salary: Money
    contact: str
    employment_history: str = ""

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "name": self.name,
            "position": self.position,
            "department": self.department.value,
            "salary": self.salary,
            "contact": self.contact,
            "employment_history": self.employment_history,
        }


# Fields an update patch may touch. employee_id is deliberately absent.
PATCHABLE_FIELDS = frozenset({"name", "position", "department", "salary", "contact", "employment_history"})

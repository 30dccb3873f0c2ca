from __future__ import annotations

import pytest

from hrms.core.enums import Department
from hrms.employees.model import NewEmployee
from hrms.seed.loader import load_demo_store, load_store
from hrms.store.service import RecordStore


def make_new_employee(**overrides) -> NewEmployee:
    fields = {
        "name": "Ayanda Mthembu",
        "position": "Backend Developer",
        "department": Department.DEVELOPMENT,
        "salary": 5000,
        "contact": "ayanda@moderntech.com",
        "employment_history": "Joined in 2024",
    }
    fields.update(overrides)
    return NewEmployee(**fields)


@pytest.fixture
def new_employee():
    return make_new_employee


@pytest.fixture
def empty_store() -> RecordStore:
    return RecordStore()


@pytest.fixture
def demo_store() -> RecordStore:
    return load_demo_store()


@pytest.fixture
def single_store() -> RecordStore:
    """One employee with a single pending leave request on 2025-07-22."""
    return load_store(
        [
            {
                "employee_id": 1,
                "name": "Sibongile Nkosi",
                "position": "Software Engineer",
                "department": "Development",
                "salary": 10000,
                "contact": "sibongile@moderntech.com",
                "employment_history": "Joined in 2015",
            }
        ],
        [
            {
                "employee_id": 1,
                "attendance": [{"date": "2025-07-29", "status": "Present"}],
                "leave_requests": [{"date": "2025-07-22", "reason": "Sick Leave", "status": "Pending"}],
            }
        ],
        [{"employee_id": 1, "hours_worked": 160, "leave_deductions": 8, "final_salary": 9500}],
    )

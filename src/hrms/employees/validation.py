from __future__ import annotations

import dataclasses
from typing import Any, Mapping, Union

from ..common.validators import require_email, require_enum, require_non_empty, require_non_negative, require_text
from ..core.enums import Department
from ..core.exceptions import ValidationError
from .model import PATCHABLE_FIELDS, NewEmployee

REQUIRED_FIELDS = ("name", "position", "department", "salary", "contact")


def clean_field(name: str, value: Any) -> Any:
    if name in ("name", "position"):
        return require_non_empty(value, name)
    if name == "department":
        return require_enum(value, Department, "department")
    if name == "salary":
        return require_non_negative(value, "salary")
    if name == "contact":
        return require_email(value, "contact")
    if name == "employment_history":
        return require_text(value, "employment_history")
    raise ValidationError(f"Unknown employee field: {name}")


def _reject_unknown(fields) -> None:
    unknown = set(fields) - PATCHABLE_FIELDS
    if unknown:
        raise ValidationError(f"Unknown employee fields: {', '.join(sorted(unknown))}")


def validate_new_employee(data: Union[NewEmployee, Mapping[str, Any]]) -> dict:
    """Return cleaned constructor kwargs for Employee (without employee_id)."""
    if isinstance(data, NewEmployee):
        raw = dataclasses.asdict(data)
    elif isinstance(data, Mapping):
        raw = dict(data)
    else:
        raise ValidationError("Employee data must be a mapping")

    _reject_unknown(raw)
    missing = [f for f in REQUIRED_FIELDS if f not in raw]
    if missing:
        raise ValidationError(f"Missing employee fields: {', '.join(missing)}")

    return {name: clean_field(name, value) for name, value in raw.items()}


def validate_patch(patch: Mapping[str, Any]) -> dict:
    if not isinstance(patch, Mapping):
        raise ValidationError("Employee patch must be a mapping")
    if "employee_id" in patch:
        raise ValidationError("employee_id cannot be changed")

    _reject_unknown(patch)
    return {name: clean_field(name, value) for name, value in patch.items()}

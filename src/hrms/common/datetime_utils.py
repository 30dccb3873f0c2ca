from __future__ import annotations

from datetime import date, datetime
from typing import Union

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def coerce_date(value: Union[date, str], field_name: str = "date") -> date:
    """Accept a date or an ISO string, raise ValidationError on anything else."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return parse_iso_date(value.strip())
        except ValueError:
            raise ValidationError(f"{field_name} must be an ISO date (YYYY-MM-DD)")
    raise ValidationError(f"{field_name} must be an ISO date (YYYY-MM-DD)")

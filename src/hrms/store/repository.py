from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import EmployeeAggregate


class AggregateRepository(Protocol):
    """Repository interface for employee aggregates.

    Note (DIP): the record store depends on this interface, not on a concrete
    container.
    """

    def get(self, employee_id: int) -> Optional[EmployeeAggregate]:
        raise NotImplementedError

    def list_all(self) -> Sequence[EmployeeAggregate]:
        raise NotImplementedError

    def max_id(self) -> int:
        """Largest employee id held, 0 when empty."""

        raise NotImplementedError

    def save(self, aggregate: EmployeeAggregate) -> None:
        """Insert or replace the aggregate under its employee id."""

        raise NotImplementedError

    def delete(self, employee_id: int) -> bool:
        raise NotImplementedError

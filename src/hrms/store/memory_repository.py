from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .model import EmployeeAggregate
from .repository import AggregateRepository


class InMemoryAggregateRepository(AggregateRepository):
    """Dict-backed repository; iteration follows insertion order."""

    def __init__(self, aggregates: Iterable[EmployeeAggregate] = ()):
        self._by_id: dict[int, EmployeeAggregate] = {}
        for agg in aggregates:
            self.save(agg)

    def get(self, employee_id: int) -> Optional[EmployeeAggregate]:
        return self._by_id.get(employee_id)

    def list_all(self) -> Sequence[EmployeeAggregate]:
        return tuple(self._by_id.values())

    def max_id(self) -> int:
        return max(self._by_id, default=0)

    def save(self, aggregate: EmployeeAggregate) -> None:
        self._by_id[aggregate.employee_id] = aggregate

    def delete(self, employee_id: int) -> bool:
        return self._by_id.pop(employee_id, None) is not None

    def __len__(self) -> int:
        return len(self._by_id)

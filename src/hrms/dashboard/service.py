from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from ..attendance.summary import attendance_by_date, present_on, recent_leave_requests
from ..common.datetime_utils import coerce_date
from ..common.money import Money, round_half_up
from ..core.constants import DEFAULT_RECENT_LEAVE_LIMIT, DEFAULT_REFERENCE_DATE
from ..core.enums import LeaveStatus
from ..employees.summary import department_headcount
from ..payroll.service import payroll_totals
from ..store.service import RecordStore


@dataclass(frozen=True)
class DashboardStats:
    total_employees: int
    present_today: int
    attendance_rate: Optional[int]
    pending_leaves: int
    total_payroll: Money

    def to_dict(self) -> dict:
        return {
            "total_employees": self.total_employees,
            "present_today": self.present_today,
            "attendance_rate": self.attendance_rate,
            "pending_leaves": self.pending_leaves,
            "total_payroll": self.total_payroll,
        }


class DashboardService:
    """Use case: dashboard stat cards, charts and recent leave feed."""

    def __init__(
        self,
        store: RecordStore,
        *,
        reference_date: Union[date, str] = DEFAULT_REFERENCE_DATE,
        recent_limit: int = DEFAULT_RECENT_LEAVE_LIMIT,
    ):
        self._store = store
        self._today = coerce_date(reference_date, "reference_date")
        self._recent_limit = int(recent_limit)

    @property
    def reference_date(self) -> date:
        return self._today

    def stats(self) -> DashboardStats:
        return self._stats_for(self._store.snapshot())

    def _stats_for(self, snapshot) -> DashboardStats:
        logs = [a.attendance_log for a in snapshot]
        total = len(snapshot)
        present = present_on(logs, self._today)

        return DashboardStats(
            total_employees=total,
            present_today=present,
            attendance_rate=round_half_up(present / total * 100) if total else None,
            pending_leaves=sum(
                1 for log in logs for req in log.leave_requests if req.status == LeaveStatus.PENDING
            ),
            total_payroll=payroll_totals([a.payroll for a in snapshot]).total_payroll,
        )

    def overview(self) -> dict:
        snapshot = self._store.snapshot()
        headcount = department_headcount(a.employee for a in snapshot)

        return {
            "reference_date": self._today.isoformat(),
            "stats": self._stats_for(snapshot).to_dict(),
            "attendance_by_date": [d.to_dict() for d in attendance_by_date(a.attendance_log for a in snapshot)],
            "departments": [{"department": d.value, "count": n} for d, n in headcount.items()],
            "recent_leave_requests": [
                i.to_dict() for i in recent_leave_requests(snapshot, limit=self._recent_limit)
            ],
        }

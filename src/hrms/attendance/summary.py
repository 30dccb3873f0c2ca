"""Read-only attendance derivations used by the dashboard and attendance pages.

All functions take snapshots (sequences of frozen records) and never mutate them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional, Sequence

from ..core.constants import DEFAULT_RECENT_LEAVE_LIMIT
from ..core.enums import AttendanceStatus, LeaveStatus
from ..store.model import EmployeeAggregate
from .model import AttendanceLog


@dataclass(frozen=True)
class DailyAttendance:
    date: date
    present: int
    absent: int

    def to_dict(self) -> dict:
        return {"date": self.date.isoformat(), "present": self.present, "absent": self.absent}


@dataclass(frozen=True)
class LeaveFeedItem:
    employee_id: int
    name: str
    date: date
    reason: str
    status: LeaveStatus

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "name": self.name,
            "date": self.date.isoformat(),
            "reason": self.reason,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class AttendanceRow:
    employee_id: int
    name: str
    date: date
    status: AttendanceStatus

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "name": self.name,
            "date": self.date.isoformat(),
            "status": self.status.value,
        }


@dataclass(frozen=True)
class AttendanceTotals:
    present: int
    absent: int
    pending_leaves: int

    def to_dict(self) -> dict:
        return {"present": self.present, "absent": self.absent, "pending_leaves": self.pending_leaves}


def attendance_by_date(logs: Iterable[AttendanceLog]) -> list[DailyAttendance]:
    """Present/absent counts per calendar day across all employees, oldest first.

    Days without any record are omitted.
    """
    counts: dict[date, list[int]] = {}
    for log in logs:
        for record in log.attendance:
            bucket = counts.setdefault(record.date, [0, 0])
            if record.status == AttendanceStatus.PRESENT:
                bucket[0] += 1
            else:
                bucket[1] += 1

    return [DailyAttendance(date=d, present=p, absent=a) for d, (p, a) in sorted(counts.items())]


def recent_leave_requests(
    aggregates: Iterable[EmployeeAggregate],
    *,
    limit: int = DEFAULT_RECENT_LEAVE_LIMIT,
) -> list[LeaveFeedItem]:
    """Newest leave requests first; equal dates keep store order (sort is stable)."""
    items = [
        LeaveFeedItem(
            employee_id=agg.employee_id,
            name=agg.employee.name,
            date=req.date,
            reason=req.reason,
            status=req.status,
        )
        for agg in aggregates
        for req in agg.attendance_log.leave_requests
    ]
    items.sort(key=lambda i: i.date, reverse=True)
    return items[: max(int(limit), 0)]


def _name_matches(name: str, query: str) -> bool:
    return query.strip().lower() in name.lower()


def attendance_rows(
    aggregates: Iterable[EmployeeAggregate],
    *,
    query: str = "",
    status: Optional[AttendanceStatus] = None,
) -> list[AttendanceRow]:
    return [
        AttendanceRow(employee_id=agg.employee_id, name=agg.employee.name, date=r.date, status=r.status)
        for agg in aggregates
        if _name_matches(agg.employee.name, query)
        for r in agg.attendance_log.attendance
        if status is None or r.status == status
    ]


def leave_rows(
    aggregates: Iterable[EmployeeAggregate],
    *,
    query: str = "",
    status: Optional[LeaveStatus] = None,
) -> list[LeaveFeedItem]:
    return [
        LeaveFeedItem(
            employee_id=agg.employee_id,
            name=agg.employee.name,
            date=r.date,
            reason=r.reason,
            status=r.status,
        )
        for agg in aggregates
        if _name_matches(agg.employee.name, query)
        for r in agg.attendance_log.leave_requests
        if status is None or r.status == status
    ]


def attendance_totals(logs: Sequence[AttendanceLog]) -> AttendanceTotals:
    records = [r for log in logs for r in log.attendance]
    return AttendanceTotals(
        present=sum(1 for r in records if r.status == AttendanceStatus.PRESENT),
        absent=sum(1 for r in records if r.status == AttendanceStatus.ABSENT),
        pending_leaves=sum(1 for log in logs for req in log.leave_requests if req.status == LeaveStatus.PENDING),
    )


def present_on(logs: Iterable[AttendanceLog], day: date) -> int:
    """Employees whose first record for ``day`` is Present."""
    count = 0
    for log in logs:
        record = next((r for r in log.attendance if r.date == day), None)
        if record and record.status == AttendanceStatus.PRESENT:
            count += 1
    return count

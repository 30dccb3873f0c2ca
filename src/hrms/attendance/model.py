from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..core.enums import AttendanceStatus, LeaveStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one day of presence for an employee."""

    date: date
    status: AttendanceStatus

    def to_dict(self) -> dict:
        return {"date": self.date.isoformat(), "status": self.status.value}


@dataclass(frozen=True)
class LeaveRequest:
    date: date
    reason: str
    status: LeaveStatus = LeaveStatus.PENDING

    def to_dict(self) -> dict:
        return {"date": self.date.isoformat(), "reason": self.reason, "status": self.status.value}


@dataclass(frozen=True)
class AttendanceLog:
    """Per-employee attendance records and leave requests, in recorded order."""

    employee_id: int
    attendance: tuple[AttendanceRecord, ...] = field(default_factory=tuple)
    leave_requests: tuple[LeaveRequest, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "attendance": [r.to_dict() for r in self.attendance],
            "leave_requests": [r.to_dict() for r in self.leave_requests],
        }

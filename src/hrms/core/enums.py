from __future__ import annotations

from enum import Enum


class Department(str, Enum):
    """Fixed department enumeration offered by the employee form."""

    DEVELOPMENT = "Development"
    HR = "HR"
    QA = "QA"
    SALES = "Sales"
    MARKETING = "Marketing"
    DESIGN = "Design"
    IT = "IT"
    FINANCE = "Finance"
    SUPPORT = "Support"


class AttendanceStatus(str, Enum):
    PRESENT = "Present"
    ABSENT = "Absent"


class LeaveStatus(str, Enum):
    """Leave request workflow: Pending -> Approved | Denied."""

    PENDING = "Pending"
    APPROVED = "Approved"
    DENIED = "Denied"


class EfficiencyBand(str, Enum):
    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"

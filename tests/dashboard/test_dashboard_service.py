from __future__ import annotations

from datetime import date

from hrms.dashboard.service import DashboardService
from hrms.store.service import RecordStore


def test_stats_for_demo_data(demo_store):
    stats = DashboardService(demo_store, reference_date="2025-07-29").stats()

    assert stats.total_employees == 10
    assert stats.present_today == 9
    assert stats.attendance_rate == 90
    assert stats.pending_leaves == 5
    assert stats.total_payroll == 632700


def test_stats_follow_leave_decisions(demo_store):
    svc = DashboardService(demo_store)

    demo_store.decide_leave_request(7, "2025-07-22", "Approved")

    assert svc.stats().pending_leaves == 4


def test_empty_store_has_no_attendance_rate():
    stats = DashboardService(RecordStore()).stats()

    assert stats.total_employees == 0
    assert stats.attendance_rate is None
    assert stats.total_payroll == 0


def test_overview_sections(demo_store):
    svc = DashboardService(demo_store, reference_date=date(2025, 7, 28), recent_limit=3)

    overview = svc.overview()

    assert overview["reference_date"] == "2025-07-28"
    assert overview["stats"]["present_today"] == 7
    assert [d["date"] for d in overview["attendance_by_date"]] == [
        "2025-07-25",
        "2025-07-26",
        "2025-07-27",
        "2025-07-28",
        "2025-07-29",
    ]
    assert sum(d["count"] for d in overview["departments"]) == 10
    assert len(overview["recent_leave_requests"]) == 3

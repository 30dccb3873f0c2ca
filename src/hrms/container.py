from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_PAY_PERIOD, DEFAULT_REFERENCE_DATE
from .dashboard.service import DashboardService
from .payroll.service import PayrollReportService
from .seed.loader import load_demo_store
from .store.service import RecordStore
from .users.memory_user_repository import InMemoryUserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    store: RecordStore
    users_repo: InMemoryUserRepository

    auth_service: AuthService
    payroll_report_service: PayrollReportService
    dashboard_service: DashboardService


def build_container(
    *,
    seed_demo_data: bool = True,
    enforce_pending_only: bool = False,
    strict_not_found: bool = False,
    reference_date: str = DEFAULT_REFERENCE_DATE,
    pay_period: str = DEFAULT_PAY_PERIOD,
) -> Container:
    if seed_demo_data:
        store = load_demo_store(enforce_pending_only=enforce_pending_only, strict_not_found=strict_not_found)
    else:
        store = RecordStore(enforce_pending_only=enforce_pending_only, strict_not_found=strict_not_found)

    users_repo = InMemoryUserRepository.with_demo_users()

    return Container(
        store=store,
        users_repo=users_repo,
        auth_service=AuthService(users_repo),
        payroll_report_service=PayrollReportService(pay_period=pay_period),
        dashboard_service=DashboardService(store, reference_date=reference_date),
    )

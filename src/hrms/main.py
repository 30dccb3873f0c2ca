from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .common.web import register_error_handlers
from .container import build_container
from .core.constants import DEFAULT_PAY_PERIOD, DEFAULT_REFERENCE_DATE
from .dashboard.controller import register as register_dashboard
from .employees.controller import register as register_employees
from .payroll.controller import register as register_payroll
from .settings import get_settings_module
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    container = build_container(
        seed_demo_data=bool(getattr(settings, "SEED_DEMO_DATA", True)),
        enforce_pending_only=bool(getattr(settings, "ENFORCE_PENDING_ONLY_DECISIONS", False)),
        strict_not_found=bool(getattr(settings, "STRICT_NOT_FOUND", False)),
        reference_date=getattr(settings, "REFERENCE_DATE", DEFAULT_REFERENCE_DATE),
        pay_period=getattr(settings, "PAY_PERIOD", DEFAULT_PAY_PERIOD),
    )
    app.extensions["hrms"] = container
    logger.info("settings=%s employees=%d", settings_module, len(container.store))

    register_error_handlers(app)
    register_users(app, container)
    register_employees(app, container)
    register_attendance(app, container)
    register_payroll(app, container)
    register_dashboard(app, container)

    return app

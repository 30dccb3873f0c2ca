import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Load the demo employees/attendance/payroll on startup
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

# Reject approve/deny on a request that is no longer Pending
ENFORCE_PENDING_ONLY_DECISIONS = bool(int(os.getenv("ENFORCE_PENDING_ONLY_DECISIONS", "0")))
# Raise NotFoundError instead of a silent no-op for unknown employee ids
STRICT_NOT_FOUND = bool(int(os.getenv("STRICT_NOT_FOUND", "0")))

# "Today" for the dashboard attendance card, and the payslip period label
REFERENCE_DATE = os.getenv("REFERENCE_DATE", "2025-07-29")
PAY_PERIOD = os.getenv("PAY_PERIOD", "December 2025")

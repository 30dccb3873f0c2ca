SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SEED_DEMO_DATA = True

ENFORCE_PENDING_ONLY_DECISIONS = False
STRICT_NOT_FOUND = False

REFERENCE_DATE = "2025-07-29"
PAY_PERIOD = "December 2025"

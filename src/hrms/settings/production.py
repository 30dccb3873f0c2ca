import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

ENFORCE_PENDING_ONLY_DECISIONS = bool(int(os.getenv("ENFORCE_PENDING_ONLY_DECISIONS", "0")))
STRICT_NOT_FOUND = bool(int(os.getenv("STRICT_NOT_FOUND", "0")))

REFERENCE_DATE = os.getenv("REFERENCE_DATE", "2025-07-29")
PAY_PERIOD = os.getenv("PAY_PERIOD", "December 2025")

"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STANDARD_MONTHLY_HOURS = 176

TAX_ESTIMATE_RATE = 0.18
UIF_RATE = 0.01

EFFICIENCY_GOOD_THRESHOLD = 90
EFFICIENCY_WARNING_THRESHOLD = 75

DEFAULT_RECENT_LEAVE_LIMIT = 5
DEFAULT_REFERENCE_DATE = "2025-07-29"
DEFAULT_PAY_PERIOD = "December 2025"

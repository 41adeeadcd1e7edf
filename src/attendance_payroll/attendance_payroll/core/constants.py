"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DAYS_IN_PAY_CYCLE = 30
OVERTIME_RATE_MULTIPLIER = 2

# (minimum delay minutes, fixed amount), highest threshold first
FIXED_DELAY_TIERS = (
    (45, 50),
    (30, 25),
    (15, 15),
)
QUARTER_DAY_FROM_MINUTES = 60
HALF_DAY_FROM_MINUTES = 90

DEFAULT_WORKING_DAYS_PER_MONTH = DAYS_IN_PAY_CYCLE
DEFAULT_HISTORY_LIMIT = 62

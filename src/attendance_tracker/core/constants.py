"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

FULL_DAY_MINUTES = 8 * 60
DEFAULT_HISTORY_LIMIT = 30
MIN_PASSWORD_LENGTH = 6

TIME_PLACEHOLDER = "--:--"
DATE_KEY_FORMAT = "%Y-%m-%d"
MONTH_KEY_FORMAT = "%Y-%m"

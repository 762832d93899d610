"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ALL_DEPARTMENTS = "all"
ALL_YEARS = "all"

WINDOW_CHOICES = (7, 30, 90)
DEFAULT_WINDOW_DAYS = 30

DAILY_SERIES_LIMIT = 14
WEEKLY_OVERVIEW_DAYS = 7

DEFAULT_DATA_DAYS = 30

EXCELLENT_RATE = 85
GOOD_RATE = 75
AVERAGE_RATE = 65

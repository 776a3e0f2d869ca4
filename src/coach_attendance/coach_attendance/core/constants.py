"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TEAM_NAME = "Team"
DEFAULT_REPORT_DAYS = 30
DAYS_PER_WEEK = 7

REPORT_CSV_COLUMNS = (
    "date",
    "team",
    "session_id",
    "student_id",
    "last_name",
    "first_name",
    "assisted",
)

"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Per-student attendance below this percentage is flagged in the class grid.
STUDENT_ATTENDANCE_OK = 80

# Weekly report badges.
WEEKLY_RATE_GOOD = 75
WEEKLY_RATE_WARNING = 50

WEEKS_PER_MONTH = 5

UNDEFINED_DATE_LABEL = "Data não definida"

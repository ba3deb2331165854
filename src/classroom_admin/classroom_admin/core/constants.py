"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Index 1..7 = Sunday..Saturday; index 0 is unused.
DAY_NAMES = ("", "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

# Order offered by the class form day picker.
WEEK_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

DEFAULT_GROUP = "Group 1"
DEFAULT_DAY = "Monday"
DEFAULT_MAX_STUDENTS = 20
MIN_MAX_STUDENTS = 1
MAX_MAX_STUDENTS = 50

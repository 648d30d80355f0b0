"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

import re

DEFAULT_TIMEZONE = "Asia/Seoul"

# Todos freeze for non-admins at this local hour on the day after the last touch.
DEFAULT_EDIT_LOCK_HOUR = 9

CALENDAR_MIN_YEAR = 1970
CALENDAR_MAX_YEAR = 2100
DAYS_PER_WEEK = 7
CALENDAR_WEEKS = 6

PUNCH_NOTE_MAX_LENGTH = 200

# Four upper-case letters or digits, e.g. "PJ01".
PROJECT_CODE_PATTERN = re.compile(r"[A-Z0-9]{4}")

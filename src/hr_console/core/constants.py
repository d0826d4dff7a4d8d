"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TARGET_DAYS = 180
DEFAULT_API_TIMEOUT_SECONDS = 15.0
COMPLETION_GOOD_THRESHOLD = 80
COMPLETION_FAIR_THRESHOLD = 50
EMPTY_VALUE_MARKER = "Empty"

"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ISO_DATE_FORMAT = "%Y-%m-%d"
CSV_HEADERS = ("Date", "Class", "Student", "Status")
DEFAULT_RECORDS_DAYS = 30
DEFAULT_MAX_BOARDS = 512
MIN_PASSWORD_LENGTH = 6

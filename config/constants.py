"""
Constants for the fiscal dates helpers.
Format patterns, label prefixes and default values shared across modules.
"""

from enum import Enum
from typing import List, Optional


class DateFormat:
    """strftime patterns for the date representations used by the front-end"""

    MM_DD_YYYY = "%m/%d/%Y"         # 01/31/2024
    YYYY_MM_DD = "%Y-%m-%d"         # 2024-01-31
    YYYY_MMM = "%Y-%b"              # 2024-Jan
    MMM = "%b"                      # Jan
    MMM_DD = "%b %d"                # Jan 31
    MONTH_NAME = "%B"               # January


class ComparisonResult(str, Enum):
    """Outcome of comparing two date strings"""
    TRUE = "true"
    FALSE = "false"
    NOT_COMPARABLE = "not_comparable"   # At least one operand is not a date

    @classmethod
    def from_bool(cls, value: bool) -> "ComparisonResult":
        return cls.TRUE if value else cls.FALSE

    def as_bool(self) -> Optional[bool]:
        """Map to True/False, or None when the operands were not comparable."""
        if self is ComparisonResult.NOT_COMPARABLE:
            return None
        return self is ComparisonResult.TRUE


# Prioritized parse list - first pattern that matches wins
PARSE_FORMATS: List[str] = [
    DateFormat.MM_DD_YYYY,
    DateFormat.YYYY_MM_DD,
    DateFormat.YYYY_MMM,
]

# Patterns accepted by is_date, tried in this order
DATE_CHECK_FORMATS: List[str] = [
    DateFormat.MM_DD_YYYY,
    DateFormat.YYYY_MM_DD,
    DateFormat.YYYY_MMM,
]

PARSE_FORMATS_SEPARATOR = "|"

# Label constants
DEFAULT_FISCAL_YEAR_PREFIX = "FY"
DEFAULT_CALENDAR_YEAR_PREFIX = "CY"
YEAR_LABEL_PATTERN = r"(\w|\s)*(\d\d)"
LABEL_CENTURY = 2000
DATE_RANGE_LABEL_SEPARATOR = " - "

# Range defaults
DEFAULT_FISCAL_YEAR_START_MONTH = 7     # July
DEFAULT_ADDITIVE_YEARS = 2
DEFAULT_YEAR_FROM = 2004
DEFAULT_DAYS_TO_SUBTRACT = 60

# Text emitted when formatting a value that is not a date
INVALID_DATE = "Invalid date"

# Logging constants
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

"""
Date helper modules.

Parsing, field extraction, comparison, formatting and range utilities for
calendar and fiscal dates, plus the shared error handling and logging setup.
"""

from .clock import resolve_now, system_now
from .date_parsing import parse_date, require_date, parse_iso_date, is_valid_date, is_date
from .date_fields import (
    get_year,
    get_month,
    get_month_name,
    get_day_of_month,
    get_month_by_short_name,
    get_short_month_name,
    get_all_months,
    get_month_number,
    get_end_of_month,
)
from .date_comparison import is_after, is_same_or_after, is_same_or_before, is_before
from .date_formatting import (
    format_date,
    to_iso_format,
    to_month_day_year_format,
    to_month_day_format,
    get_current_date,
)
from .date_ranges import (
    generate_available_years,
    fiscal_year_to_date_range,
    calendar_year_to_date_range,
    iter_date_range_dates,
    get_date_range_dates,
    get_date_range_years,
    get_date_range_subtract_from_now,
    get_diff_days_between_two_date,
)
from .year_labels import (
    is_fiscal_year,
    is_calendar_year,
    parse_year_from_label,
    build_fiscal_year_label,
    build_calendar_year_label,
)
from .error_handlers import DateUtilsError, DateParsingError, ConfigurationError
from .logging_config import setup_logging, TimedOperation

__all__ = [
    # Clock
    "resolve_now",
    "system_now",
    # Parsing
    "parse_date",
    "require_date",
    "parse_iso_date",
    "is_valid_date",
    "is_date",
    # Fields
    "get_year",
    "get_month",
    "get_month_name",
    "get_day_of_month",
    "get_month_by_short_name",
    "get_short_month_name",
    "get_all_months",
    "get_month_number",
    "get_end_of_month",
    # Comparison
    "is_after",
    "is_same_or_after",
    "is_same_or_before",
    "is_before",
    # Formatting
    "format_date",
    "to_iso_format",
    "to_month_day_year_format",
    "to_month_day_format",
    "get_current_date",
    # Ranges
    "generate_available_years",
    "fiscal_year_to_date_range",
    "calendar_year_to_date_range",
    "iter_date_range_dates",
    "get_date_range_dates",
    "get_date_range_years",
    "get_date_range_subtract_from_now",
    "get_diff_days_between_two_date",
    # Labels
    "is_fiscal_year",
    "is_calendar_year",
    "parse_year_from_label",
    "build_fiscal_year_label",
    "build_calendar_year_label",
    # Error handling
    "DateUtilsError",
    "DateParsingError",
    "ConfigurationError",
    # Logging
    "setup_logging",
    "TimedOperation",
]

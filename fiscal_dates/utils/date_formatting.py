"""
Date formatting helpers.

Each helper re-parses its input and emits it in a target format. Values that
do not parse format to ``INVALID_DATE``.
"""

from typing import Any, Optional
import logging

import pandas as pd

from config.constants import DateFormat, INVALID_DATE
from .clock import NowLike, current_year, resolve_now
from .date_parsing import parse_date


logger = logging.getLogger(__name__)


def format_timestamp(timestamp: pd.Timestamp, fmt: str) -> str:
    """Format an already parsed value, mapping NaT to ``INVALID_DATE``."""
    if pd.isna(timestamp):
        return INVALID_DATE
    return timestamp.strftime(fmt)


def format_date(value: Any, fmt: str, utc_mode: Optional[bool] = None) -> str:
    """
    Parse ``value`` and format it with ``fmt``.

    Args:
        value: Date string or parsed value
        fmt: strftime pattern for the output
        utc_mode: Mode used for the intermediate parse

    Returns:
        Formatted date, or ``INVALID_DATE``
    """
    return format_timestamp(parse_date(value, utc_mode=utc_mode), fmt)


def to_iso_format(value: Any) -> str:
    """
    Format as ``YYYY-MM-DD``.

    Examples:
        >>> to_iso_format("01/31/2024")
        '2024-01-31'
    """
    return format_date(value, DateFormat.YYYY_MM_DD)


def to_month_day_year_format(value: Any, utc_mode: Optional[bool] = None) -> str:
    """Format as ``MM/DD/YYYY``, parsing in ``utc_mode``."""
    return format_date(value, DateFormat.MM_DD_YYYY, utc_mode=utc_mode)


def to_month_day_format(month: int, day: int, now: Optional[NowLike] = None) -> str:
    """
    Format a zero-based month and a day of the current year as ``Mmm DD``.

    Days past the end of the month roll into the following month.

    Examples:
        >>> to_month_day_format(0, 5, now="2024-06-01")
        'Jan 05'
        >>> to_month_day_format(1, 30, now="2024-06-01")
        'Mar 01'
    """
    first_of_year = pd.Timestamp(year=current_year(now), month=1, day=1)
    target = first_of_year + pd.DateOffset(months=month) + pd.Timedelta(days=day - 1)
    return target.strftime(DateFormat.MMM_DD)


def get_current_date(fmt: str = DateFormat.YYYY_MM_DD, now: Optional[NowLike] = None) -> str:
    """Return today's date (local time) formatted with ``fmt``."""
    return resolve_now(now).strftime(fmt)

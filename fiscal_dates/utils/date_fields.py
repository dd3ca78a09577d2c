"""
Field extraction and month-name lookups.

Months are zero-based (January=0) throughout, matching the month selectors
used by the front-end. Field helpers return NaN for values that do not parse.
"""

import calendar
from typing import Any, List, Optional, Union
import logging

import pandas as pd

from .clock import NowLike, current_year
from .date_parsing import parse_date


logger = logging.getLogger(__name__)


# Month tables for the active locale, January first
MONTHS_SHORT: List[str] = list(calendar.month_abbr)[1:]
MONTHS_FULL: List[str] = list(calendar.month_name)[1:]


def get_year(value: Any) -> Union[int, float]:
    """Return the four-digit year, or NaN if ``value`` is not a date."""
    return parse_date(value).year


def get_month(value: Any) -> Union[int, float]:
    """Return the zero-based month, or NaN if ``value`` is not a date."""
    parsed = parse_date(value)
    if pd.isna(parsed):
        return float("nan")
    return parsed.month - 1


def get_month_name(value: Any) -> Union[str, float]:
    """Return the full month name, e.g. ``"January"``."""
    return parse_date(value).month_name()


def get_day_of_month(value: Any) -> Union[int, float]:
    return parse_date(value).day


def get_month_by_short_name(month_name: str) -> Optional[int]:
    """
    Return the zero-based index of an abbreviated month name.

    Examples:
        >>> get_month_by_short_name("Mar")
        2
        >>> get_month_by_short_name("March") is None
        True
    """
    try:
        return MONTHS_SHORT.index(month_name)
    except ValueError:
        return None


def get_short_month_name(month: int) -> Optional[str]:
    """Return the abbreviation for a zero-based month, None when out of range."""
    if not isinstance(month, int) or not 0 <= month < len(MONTHS_SHORT):
        return None
    return MONTHS_SHORT[month]


def get_all_months(months_short: bool = True) -> List[str]:
    return list(MONTHS_SHORT if months_short else MONTHS_FULL)


def get_month_number(month: Union[str, int]) -> Optional[int]:
    """
    Resolve a month to its zero-based index.

    Accepts full or abbreviated names (case-insensitive) and month numbers.
    Numbers past December roll over (12 -> 0). The result does not depend on
    the current date.

    Args:
        month: Month name, zero-based month number, or numeric string

    Returns:
        Zero-based month index, or None if the month is not recognized
    """
    if isinstance(month, bool):
        return None
    if isinstance(month, int):
        return month % 12

    text = str(month).strip()
    if text.lstrip("-").isdigit():
        return int(text) % 12

    lowered = text.lower()
    for table in (MONTHS_FULL, MONTHS_SHORT):
        for index, name in enumerate(table):
            if name.lower() == lowered:
                return index

    logger.debug(f"Unrecognized month name: {month!r}")
    return None


def get_end_of_month(month: int, now: Optional[NowLike] = None) -> int:
    """
    Return the last day number of ``month`` in the current year.

    February gives 28 or 29 depending on the current year. Months outside
    0..11 roll into the neighbouring years.

    Args:
        month: Zero-based month
        now: Reference time (defaults to the system clock)
    """
    first_of_year = pd.Timestamp(year=current_year(now), month=1, day=1)
    return (first_of_year + pd.DateOffset(months=month)).days_in_month

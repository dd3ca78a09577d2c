"""
Date range utilities.

Builds fiscal and calendar year ranges, enumerates the days and years of a
range, and produces the "last N days" range used as the default filter.
Ranges are returned as month/day/year strings unless noted otherwise.
"""

import re
from typing import Any, Iterator, List, Optional, Union
import logging

import pandas as pd

from config.constants import (
    DateFormat,
    INVALID_DATE,
    DATE_RANGE_LABEL_SEPARATOR,
    DEFAULT_ADDITIVE_YEARS,
    DEFAULT_YEAR_FROM,
    DEFAULT_DAYS_TO_SUBTRACT,
)
from config.settings import get_settings
from fiscal_dates.models.data_models import DateRange
from .clock import NowLike, current_year
from .date_fields import get_year
from .date_formatting import format_timestamp, get_current_date, to_iso_format
from .date_parsing import parse_date, parse_iso_date


logger = logging.getLogger(__name__)

YearLike = Union[int, float, str]

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def _parse_year(year: Any) -> Optional[int]:
    """
    Read a year from a number or from the leading digits of a string.

    Examples:
        >>> _parse_year(" 2024abc")
        2024
        >>> _parse_year("FY24") is None
        True
    """
    if isinstance(year, bool):
        return None
    if isinstance(year, str):
        match = _LEADING_INT_RE.match(year)
        return int(match.group(1)) if match else None
    if isinstance(year, (int, float)) and not pd.isna(year):
        return int(year)
    return None


def _twelve_month_range(year: Optional[int], start_month: int) -> List[str]:
    """Return the range starting on the first of ``start_month`` and ending a year later."""
    if year is None:
        return [INVALID_DATE, INVALID_DATE]

    try:
        date_from = pd.Timestamp(year=year, month=start_month, day=1)
    except ValueError:
        logger.warning(f"Year {year} is outside the supported date range")
        return [INVALID_DATE, INVALID_DATE]

    date_to = date_from + pd.DateOffset(years=1) - pd.Timedelta(days=1)
    return [date_from.strftime(DateFormat.MM_DD_YYYY), date_to.strftime(DateFormat.MM_DD_YYYY)]


def generate_available_years(additive_years: int = DEFAULT_ADDITIVE_YEARS,
                             year_from: int = DEFAULT_YEAR_FROM,
                             now: Optional[NowLike] = None) -> List[int]:
    """
    List selectable years, newest first.

    Args:
        additive_years: Years past the current one to include, plus one
        year_from: Oldest year to include
        now: Reference time (defaults to the system clock)

    Returns:
        ``[current_year + additive_years - 1, ..., year_from]``

    Examples:
        >>> generate_available_years(2, 2020, now="2025-05-01")
        [2026, 2025, 2024, 2023, 2022, 2021, 2020]
    """
    last_year = current_year(now) + additive_years - 1
    return list(range(last_year, year_from - 1, -1))


def fiscal_year_to_date_range(year: YearLike) -> List[str]:
    """
    Return the fiscal year range for fiscal ``year``.

    The fiscal year runs from the configured start month (July by default)
    of ``year - 1`` through the end of the month before it in ``year``.

    Examples:
        >>> fiscal_year_to_date_range(2024)
        ['07/01/2023', '06/30/2024']
    """
    parsed_year = _parse_year(year)
    start_year = parsed_year - 1 if parsed_year is not None else None
    return _twelve_month_range(start_year, get_settings().dates.fiscal_year_start_month)


def calendar_year_to_date_range(year: YearLike) -> List[str]:
    """
    Return January 1 through December 31 for ``year``.

    Numeric input is shifted back one year (``2024`` gives 2023) while string
    input is used as-is (``"2024"`` gives 2024). Set
    ``NORMALIZE_CALENDAR_YEAR_INPUT`` to use numeric input as-is too.

    Examples:
        >>> calendar_year_to_date_range("2024")
        ['01/01/2024', '12/31/2024']
    """
    parsed_year = _parse_year(year)

    if parsed_year is not None and not isinstance(year, str):
        if get_settings().dates.normalize_calendar_year_input:
            logger.debug(f"Using numeric calendar year {parsed_year} as-is")
        else:
            logger.debug(f"Numeric calendar year {parsed_year} shifted to {parsed_year - 1}")
            parsed_year -= 1

    return _twelve_month_range(parsed_year, 1)


def iter_date_range_dates(start_date: Any, end_date: Any) -> Iterator[str]:
    """
    Yield each day from ``start_date`` through ``end_date`` as ``MM/DD/YYYY``.

    Yields nothing when either bound is not a date or the range is reversed.
    """
    date_from = parse_date(start_date)
    date_to = parse_date(end_date)

    if pd.isna(date_from) or pd.isna(date_to):
        logger.debug(f"Empty day range for {start_date!r} - {end_date!r}")
        return

    # Bounds may differ in awareness when one was passed in already parsed
    for day in pd.date_range(start=_wall_clock(date_from), end=_wall_clock(date_to), freq="D"):
        yield day.strftime(DateFormat.MM_DD_YYYY)


def get_date_range_dates(start_date: Any, end_date: Any) -> List[str]:
    """
    List every day of a range, both ends included.

    Examples:
        >>> get_date_range_dates("12/30/2023", "2024-01-01")
        ['12/30/2023', '12/31/2023', '01/01/2024']
    """
    return list(iter_date_range_dates(start_date, end_date))


def get_date_range_years(start_date: Any, end_date: Any) -> List[int]:
    """
    List every year touched by a range, both ends included.

    Examples:
        >>> get_date_range_years("01/15/2020", "03/01/2022")
        [2020, 2021, 2022]
    """
    year_from = get_year(start_date)
    year_to = get_year(end_date)

    if pd.isna(year_from) or pd.isna(year_to):
        return []

    return list(range(int(year_from), int(year_to) + 1))


def get_date_range_subtract_from_now(days_to_subtract: int = DEFAULT_DAYS_TO_SUBTRACT,
                                     now: Optional[NowLike] = None) -> DateRange:
    """
    Build the range covering the last ``days_to_subtract`` days up to today.

    Args:
        days_to_subtract: Days between the start of the range and today
        now: Reference time (defaults to the system clock)

    Returns:
        DateRange with ISO dates and a ``"from - to"`` label
    """
    date_to = get_current_date(DateFormat.YYYY_MM_DD, now=now)
    date_from = parse_date(date_to, formats=[DateFormat.YYYY_MM_DD]) - pd.Timedelta(days=days_to_subtract)

    iso_from = format_timestamp(date_from, DateFormat.YYYY_MM_DD)
    iso_to = to_iso_format(date_to)

    return DateRange(
        date_from=iso_from,
        date_to=iso_to,
        label=f"{iso_from}{DATE_RANGE_LABEL_SEPARATOR}{iso_to}",
    )


def get_diff_days_between_two_date(date_to: Any, date_from: Any) -> Union[int, float]:
    """
    Return the whole days from ``date_from`` to ``date_to``.

    Partial days are truncated toward zero and the result is negative when
    ``date_to`` is earlier. NaN if either value is not a date.

    Examples:
        >>> get_diff_days_between_two_date("2024-01-10", "2024-01-01")
        9
    """
    end = _parse_diff_operand(date_to)
    start = _parse_diff_operand(date_from)

    if pd.isna(end) or pd.isna(start):
        return float("nan")

    return int((end - start) / pd.Timedelta(days=1))


def _wall_clock(timestamp: pd.Timestamp) -> pd.Timestamp:
    if pd.isna(timestamp) or timestamp.tzinfo is None:
        return timestamp
    return timestamp.tz_localize(None)


def _parse_diff_operand(value: Any) -> pd.Timestamp:
    parsed = parse_iso_date(value)
    if pd.isna(parsed):
        parsed = parse_date(value, utc_mode=False)
    # Compare wall-clock times
    return _wall_clock(parsed)

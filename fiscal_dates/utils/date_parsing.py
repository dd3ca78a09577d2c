"""
Date parsing and validation helpers.

Strings are parsed against a prioritized list of strftime patterns; the first
pattern that matches the whole string wins. Unless parsing is strict, a
string that only starts with a date (``"2024-01-10T05:00:00"``) is then
accepted on that prefix. Parsed values are pandas Timestamps and failures
are reported as ``pd.NaT`` rather than raised, so callers can chain helpers
and validate with ``is_date``/``is_valid_date`` where it matters.
"""

from datetime import date, datetime
from typing import Any, Optional, Sequence
import logging

import pandas as pd

from config.constants import DATE_CHECK_FORMATS
from config.settings import get_settings
from .error_handlers import DateParsingError, validate_and_raise


logger = logging.getLogger(__name__)


def _resolve_utc_mode(utc_mode: Optional[bool]) -> bool:
    if utc_mode is None:
        return get_settings().dates.utc_mode
    return utc_mode


def _coerce_timestamp(value: Any, utc_mode: bool) -> pd.Timestamp:
    """Normalize an already-parsed value to the requested mode."""
    if pd.isna(value):
        return pd.NaT

    timestamp = pd.Timestamp(value)
    if not utc_mode:
        return timestamp
    if timestamp.tzinfo is None:
        return timestamp.tz_localize("UTC")
    return timestamp.tz_convert("UTC")


def _parse_with(text: str, fmt: str, utc_mode: bool, exact: bool) -> pd.Timestamp:
    parsed = pd.to_datetime(text, format=fmt, exact=exact, errors="coerce", utc=utc_mode)
    if exact or pd.isna(parsed):
        return parsed
    # A loose match must sit at the start of the string
    if text.lower().startswith(parsed.strftime(fmt).lower()):
        return parsed
    return pd.NaT


def parse_date(value: Any,
               formats: Optional[Sequence[str]] = None,
               utc_mode: Optional[bool] = None,
               strict: bool = False) -> pd.Timestamp:
    """
    Parse ``value`` against an ordered list of formats.

    Args:
        value: Date string, or an already parsed datetime/date/Timestamp
        formats: Patterns to try in order (default: configured parse list)
        utc_mode: Parse as UTC (True) or naive local time (False);
            defaults to the configured mode
        strict: Only accept formats matching the whole string. Otherwise,
            when no format matches exactly, each format is tried again
            against the start of the string and trailing text is ignored

    Returns:
        The first successful Timestamp, or ``pd.NaT`` when nothing matches

    Examples:
        >>> parse_date("01/31/2024").strftime("%Y-%m-%d")
        '2024-01-31'
        >>> parse_date("2024-01-10T05:00:00").strftime("%Y-%m-%d")
        '2024-01-10'
        >>> parse_date("31/01/2024") is pd.NaT
        True
    """
    utc_mode = _resolve_utc_mode(utc_mode)

    if isinstance(value, (pd.Timestamp, datetime, date)):
        return _coerce_timestamp(value, utc_mode)

    if value is None or (isinstance(value, float) and pd.isna(value)):
        return pd.NaT

    text = str(value).strip()
    if not text:
        return pd.NaT

    if formats is None:
        formats = get_settings().dates.parse_formats

    passes = (True,) if strict else (True, False)
    for exact in passes:
        for fmt in formats:
            parsed = _parse_with(text, fmt, utc_mode, exact)
            if not pd.isna(parsed):
                return parsed

    logger.debug(f"Could not parse '{text}' with formats {list(formats)}")
    return pd.NaT


def require_date(value: Any,
                 formats: Optional[Sequence[str]] = None,
                 utc_mode: Optional[bool] = None) -> pd.Timestamp:
    """
    Parse ``value`` like ``parse_date`` but raise when it is not a date.

    Raises:
        DateParsingError: If no format matches
    """
    parsed = parse_date(value, formats, utc_mode)
    validate_and_raise(
        not pd.isna(parsed),
        DateParsingError,
        f"Unrecognized date: {value!r}",
        value=value,
        formats=list(formats) if formats is not None else None,
    )
    return parsed


def parse_iso_date(value: Any) -> pd.Timestamp:
    """
    Parse an ISO-8601 string (date or date-time) as naive local time.

    Returns ``pd.NaT`` when the value is not ISO formatted.
    """
    if isinstance(value, (pd.Timestamp, datetime, date)):
        return pd.Timestamp(value)
    if value is None:
        return pd.NaT

    return pd.to_datetime(str(value).strip(), format="ISO8601", errors="coerce")


def is_valid_date(value: Any, fmt: str, strict: bool = True) -> bool:
    """
    Check whether ``value`` is a date in format ``fmt``.

    Args:
        value: Candidate date string
        fmt: strftime pattern
        strict: Require the whole string to match with every field at full
            width (``"01/05/2020"``, not ``"1/5/2020"``); when False the
            pattern may be found anywhere in the string

    Returns:
        True if the value parses, False otherwise
    """
    if not isinstance(value, str) or not value.strip():
        return False

    parsed = pd.to_datetime(value, format=fmt, exact=strict, errors="coerce")
    if pd.isna(parsed):
        return False
    if strict:
        return parsed.strftime(fmt).lower() == value.lower()
    return True


def is_date(value: Any, strict: bool = True) -> bool:
    """
    Check whether ``value`` looks like a date string.

    Accepts month/day/year, year-month-day and year-month-abbreviation,
    tried in that order.

    Examples:
        >>> is_date("02/01/2020")
        True
        >>> is_date("2020-Feb")
        True
        >>> is_date("Feb 2020")
        False
        >>> is_date("1/5/2020")
        False
    """
    return any(is_valid_date(value, fmt, strict) for fmt in DATE_CHECK_FORMATS)

"""
Fiscal and calendar year labels.

Labels such as ``"FY 24"`` or ``"CY 2023"`` start with a configurable prefix
and end with a year. These helpers test the prefix, read the year back and
build new labels.
"""

import re
from typing import Any, Optional
import logging

from config.constants import YEAR_LABEL_PATTERN, LABEL_CENTURY
from config.settings import get_settings


logger = logging.getLogger(__name__)

_YEAR_LABEL_RE = re.compile(YEAR_LABEL_PATTERN)


def is_fiscal_year(label: Any) -> bool:
    """True if ``label`` is a string starting with the fiscal prefix."""
    if isinstance(label, str):
        return label.startswith(get_settings().dates.fiscal_year_prefix)
    return False


def is_calendar_year(label: Any) -> bool:
    """True if ``label`` is a string starting with the calendar prefix."""
    if isinstance(label, str):
        return label.startswith(get_settings().dates.calendar_year_prefix)
    return False


def parse_year_from_label(label: Any) -> Optional[int]:
    """
    Read a two-digit year from a label and return it as a 20xx year.

    The year is the last two digits of the first run of word and space
    characters that ends in two digits, so four-digit years also resolve.

    Examples:
        >>> parse_year_from_label("FY 23")
        2023
        >>> parse_year_from_label("CY 2019")
        2019
        >>> parse_year_from_label("no digits here") is None
        True
    """
    if not isinstance(label, str):
        return None

    match = _YEAR_LABEL_RE.search(label)
    if match is None or len(match.groups()) != 2:
        logger.debug(f"No year found in label {label!r}")
        return None

    return LABEL_CENTURY + int(match.group(2))


def build_fiscal_year_label(year: int) -> str:
    """
    Build a fiscal label for ``year``.

    Examples:
        >>> build_fiscal_year_label(2024)
        'FY 24'
    """
    return f"{get_settings().dates.fiscal_year_prefix} {year % 100:02d}"


def build_calendar_year_label(year: int) -> str:
    return f"{get_settings().dates.calendar_year_prefix} {year % 100:02d}"

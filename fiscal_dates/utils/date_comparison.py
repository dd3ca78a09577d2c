"""
Date comparison helpers.

Both operands must pass ``is_date`` before they are compared. When either one
fails the result is ``ComparisonResult.NOT_COMPARABLE`` instead of a boolean.
"""

from typing import Any, Callable
import logging

import pandas as pd

from config.constants import ComparisonResult
from .date_parsing import is_date, parse_date


logger = logging.getLogger(__name__)


def _compare(first_date: Any, second_date: Any,
             predicate: Callable[[pd.Timestamp, pd.Timestamp], bool]) -> ComparisonResult:
    if not (is_date(first_date) and is_date(second_date)):
        logger.debug(f"Not comparable: {first_date!r} vs {second_date!r}")
        return ComparisonResult.NOT_COMPARABLE

    return ComparisonResult.from_bool(predicate(parse_date(first_date), parse_date(second_date)))


def is_after(first_date: Any, second_date: Any) -> ComparisonResult:
    """
    Check whether ``first_date`` is strictly after ``second_date``.

    Examples:
        >>> is_after("02/01/2020", "01/01/2020")
        <ComparisonResult.TRUE: 'true'>
        >>> is_after("02/01/2020", "not a date")
        <ComparisonResult.NOT_COMPARABLE: 'not_comparable'>
    """
    return _compare(first_date, second_date, lambda a, b: a > b)


def is_same_or_after(first_date: Any, second_date: Any) -> ComparisonResult:
    return _compare(first_date, second_date, lambda a, b: a >= b)


def is_same_or_before(first_date: Any, second_date: Any) -> ComparisonResult:
    return _compare(first_date, second_date, lambda a, b: a <= b)


def is_before(first_date: Any, second_date: Any) -> ComparisonResult:
    return _compare(first_date, second_date, lambda a, b: a < b)

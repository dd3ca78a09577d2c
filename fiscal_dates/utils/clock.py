"""
Current-time access for the date helpers.

Helpers that depend on "today" take an optional ``now`` argument. When it is
omitted they fall back to ``system_now()``, which tests can patch.
"""

from datetime import date, datetime
from typing import Optional, Union

import pandas as pd


NowLike = Union[pd.Timestamp, datetime, date, str]


def system_now() -> pd.Timestamp:
    """Return the current local wall-clock time."""
    return pd.Timestamp.now()


def resolve_now(now: Optional[NowLike] = None) -> pd.Timestamp:
    """
    Return ``now`` as a Timestamp, reading the system clock when it is None.

    Examples:
        >>> resolve_now("2025-03-14").year
        2025
    """
    if now is None:
        return system_now()
    return pd.Timestamp(now)


def current_year(now: Optional[NowLike] = None) -> int:
    return resolve_now(now).year

"""
Unit tests for date_fields.py module.
"""

import math

import pandas as pd
import pytest
from unittest.mock import patch

from fiscal_dates.utils.date_fields import (
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


class TestFieldExtraction:
    """Test single-field extraction from date strings."""

    def test_fields_from_month_day_year(self):
        assert get_year("03/05/2020") == 2020
        assert get_month("03/05/2020") == 2  # Zero-based
        assert get_day_of_month("03/05/2020") == 5
        assert get_month_name("03/05/2020") == "March"

    def test_fields_from_other_formats(self):
        assert get_month("2020-12-31") == 11
        assert get_month("2020-Jan") == 0
        assert get_day_of_month("2020-Jan") == 1

    def test_invalid_dates_give_nan(self):
        """Edge case: field helpers do not raise on bad input."""
        assert math.isnan(get_year("not a date"))
        assert math.isnan(get_month("13/45/2020"))
        assert math.isnan(get_day_of_month(None))
        assert pd.isna(get_month_name("not a date"))


class TestMonthTables:
    """Test lookups against the month name tables."""

    def test_short_name_lookup(self):
        assert get_month_by_short_name("Jan") == 0
        assert get_month_by_short_name("Mar") == 2
        assert get_month_by_short_name("Dec") == 11

    def test_short_name_lookup_misses(self):
        assert get_month_by_short_name("March") is None
        assert get_month_by_short_name("mar") is None

    def test_short_month_name(self):
        assert get_short_month_name(0) == "Jan"
        assert get_short_month_name(11) == "Dec"
        assert get_short_month_name(12) is None
        assert get_short_month_name(-1) is None

    def test_all_months(self):
        short_months = get_all_months()
        full_months = get_all_months(months_short=False)

        assert len(short_months) == 12
        assert short_months[0] == "Jan"
        assert full_months[0] == "January"
        assert full_months[-1] == "December"

    def test_all_months_returns_copy(self):
        months = get_all_months()
        months.clear()

        assert len(get_all_months()) == 12


class TestGetMonthNumber:
    """Test month name resolution."""

    @pytest.mark.parametrize("month,expected", [
        ("January", 0),
        ("march", 2),
        ("DECEMBER", 11),
        ("Sep", 8),
        ("sep", 8),
        (4, 4),
        ("4", 4),
        (13, 1),  # Rolls over past December
    ])
    def test_resolves_months(self, month, expected):
        assert get_month_number(month) == expected

    def test_unknown_month(self):
        assert get_month_number("Smarch") is None
        assert get_month_number(True) is None

    def test_independent_of_current_date(self):
        """Test that the 31st of a month does not skew short months."""
        with patch("fiscal_dates.utils.clock.system_now", return_value=pd.Timestamp("2025-01-31")):
            assert get_month_number("February") == 1


class TestGetEndOfMonth:
    """Test last-day lookups in the current year."""

    def test_february_in_leap_and_common_years(self):
        assert get_end_of_month(1, now="2024-05-01") == 29
        assert get_end_of_month(1, now="2023-05-01") == 28

    def test_regular_months(self, fixed_now):
        assert get_end_of_month(0, now=fixed_now) == 31
        assert get_end_of_month(3, now=fixed_now) == 30

    def test_months_roll_over(self):
        assert get_end_of_month(13, now="2024-05-01") == 28  # February 2025
        assert get_end_of_month(-1, now="2024-05-01") == 31  # December 2023

    def test_uses_system_clock_by_default(self):
        with patch("fiscal_dates.utils.clock.system_now", return_value=pd.Timestamp("2024-02-10")):
            assert get_end_of_month(1) == 29

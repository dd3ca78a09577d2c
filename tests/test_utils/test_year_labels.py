"""
Unit tests for year_labels.py module.
"""

import pytest

from fiscal_dates.utils.year_labels import (
    is_fiscal_year,
    is_calendar_year,
    parse_year_from_label,
    build_fiscal_year_label,
    build_calendar_year_label,
)


class TestLabelPrefixes:

    def test_fiscal_prefix(self):
        assert is_fiscal_year("FY 24") is True
        assert is_fiscal_year("CY 24") is False
        assert is_fiscal_year("fy 24") is False

    def test_calendar_prefix(self):
        assert is_calendar_year("CY 2023") is True
        assert is_calendar_year("FY 2023") is False

    @pytest.mark.parametrize("value", [None, 2024, ["FY 24"], {"label": "CY 24"}])
    def test_non_string_input_is_false(self, value):
        """Edge case: non-strings give False, never None."""
        assert is_fiscal_year(value) is False
        assert is_calendar_year(value) is False

    def test_configured_prefixes(self, monkeypatch):
        monkeypatch.setenv("FISCAL_YEAR_PREFIX", "Fiscal")
        monkeypatch.setenv("CALENDAR_YEAR_PREFIX", "Calendar")

        assert is_fiscal_year("Fiscal 24") is True
        assert is_fiscal_year("FY 24") is False
        assert is_calendar_year("Calendar 2023") is True


class TestParseYearFromLabel:

    @pytest.mark.parametrize("label,expected", [
        ("FY 23", 2023),
        ("FY23", 2023),
        ("CY 2019", 2019),
        ("FY 24 Q1", 2024),
        ("Budget 07", 2007),
    ])
    def test_labels_with_years(self, label, expected):
        assert parse_year_from_label(label) == expected

    @pytest.mark.parametrize("label", ["no digits here", "FY 5", "", None, 23])
    def test_labels_without_years(self, label):
        assert parse_year_from_label(label) is None


class TestBuildLabels:

    def test_fiscal_label(self):
        assert build_fiscal_year_label(2024) == "FY 24"
        assert build_fiscal_year_label(2005) == "FY 05"

    def test_calendar_label(self):
        assert build_calendar_year_label(2023) == "CY 23"

    def test_labels_round_trip(self):
        label = build_fiscal_year_label(2031)

        assert is_fiscal_year(label) is True
        assert parse_year_from_label(label) == 2031

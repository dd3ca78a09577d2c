"""
Tests for range label resolution.
"""

import pytest

from fiscal_dates.models.data_models import DateRange
from fiscal_dates.services.label_resolver import LabelResolver, resolve_date_range_label
from fiscal_dates.utils.date_ranges import get_date_range_subtract_from_now
from fiscal_dates.utils.error_handlers import DateValidationError


class TestYearLabels:

    def test_fiscal_label(self):
        result = resolve_date_range_label("FY 24")

        assert result == DateRange(date_from="07/01/2023", date_to="06/30/2024", label="FY 24")

    def test_calendar_label_uses_the_labelled_year(self):
        """Test that calendar labels never get the numeric year offset."""
        result = resolve_date_range_label("CY 2023")

        assert result.to_list() == ["01/01/2023", "12/31/2023"]

    def test_label_without_year(self):
        assert resolve_date_range_label("FY") is None
        assert resolve_date_range_label("CY next") is None


class TestExplicitLabels:

    def test_iso_range_label(self):
        result = resolve_date_range_label("2024-01-01 - 2024-03-01")

        assert result.date_from == "2024-01-01"
        assert result.date_to == "2024-03-01"
        assert result.label == "2024-01-01 - 2024-03-01"

    def test_month_day_year_label_is_normalized(self):
        result = resolve_date_range_label("01/15/2024 - 02/15/2024")

        assert result.to_list() == ["2024-01-15", "2024-02-15"]

    def test_resolves_generated_labels(self, fixed_now):
        generated = get_date_range_subtract_from_now(30, now=fixed_now)

        resolved = resolve_date_range_label(generated.label)

        assert resolved == generated

    def test_reversed_range(self):
        assert resolve_date_range_label("2024-03-01 - 2024-01-01") is None

    def test_reversed_range_strict(self):
        resolver = LabelResolver(strict=True)

        with pytest.raises(DateValidationError, match="Range start is after its end"):
            resolver.resolve("2024-03-01 - 2024-01-01")

    def test_not_dates(self):
        assert resolve_date_range_label("today - tomorrow") is None


class TestUnrecognizedLabels:

    @pytest.mark.parametrize("label", ["Last quarter", "", "   ", None, 2024])
    def test_returns_none(self, label):
        assert resolve_date_range_label(label) is None

"""
Resolve textual range labels into date ranges.

Handles the three label shapes the front-end produces: fiscal year labels
(``"FY 24"``), calendar year labels (``"CY 2023"``) and explicit
``"<from> - <to>"`` labels as built by ``get_date_range_subtract_from_now``.
"""

import logging
from typing import Any, Optional

from config.constants import DATE_RANGE_LABEL_SEPARATOR
from fiscal_dates.models.data_models import DateRange
from fiscal_dates.utils.date_comparison import is_before
from fiscal_dates.utils.date_formatting import to_iso_format
from fiscal_dates.utils.date_parsing import is_date
from fiscal_dates.utils.date_ranges import calendar_year_to_date_range, fiscal_year_to_date_range
from fiscal_dates.utils.error_handlers import DateValidationError
from fiscal_dates.utils.year_labels import is_calendar_year, is_fiscal_year, parse_year_from_label


logger = logging.getLogger(__name__)


class LabelResolver:
    """
    Turns range labels into DateRange records.

    Args:
        strict: Raise DateValidationError for explicit ranges whose start is
            after their end, instead of returning None
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    def resolve(self, label: Any) -> Optional[DateRange]:
        """
        Resolve ``label`` into a DateRange.

        Returns:
            The range, or None if the label is not recognized
        """
        if not isinstance(label, str) or not label.strip():
            return None

        label = label.strip()

        if is_fiscal_year(label):
            return self._resolve_year(label, fiscal_year_to_date_range)

        if is_calendar_year(label):
            return self._resolve_year(label, calendar_year_to_date_range)

        if DATE_RANGE_LABEL_SEPARATOR in label:
            return self._resolve_explicit(label)

        logger.debug(f"Unrecognized range label: {label!r}")
        return None

    def _resolve_year(self, label: str, to_range) -> Optional[DateRange]:
        year = parse_year_from_label(label)
        if year is None:
            logger.debug(f"No year in label {label!r}")
            return None

        # String years are used as-is by both range builders
        date_from, date_to = to_range(str(year))
        return DateRange(date_from=date_from, date_to=date_to, label=label)

    def _resolve_explicit(self, label: str) -> Optional[DateRange]:
        raw_from, raw_to = (part.strip() for part in label.split(DATE_RANGE_LABEL_SEPARATOR, 1))

        if not (is_date(raw_from) and is_date(raw_to)):
            logger.debug(f"Range label {label!r} does not contain two dates")
            return None

        if is_before(raw_to, raw_from).as_bool():
            if self.strict:
                raise DateValidationError(
                    "Range start is after its end",
                    date_from=raw_from,
                    date_to=raw_to,
                )
            logger.warning(f"Reversed range label {label!r}")
            return None

        return DateRange(date_from=to_iso_format(raw_from), date_to=to_iso_format(raw_to), label=label)


def resolve_date_range_label(label: Any, strict: bool = False) -> Optional[DateRange]:
    """Resolve ``label`` with a default LabelResolver."""
    return LabelResolver(strict=strict).resolve(label)

"""
Command line entry point for the fiscal dates helpers.
Exposes the parsing, range and label utilities for scripting and debugging.
"""

import argparse
import sys
from typing import List, Optional

import pandas as pd
from dotenv import load_dotenv

# Load environment variables early
load_dotenv()

from config.constants import DateFormat, DEFAULT_ADDITIVE_YEARS, DEFAULT_YEAR_FROM, DEFAULT_DAYS_TO_SUBTRACT, LOG_LEVELS
from config.settings import get_settings
from fiscal_dates.services.label_resolver import resolve_date_range_label
from fiscal_dates.utils.date_formatting import format_timestamp
from fiscal_dates.utils.date_parsing import require_date
from fiscal_dates.utils.date_ranges import (
    calendar_year_to_date_range,
    fiscal_year_to_date_range,
    generate_available_years,
    get_date_range_subtract_from_now,
    get_diff_days_between_two_date,
    iter_date_range_dates,
    get_date_range_years,
)
from fiscal_dates.utils.error_handlers import (
    DateParsingError,
    DateValidationError,
    ExitCode,
    handle_exceptions,
    validate_and_raise,
)
from fiscal_dates.utils.year_labels import build_calendar_year_label, build_fiscal_year_label
from fiscal_dates.utils.logging_config import TimedOperation, configure_third_party_loggers, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fiscal Dates - parse, format and enumerate calendar and fiscal date ranges",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py fiscal 2024                      # 07/01/2023 06/30/2024
  python main.py calendar 2024                    # 01/01/2024 12/31/2024
  python main.py days 12/30/2023 2024-01-02       # one line per day
  python main.py recent --days 30                 # last 30 days, ISO dates
  python main.py label "FY 24"                    # resolve a range label

Environment variables: LOG_LEVEL, LOGS_DIR, DATE_PARSE_FORMATS, DATE_UTC_MODE,
FISCAL_YEAR_PREFIX, CALENDAR_YEAR_PREFIX, FISCAL_YEAR_START_MONTH,
NORMALIZE_CALENDAR_YEAR_INPUT
        """
    )

    parser.add_argument(
        '--log-level',
        choices=LOG_LEVELS,
        help='Set logging level (default: LOG_LEVEL, or INFO)'
    )

    parser.add_argument(
        '--log-dir',
        help='Directory for a rotating log file (default: LOGS_DIR, or no log file)'
    )

    parser.add_argument(
        '--version',
        action='version',
        version='Fiscal Dates 1.0.0'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    parse_cmd = subparsers.add_parser('parse', help='Parse a date and print it in ISO format')
    parse_cmd.add_argument('date')
    parse_cmd.add_argument('--local', action='store_true', help='Parse as local time instead of UTC')

    format_cmd = subparsers.add_parser('format', help='Parse a date and print it with a strftime pattern')
    format_cmd.add_argument('date')
    format_cmd.add_argument('pattern', nargs='?', default=DateFormat.MM_DD_YYYY)

    fiscal_cmd = subparsers.add_parser('fiscal', help='Print the date range of a fiscal year')
    fiscal_cmd.add_argument('year')

    calendar_cmd = subparsers.add_parser('calendar', help='Print the date range of a calendar year')
    calendar_cmd.add_argument('year')

    days_cmd = subparsers.add_parser('days', help='Print every day of a range')
    days_cmd.add_argument('start')
    days_cmd.add_argument('end')

    years_cmd = subparsers.add_parser('years', help='Print every year of a range')
    years_cmd.add_argument('start')
    years_cmd.add_argument('end')

    recent_cmd = subparsers.add_parser('recent', help='Print the range ending today')
    recent_cmd.add_argument('--days', type=int, default=DEFAULT_DAYS_TO_SUBTRACT)

    years_list_cmd = subparsers.add_parser('available-years', help='Print selectable years, newest first')
    years_list_cmd.add_argument('--additive', type=int, default=DEFAULT_ADDITIVE_YEARS)
    years_list_cmd.add_argument('--from', dest='year_from', type=int, default=DEFAULT_YEAR_FROM)
    years_list_cmd.add_argument('--labels', choices=['fiscal', 'calendar'],
                                help='Print year labels (e.g. "FY 24") instead of numbers')

    diff_cmd = subparsers.add_parser('diff', help='Print whole days between two dates')
    diff_cmd.add_argument('date_to')
    diff_cmd.add_argument('date_from')

    label_cmd = subparsers.add_parser('label', help='Resolve a range label')
    label_cmd.add_argument('label')

    return parser


def run_command(args: argparse.Namespace) -> List[str]:
    """
    Execute a parsed command.

    Returns:
        Output lines
    """
    if args.command == 'parse':
        parsed = require_date(args.date, utc_mode=not args.local)
        return [format_timestamp(parsed, DateFormat.YYYY_MM_DD)]

    if args.command == 'format':
        return [format_timestamp(require_date(args.date), args.pattern)]

    if args.command == 'fiscal':
        return [" ".join(fiscal_year_to_date_range(args.year))]

    if args.command == 'calendar':
        # Arguments arrive as strings, so no numeric year offset applies
        return [" ".join(calendar_year_to_date_range(args.year))]

    if args.command == 'days':
        require_date(args.start)
        require_date(args.end)
        return list(iter_date_range_dates(args.start, args.end))

    if args.command == 'years':
        require_date(args.start)
        require_date(args.end)
        return [str(year) for year in get_date_range_years(args.start, args.end)]

    if args.command == 'recent':
        date_range = get_date_range_subtract_from_now(args.days)
        return [date_range.label]

    if args.command == 'available-years':
        years = generate_available_years(args.additive, args.year_from)
        if args.labels == 'fiscal':
            return [", ".join(build_fiscal_year_label(year) for year in years)]
        if args.labels == 'calendar':
            return [", ".join(build_calendar_year_label(year) for year in years)]
        return [" ".join(str(year) for year in years)]

    if args.command == 'diff':
        days = get_diff_days_between_two_date(args.date_to, args.date_from)
        validate_and_raise(
            not pd.isna(days),
            DateParsingError,
            f"Unrecognized date in {args.date_to!r} - {args.date_from!r}",
            value=f"{args.date_to} - {args.date_from}",
        )
        return [str(days)]

    if args.command == 'label':
        date_range = resolve_date_range_label(args.label, strict=True)
        if date_range is None:
            raise DateValidationError(f"Unrecognized range label: {args.label!r}")
        return [" ".join(date_range.to_list())]

    raise ValueError(f"Unknown command: {args.command}")


@handle_exceptions(exit_on_error=True, log_traceback=True)
def main(argv: Optional[List[str]] = None) -> int:
    """
    Main application entry point.
    """
    args = build_parser().parse_args(argv)

    # Fail early on invalid configuration
    settings = get_settings()

    logger = setup_logging(
        log_level=args.log_level or settings.log_level,
        log_dir=args.log_dir or settings.logs_dir
    )
    configure_third_party_loggers()

    with TimedOperation(logger, f"command '{args.command}'"):
        lines = run_command(args)

    for line in lines:
        print(line)

    return ExitCode.SUCCESS.value


if __name__ == "__main__":
    sys.exit(main())

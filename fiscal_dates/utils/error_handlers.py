"""
Error handling utilities - Custom exceptions and exit code mapping.

The date helpers themselves report bad input through NaT/NaN values and
NOT_COMPARABLE results; these exceptions are raised by the strict helpers,
the settings loader and the command line.
"""

import sys
import functools
import logging
from typing import Any, Callable, Optional, Dict, Type, List
from enum import Enum


class ExitCode(Enum):
    """Exit codes for the command line"""
    SUCCESS = 0
    GENERAL_ERROR = 1
    PARSE_ERROR = 2
    CONFIG_ERROR = 3
    VALIDATION_ERROR = 5


class DateUtilsError(Exception):
    """Base exception class for the fiscal dates helpers"""

    def __init__(self, message: str, exit_code: ExitCode = ExitCode.GENERAL_ERROR,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.exit_code = exit_code
        self.details = details or {}

    def __str__(self):
        base_msg = super().__str__()
        if self.details:
            details_str = ", ".join([f"{k}={v}" for k, v in self.details.items()])
            return f"{base_msg} (Details: {details_str})"
        return base_msg


class DateParsingError(DateUtilsError):
    """Exception raised when a value cannot be parsed as a date"""

    def __init__(self, message: str, value: Optional[Any] = None,
                 formats: Optional[List[str]] = None, **kwargs):
        details = kwargs
        if value is not None:
            details['value'] = value
        if formats:
            details['formats'] = formats

        super().__init__(message, ExitCode.PARSE_ERROR, details)


class DateValidationError(DateUtilsError):
    """Exception raised when parsed dates do not form a usable range"""

    def __init__(self, message: str, date_from: Optional[str] = None,
                 date_to: Optional[str] = None, **kwargs):
        details = kwargs
        if date_from:
            details['date_from'] = date_from
        if date_to:
            details['date_to'] = date_to

        super().__init__(message, ExitCode.VALIDATION_ERROR, details)


class ConfigurationError(DateUtilsError):
    """Exception raised for configuration-related errors"""

    def __init__(self, message: str, config_key: Optional[str] = None,
                 config_value: Optional[Any] = None, **kwargs):
        details = kwargs
        if config_key:
            details['config_key'] = config_key
        if config_value:
            details['config_value'] = config_value

        super().__init__(message, ExitCode.CONFIG_ERROR, details)


def handle_exceptions(exit_on_error: bool = True,
                      log_traceback: bool = True,
                      default_exit_code: ExitCode = ExitCode.GENERAL_ERROR):
    """
    Decorator mapping exceptions to log records and exit codes.

    Args:
        exit_on_error: Whether to exit the process on errors
        log_traceback: Whether to log the full traceback
        default_exit_code: Exit code for unexpected exceptions
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            logger = logging.getLogger("fiscal_dates.error_handler")

            try:
                return func(*args, **kwargs)

            except DateUtilsError as e:
                logger.error(f"Application error in {func.__name__}: {str(e)}")

                if log_traceback:
                    logger.debug(f"Traceback for {func.__name__}:", exc_info=True)

                if exit_on_error:
                    logger.critical(f"Exiting with code {e.exit_code.value}")
                    sys.exit(e.exit_code.value)
                else:
                    raise

            except KeyboardInterrupt:
                logger.info("Operation interrupted by user")
                if exit_on_error:
                    sys.exit(130)  # Standard exit code for SIGINT
                else:
                    raise

            except Exception as e:
                error_msg = f"Unexpected error in {func.__name__}: {str(e)}"
                logger.error(error_msg)

                if log_traceback:
                    logger.error(f"Full traceback for {func.__name__}:", exc_info=True)

                if exit_on_error:
                    logger.critical(f"Exiting with code {default_exit_code.value}")
                    sys.exit(default_exit_code.value)
                else:
                    raise DateUtilsError(error_msg, default_exit_code) from e

        return wrapper
    return decorator


def validate_and_raise(condition: bool, error_class: Type[DateUtilsError],
                       message: str, **error_kwargs) -> None:
    """
    Validate a condition and raise an exception if it fails.

    Args:
        condition: Condition to validate (should be True for success)
        error_class: Exception class to raise if condition fails
        message: Error message
        **error_kwargs: Additional arguments for the exception
    """
    if not condition:
        raise error_class(message, **error_kwargs)

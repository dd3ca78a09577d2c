"""
Configuration settings for the fiscal dates helpers.
Values default from the environment (and a local .env file).
"""

import os
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from dotenv import load_dotenv

from config.constants import (
    PARSE_FORMATS,
    PARSE_FORMATS_SEPARATOR,
    DEFAULT_FISCAL_YEAR_PREFIX,
    DEFAULT_CALENDAR_YEAR_PREFIX,
    DEFAULT_FISCAL_YEAR_START_MONTH,
    DEFAULT_LOG_LEVEL,
    LOG_LEVELS,
)

# Load environment variables
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes", "on")


def _env_formats() -> List[str]:
    raw = os.getenv("DATE_PARSE_FORMATS")
    if not raw:
        return list(PARSE_FORMATS)
    return [fmt for fmt in raw.split(PARSE_FORMATS_SEPARATOR) if fmt]


class DateSettings(BaseModel):
    """Parsing and label settings"""

    # Environment-backed defaults go through the validators as well
    model_config = ConfigDict(validate_default=True)

    parse_formats: List[str] = Field(
        default_factory=_env_formats,
        description="Prioritized strftime patterns tried when parsing a date string"
    )

    utc_mode: bool = Field(
        default_factory=lambda: _env_bool("DATE_UTC_MODE", "true"),
        description="Parse as UTC (True) or as naive local time (False)"
    )

    fiscal_year_prefix: str = Field(
        default_factory=lambda: os.getenv("FISCAL_YEAR_PREFIX", DEFAULT_FISCAL_YEAR_PREFIX),
        description="Prefix marking a fiscal year label"
    )

    calendar_year_prefix: str = Field(
        default_factory=lambda: os.getenv("CALENDAR_YEAR_PREFIX", DEFAULT_CALENDAR_YEAR_PREFIX),
        description="Prefix marking a calendar year label"
    )

    fiscal_year_start_month: int = Field(
        default_factory=lambda: int(os.getenv("FISCAL_YEAR_START_MONTH", str(DEFAULT_FISCAL_YEAR_START_MONTH))),
        description="First calendar month (1-12) of a fiscal year",
        ge=1,
        le=12
    )

    # Numeric years are shifted back one year by calendar_year_to_date_range
    # unless this is enabled.
    normalize_calendar_year_input: bool = Field(
        default_factory=lambda: _env_bool("NORMALIZE_CALENDAR_YEAR_INPUT", "false"),
        description="Treat numeric and string calendar years the same way"
    )

    @field_validator("parse_formats")
    @classmethod
    def validate_parse_formats(cls, v):
        if not v:
            raise ValueError("At least one parse format is required")
        return v

    @field_validator("fiscal_year_prefix", "calendar_year_prefix")
    @classmethod
    def validate_prefix(cls, v):
        if not v.strip():
            raise ValueError("Label prefix cannot be blank")
        return v


class AppSettings(BaseModel):
    """Main application settings combining all configuration"""

    model_config = ConfigDict(validate_default=True)

    dates: DateSettings = Field(default_factory=DateSettings)

    log_level: str = Field(
        default_factory=lambda: os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL),
        description="Logging level for the command line"
    )

    logs_dir: Optional[str] = Field(
        default_factory=lambda: os.getenv("LOGS_DIR") or None,
        description="Directory for rotating log files; no log file when unset"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {LOG_LEVELS}")
        return level


def get_settings() -> AppSettings:
    """Get application settings instance"""
    from fiscal_dates.utils.error_handlers import ConfigurationError

    try:
        return AppSettings()
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration: {e.errors()[0]['msg']}",
            config_key=".".join(str(part) for part in e.errors()[0]["loc"])
        ) from e
    except ValueError as e:
        # Raised by the env-backed default factories (e.g. a non-numeric month)
        raise ConfigurationError(f"Invalid configuration: {e}") from e

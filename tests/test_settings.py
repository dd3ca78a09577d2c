"""
Tests for environment-backed configuration.
"""

import pandas as pd
import pytest

from config.constants import PARSE_FORMATS, DEFAULT_FISCAL_YEAR_PREFIX, DEFAULT_CALENDAR_YEAR_PREFIX
from config.settings import AppSettings, DateSettings, get_settings
from fiscal_dates.utils.date_parsing import parse_date
from fiscal_dates.utils.error_handlers import ConfigurationError


class TestDefaults:

    def test_date_settings_defaults(self):
        settings = get_settings()

        assert settings.dates.parse_formats == PARSE_FORMATS
        assert settings.dates.utc_mode is True
        assert settings.dates.fiscal_year_prefix == DEFAULT_FISCAL_YEAR_PREFIX
        assert settings.dates.calendar_year_prefix == DEFAULT_CALENDAR_YEAR_PREFIX
        assert settings.dates.fiscal_year_start_month == 7
        assert settings.dates.normalize_calendar_year_input is False
        assert settings.log_level == "INFO"
        assert settings.logs_dir is None

    def test_defaults_are_not_shared(self):
        """Test that mutating one settings object leaves the defaults alone."""
        first = DateSettings()
        first.parse_formats.append("%d.%m.%Y")

        assert DateSettings().parse_formats == PARSE_FORMATS


class TestEnvironmentOverrides:

    def test_parse_formats_from_env(self, monkeypatch):
        monkeypatch.setenv("DATE_PARSE_FORMATS", "%d.%m.%Y|%Y-%m-%d")

        assert get_settings().dates.parse_formats == ["%d.%m.%Y", "%Y-%m-%d"]
        assert parse_date("31.01.2024", utc_mode=False) == pd.Timestamp("2024-01-31")

    def test_local_mode_from_env(self, monkeypatch):
        monkeypatch.setenv("DATE_UTC_MODE", "false")

        assert parse_date("01/31/2024").tzinfo is None

    def test_logging_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", " warning ")
        monkeypatch.setenv("LOGS_DIR", "var/log")

        settings = get_settings()

        assert settings.log_level == "WARNING"
        assert settings.logs_dir == "var/log"

    def test_explicit_values_win(self):
        settings = AppSettings(dates=DateSettings(fiscal_year_start_month=4), log_level="DEBUG")

        assert settings.dates.fiscal_year_start_month == 4
        assert settings.log_level == "DEBUG"


class TestInvalidConfiguration:

    def test_month_out_of_range(self, monkeypatch):
        monkeypatch.setenv("FISCAL_YEAR_START_MONTH", "13")

        with pytest.raises(ConfigurationError, match="Invalid configuration") as exc_info:
            get_settings()

        assert exc_info.value.details["config_key"].endswith("fiscal_year_start_month")

    def test_month_not_a_number(self, monkeypatch):
        monkeypatch.setenv("FISCAL_YEAR_START_MONTH", "July")

        with pytest.raises(ConfigurationError):
            get_settings()

    def test_empty_parse_list(self, monkeypatch):
        monkeypatch.setenv("DATE_PARSE_FORMATS", "|")

        with pytest.raises(ConfigurationError, match="At least one parse format"):
            get_settings()

    def test_blank_prefix(self, monkeypatch):
        monkeypatch.setenv("FISCAL_YEAR_PREFIX", "  ")

        with pytest.raises(ConfigurationError, match="Label prefix cannot be blank"):
            get_settings()

    def test_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigurationError, match="Log level must be one of") as exc_info:
            get_settings()

        assert exc_info.value.details["config_key"] == "log_level"

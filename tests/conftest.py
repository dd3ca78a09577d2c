"""
Shared pytest fixtures.
"""

import logging

import pandas as pd
import pytest


CONFIG_ENV_VARS = [
    "DATE_PARSE_FORMATS",
    "DATE_UTC_MODE",
    "FISCAL_YEAR_PREFIX",
    "CALENDAR_YEAR_PREFIX",
    "FISCAL_YEAR_START_MONTH",
    "NORMALIZE_CALENDAR_YEAR_INPUT",
    "LOG_LEVEL",
    "LOGS_DIR",
]


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch):
    """Run every test against the default configuration."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    logging.getLogger("fiscal_dates").handlers.clear()


@pytest.fixture
def fixed_now():
    """A fixed reference time in a non-leap year."""
    return pd.Timestamp("2025-06-15 10:30:00")

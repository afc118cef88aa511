"""Shared test fixtures for timewise tests."""

import pytest
from datetime import datetime

from dateutil import tz

from timewise import Rule, Weekday
from timewise.rule.ruleconfig import ENV_WEEK_START_DAY, ENV_TIMEZONE, ENV_TIME_FORMATS


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove TIMEWISE_* overrides so default_rule() is deterministic.

    Tests that exercise the environment set the variables themselves via
    monkeypatch after this fixture has run.
    """
    for name in (ENV_WEEK_START_DAY, ENV_TIMEZONE, ENV_TIME_FORMATS):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def wednesday():
    """Naive Wednesday 2024-03-20 14:30:00."""
    return datetime(2024, 3, 20, 14, 30)


@pytest.fixture
def wednesday_utc():
    """Wednesday 2024-03-20 14:30:00 UTC."""
    return datetime(2024, 3, 20, 14, 30, tzinfo=tz.UTC)


@pytest.fixture
def reference():
    """Parser reference timestamp: 2024-03-15 10:00:00 (a Friday)."""
    return datetime(2024, 3, 15, 10, 0)


@pytest.fixture
def monday_rule():
    """Rule with weeks starting on Monday and no location."""
    return Rule(week_start_day=Weekday.MONDAY)


@pytest.fixture
def utc_rule():
    """Rule with weeks starting on Monday, located in UTC."""
    return Rule(week_start_day=Weekday.MONDAY).use_utc()


@pytest.fixture
def sample_timestamps():
    """Timestamps spread over month, quarter, leap-day and year edges."""
    return [
        datetime(2024, 1, 1, 0, 0),
        datetime(2024, 2, 29, 12, 0, 0, 1),
        datetime(2024, 3, 20, 14, 30, 45, 123456),
        datetime(2024, 6, 30, 23, 59, 59, 999999),
        datetime(2024, 7, 1, 0, 0, 0, 1),
        datetime(2023, 10, 25, 14, 30, 45),
        datetime(2023, 12, 31, 23, 59, 59),
        datetime(2024, 3, 17, 8, 0, tzinfo=tz.UTC),
        datetime(2024, 11, 3, 1, 30, tzinfo=tz.gettz("America/New_York")),
    ]

"""Rule module: configuration shared by timewise operations.

Public API:
    Rule(week_start_day=None, location=None, time_formats=None)
        Fluent configuration object (week start day, timezone, layouts)

    default_rule() -> Rule
        Fresh Rule seeded from library defaults and TIMEWISE_* env vars

    TIME_FORMATS, DEFAULT_FORMAT, FORMAT_*, CLOCK_*
        Built-in layout tables

Examples:
    >>> from timewise.rule import Rule
    >>> rule = Rule().set_week_start_day("monday").set_location_by_name("Asia/Tokyo")
    >>> rule.parse("2024-03-15 10:00")
    datetime.datetime(2024, 3, 15, 10, 0, tzinfo=tzfile('/usr/share/zoneinfo/Asia/Tokyo'))
"""

from timewise.rule.ruleconfig import (
    Rule,
    default_rule,
    to_weekday,
    DEFAULT_WEEK_START_DAY,
    ENV_WEEK_START_DAY,
    ENV_TIMEZONE,
    ENV_TIME_FORMATS,
)
from timewise.rule.rulelayouts import *  # noqa: F401,F403
from timewise.rule import rulelayouts as _rulelayouts

__all__ = [
    "Rule",
    "default_rule",
    "to_weekday",
    "DEFAULT_WEEK_START_DAY",
    "ENV_WEEK_START_DAY",
    "ENV_TIMEZONE",
    "ENV_TIME_FORMATS",
] + list(_rulelayouts.__all__)

"""Convenience entry points.

Free functions that mirror every ``Timex`` operation. Each one works on an
explicit timestamp ``v`` when given and on the current time otherwise, and
always uses a fresh ``default_rule()`` (library defaults plus ``TIMEWISE_*``
environment overrides).

Usage:
    from timewise import beginning_of_month, parse, time_ago

    beginning_of_month()                      # first instant of this month
    beginning_of_month(datetime(2024, 3, 15)) # datetime(2024, 3, 1, 0, 0)
    parse("2024-03-15 13:15")                 # datetime(2024, 3, 15, 13, 15)
    parse("not a date")                       # None
"""

from datetime import datetime
from typing import Optional

from timewise.calendar.calendarmath import Zone, load_zone
from timewise.rule.ruleconfig import default_rule
from timewise.timex.timexapi import Timex


def _timex(v: Optional[datetime] = None) -> Timex:
    rule = default_rule()
    if v is None:
        return rule.now()
    return rule.with_time(v)


# ---- boundaries ----

def beginning_of_minute(v: Optional[datetime] = None) -> datetime:
    return _timex(v).beginning_of_minute()


def beginning_of_hour(v: Optional[datetime] = None) -> datetime:
    return _timex(v).beginning_of_hour()


def beginning_of_day(v: Optional[datetime] = None) -> datetime:
    """
    Midnight of the day containing ``v`` (default: now).

    Examples:
        >>> beginning_of_day(datetime(2024, 3, 15, 13, 45))
        datetime.datetime(2024, 3, 15, 0, 0)
    """
    return _timex(v).beginning_of_day()


def beginning_of_week(v: Optional[datetime] = None) -> datetime:
    """Start of the week containing ``v``, using the default Rule's week start day."""
    return _timex(v).beginning_of_week()


def beginning_of_month(v: Optional[datetime] = None) -> datetime:
    return _timex(v).beginning_of_month()


def beginning_of_quarter(v: Optional[datetime] = None) -> datetime:
    return _timex(v).beginning_of_quarter()


def beginning_of_half(v: Optional[datetime] = None) -> datetime:
    return _timex(v).beginning_of_half()


def beginning_of_year(v: Optional[datetime] = None) -> datetime:
    return _timex(v).beginning_of_year()


def end_of_minute(v: Optional[datetime] = None) -> datetime:
    return _timex(v).end_of_minute()


def end_of_hour(v: Optional[datetime] = None) -> datetime:
    return _timex(v).end_of_hour()


def end_of_day(v: Optional[datetime] = None) -> datetime:
    """
    Last microsecond of the day containing ``v`` (default: now).

    Examples:
        >>> end_of_day(datetime(2024, 3, 15, 13, 45))
        datetime.datetime(2024, 3, 15, 23, 59, 59, 999999)
    """
    return _timex(v).end_of_day()


def end_of_week(v: Optional[datetime] = None) -> datetime:
    return _timex(v).end_of_week()


def end_of_month(v: Optional[datetime] = None) -> datetime:
    return _timex(v).end_of_month()


def end_of_quarter(v: Optional[datetime] = None) -> datetime:
    return _timex(v).end_of_quarter()


def end_of_half(v: Optional[datetime] = None) -> datetime:
    return _timex(v).end_of_half()


def end_of_year(v: Optional[datetime] = None) -> datetime:
    return _timex(v).end_of_year()


# ---- weekday lookups (current week, or the week of the parsed strings) ----

def monday(*strings: str) -> datetime:
    return _timex().monday(*strings)


def tuesday(*strings: str) -> datetime:
    return _timex().tuesday(*strings)


def wednesday(*strings: str) -> datetime:
    return _timex().wednesday(*strings)


def thursday(*strings: str) -> datetime:
    return _timex().thursday(*strings)


def friday(*strings: str) -> datetime:
    return _timex().friday(*strings)


def saturday(*strings: str) -> datetime:
    return _timex().saturday(*strings)


def sunday(*strings: str) -> datetime:
    return _timex().sunday(*strings)


def end_of_sunday() -> datetime:
    return _timex().end_of_sunday()


def quarter(v: Optional[datetime] = None) -> int:
    return _timex(v).quarter()


# ---- parsing ----

def parse(*strings: str) -> Optional[datetime]:
    """
    Parse ``strings`` against the current time.

    Returns:
        Parsed datetime or None if no candidate matched a layout
    """
    return default_rule().parse(*strings)


def must_parse(*strings: str) -> datetime:
    """
    Parse ``strings`` against the current time.

    Raises:
        ParseError: If no candidate matched a layout
    """
    return default_rule().must_parse(*strings)


def parse_in_location(zone: Zone, *strings: str) -> Optional[datetime]:
    """
    Parse ``strings`` against the current time in ``zone``.

    Offset-less values land in ``zone``.

    Args:
        zone: IANA zone name or tzinfo
        *strings: Candidate strings

    Returns:
        Parsed aware datetime or None if no candidate matched a layout

    Raises:
        UnknownTimezoneError: If ``zone`` is an unknown name
    """
    return default_rule().set_location(load_zone(zone)).parse(*strings)


def must_parse_in_location(zone: Zone, *strings: str) -> datetime:
    """
    Like ``parse_in_location`` but raises when nothing parses.

    Raises:
        UnknownTimezoneError: If ``zone`` is an unknown name
        ParseError: If no candidate matched a layout
    """
    return default_rule().set_location(load_zone(zone)).must_parse(*strings)


def between(start: str, end: str) -> bool:
    """True if now lies strictly between the parsed ``start`` and ``end``."""
    return _timex().between(start, end)


# ---- formatting ----

def format_rfc(layout: str, v: Optional[datetime] = None) -> str:
    return _timex(v).format_rfc(layout)


def format_rfc_short(layout: str, v: Optional[datetime] = None) -> str:
    return _timex(v).format_rfc_short(layout)


def default_format(v: Optional[datetime] = None) -> str:
    """
    Format ``v`` (default: now) with ``DEFAULT_FORMAT``.

    Examples:
        >>> default_format(datetime(2024, 3, 15, 13, 45))
        '2024-03-15 13:45:00'
    """
    return _timex(v).default_format()


def time_ago(v: datetime, *, now: Optional[datetime] = None) -> str:
    return _timex(v).time_ago(now)


def time_until(v: datetime, *, now: Optional[datetime] = None) -> str:
    return _timex(v).time_until(now)


__all__ = [
    "beginning_of_minute",
    "beginning_of_hour",
    "beginning_of_day",
    "beginning_of_week",
    "beginning_of_month",
    "beginning_of_quarter",
    "beginning_of_half",
    "beginning_of_year",
    "end_of_minute",
    "end_of_hour",
    "end_of_day",
    "end_of_week",
    "end_of_month",
    "end_of_quarter",
    "end_of_half",
    "end_of_year",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
    "end_of_sunday",
    "quarter",
    "parse",
    "must_parse",
    "parse_in_location",
    "must_parse_in_location",
    "between",
    "format_rfc",
    "format_rfc_short",
    "default_format",
    "time_ago",
    "time_until",
]

"""Timex: a timestamp bound to a Rule.

``Timex`` pairs a ``datetime`` with the ``Rule`` that governs it (week start
day, location, accepted layouts) and exposes boundary, weekday lookup,
parsing, formatting and relative-time operations against that pair.

Examples:
    >>> from datetime import datetime
    >>> from timewise import Rule, Weekday
    >>> rule = Rule(week_start_day=Weekday.MONDAY)
    >>> t = Timex(datetime(2024, 3, 20, 14, 30), rule)
    >>> t.beginning_of_week()
    datetime.datetime(2024, 3, 18, 0, 0)

    >>> t.quarter()
    1

    >>> t.sunday()
    datetime.datetime(2024, 3, 24, 0, 0)
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from timewise.calendar import calendarmath
from timewise.calendar.calendarmath import Weekday
from timewise.parse import parseidentity
from timewise.relative import relativeapi
from timewise.rule.ruleconfig import Rule, default_rule
from timewise.rule.rulelayouts import DEFAULT_FORMAT


class Timex:
    """A ``datetime`` paired with the ``Rule`` that interprets it."""

    def __init__(self, value: datetime, rule: Optional[Rule] = None) -> None:
        self._value = value
        self._rule = default_rule() if rule is None else rule

    @property
    def value(self) -> datetime:
        return self._value

    @property
    def rule(self) -> Rule:
        return self._rule

    # ---- beginning of period ----

    def beginning_of_minute(self) -> datetime:
        return calendarmath.beginning_of_minute(self._value)

    def beginning_of_hour(self) -> datetime:
        return calendarmath.beginning_of_hour(self._value)

    def beginning_of_day(self) -> datetime:
        return calendarmath.beginning_of_day(self._value)

    def beginning_of_week(self) -> datetime:
        """Midnight of the Rule's week start day on or before the value."""
        return calendarmath.beginning_of_week(self._value, self._rule.week_start_day)

    def beginning_of_month(self) -> datetime:
        return calendarmath.beginning_of_month(self._value)

    def beginning_of_quarter(self) -> datetime:
        return calendarmath.beginning_of_quarter(self._value)

    def beginning_of_half(self) -> datetime:
        return calendarmath.beginning_of_half(self._value)

    def beginning_of_year(self) -> datetime:
        return calendarmath.beginning_of_year(self._value)

    # ---- end of period ----

    def end_of_minute(self) -> datetime:
        return calendarmath.end_of_minute(self._value)

    def end_of_hour(self) -> datetime:
        return calendarmath.end_of_hour(self._value)

    def end_of_day(self) -> datetime:
        return calendarmath.end_of_day(self._value)

    def end_of_week(self) -> datetime:
        return calendarmath.end_of_week(self._value, self._rule.week_start_day)

    def end_of_month(self) -> datetime:
        return calendarmath.end_of_month(self._value)

    def end_of_quarter(self) -> datetime:
        return calendarmath.end_of_quarter(self._value)

    def end_of_half(self) -> datetime:
        return calendarmath.end_of_half(self._value)

    def end_of_year(self) -> datetime:
        return calendarmath.end_of_year(self._value)

    # ---- weekday lookups ----

    def _weekday_of_week(self, target: Weekday, strings: tuple[str, ...]) -> datetime:
        # Lookups use a Monday-anchored week regardless of the Rule's start day.
        anchor = self.must_parse(*strings) if strings else self.beginning_of_day()
        return anchor + timedelta(days=target - anchor.weekday())

    def monday(self, *strings: str) -> datetime:
        """
        Monday of the week containing the value (or the parsed ``strings``).

        Without strings the result is at midnight; with strings it keeps the
        parsed clock time.

        Raises:
            ParseError: If ``strings`` are given and none of them parses
        """
        return self._weekday_of_week(Weekday.MONDAY, strings)

    def tuesday(self, *strings: str) -> datetime:
        return self._weekday_of_week(Weekday.TUESDAY, strings)

    def wednesday(self, *strings: str) -> datetime:
        return self._weekday_of_week(Weekday.WEDNESDAY, strings)

    def thursday(self, *strings: str) -> datetime:
        return self._weekday_of_week(Weekday.THURSDAY, strings)

    def friday(self, *strings: str) -> datetime:
        return self._weekday_of_week(Weekday.FRIDAY, strings)

    def saturday(self, *strings: str) -> datetime:
        return self._weekday_of_week(Weekday.SATURDAY, strings)

    def sunday(self, *strings: str) -> datetime:
        """Sunday closing the Monday-anchored week (today when already Sunday)."""
        return self._weekday_of_week(Weekday.SUNDAY, strings)

    def end_of_sunday(self) -> datetime:
        return calendarmath.end_of_day(self.sunday())

    def quarter(self) -> int:
        """Quarter of the year, 1-4."""
        return calendarmath.quarter_of(self._value)

    # ---- parsing ----

    def parse(self, *strings: str) -> Optional[datetime]:
        """
        Parse ``strings`` using this value as the reference.

        Components a string leaves out are taken from the value; see
        ``timewise.parse.parse`` for the merge rules.

        Returns:
            Parsed datetime or None if no candidate matched a layout

        Examples:
            >>> from datetime import datetime
            >>> Timex(datetime(2024, 3, 15, 10, 0)).parse("13:15")
            datetime.datetime(2024, 3, 15, 13, 15)
        """
        return parseidentity.parse(self._value, strings, self._rule.time_formats)

    def must_parse(self, *strings: str) -> datetime:
        """
        Like ``parse`` but raises on failure.

        Raises:
            ParseError: If no candidate matched a layout
        """
        return parseidentity.must_parse(self._value, strings, self._rule.time_formats)

    def between(self, start: str, end: str) -> bool:
        """
        True if the value lies strictly after ``start`` and strictly before ``end``.

        Both bounds are parsed with this value as the reference.

        Raises:
            ParseError: If either bound does not parse
        """
        return self.must_parse(start) < self._value < self.must_parse(end)

    # ---- formatting ----

    def format_rfc(self, layout: str) -> str:
        """Format with a date-time layout such as ``FORMAT_ISO``."""
        return self._value.strftime(layout)

    def format_rfc_short(self, layout: str) -> str:
        """Format with a clock-only layout such as ``CLOCK_HM_COLON``."""
        return self._value.strftime(layout)

    def default_format(self) -> str:
        return self._value.strftime(DEFAULT_FORMAT)

    def time_ago(self, now: Optional[datetime] = None) -> str:
        return relativeapi.time_ago(self._value, now=now)

    def time_until(self, now: Optional[datetime] = None) -> str:
        return relativeapi.time_until(self._value, now=now)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Timex):
            return NotImplemented
        return self._value == other._value and self._rule is other._rule

    def __hash__(self) -> int:
        return hash((self._value, id(self._rule)))

    def __repr__(self) -> str:
        return f"Timex({self._value!r}, {self._rule!r})"


__all__ = ["Timex"]

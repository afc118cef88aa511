"""Rule configuration.

A ``Rule`` bundles the three settings every timewise operation depends on:
the weekday that opens a week, an optional timezone, and the ordered list
of layouts the tolerant parser tries.

Rules are plain objects owned by their creator. Builder methods mutate the
instance in place and return it for chaining; call ``copy()`` before
handing a Rule to code that may reconfigure it. ``default_rule()`` returns
a fresh Rule on every call, seeded from library defaults and from the
environment:

  - ``TIMEWISE_WEEK_START_DAY``: weekday name ("monday", "Sun") or 0-6 (Monday=0)
  - ``TIMEWISE_TIMEZONE``: IANA zone name
  - ``TIMEWISE_TIME_FORMATS``: extra layouts separated by ``||``
"""

from __future__ import annotations

import logging
import os
from datetime import datetime, tzinfo
from typing import TYPE_CHECKING, Iterable, Optional, Union

try:
    from dateutil import tz
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from timewise.calendar.calendarmath import Weekday, load_zone
from timewise.exceptions import UnknownTimezoneError
from timewise.rule.rulelayouts import TIME_FORMATS

if TYPE_CHECKING:
    from timewise.timex.timexapi import Timex

logger = logging.getLogger(__name__)

DEFAULT_WEEK_START_DAY = Weekday.SUNDAY

ENV_WEEK_START_DAY = "TIMEWISE_WEEK_START_DAY"
ENV_TIMEZONE = "TIMEWISE_TIMEZONE"
ENV_TIME_FORMATS = "TIMEWISE_TIME_FORMATS"
ENV_FORMAT_SEPARATOR = "||"

_WEEKDAY_NAMES = {
    "mon": Weekday.MONDAY,
    "tue": Weekday.TUESDAY,
    "wed": Weekday.WEDNESDAY,
    "thu": Weekday.THURSDAY,
    "fri": Weekday.FRIDAY,
    "sat": Weekday.SATURDAY,
    "sun": Weekday.SUNDAY,
}


def to_weekday(day: Union[int, str, Weekday]) -> Weekday:
    """
    Coerce an int, weekday name or ``Weekday`` into a ``Weekday``.

    Args:
        day: 0-6 (Monday=0), a name such as "Monday" or "sun", or a Weekday

    Returns:
        Weekday member

    Raises:
        ValueError: If the value does not name a weekday

    Examples:
        >>> to_weekday("Monday")
        <Weekday.MONDAY: 0>

        >>> to_weekday(6)
        <Weekday.SUNDAY: 6>
    """
    if isinstance(day, str):
        text = day.strip().lower()
        if text.isdigit():
            return to_weekday(int(text))
        weekday = _WEEKDAY_NAMES.get(text[:3])
        if weekday is None:
            raise ValueError(f"Unknown weekday: {day!r}")
        return weekday
    try:
        return Weekday(int(day))
    except (TypeError, ValueError) as e:
        raise ValueError(f"Weekday must be 0-6 (Monday=0), got {day!r}") from e


def _check_layouts(layouts: Iterable[str]) -> list[str]:
    checked = list(layouts)
    for layout in checked:
        if not isinstance(layout, str):
            raise TypeError(f"Layout must be a string, got {type(layout).__name__}")
    return checked


class Rule:
    """Week start day, timezone and accepted layouts for timewise operations."""

    def __init__(
        self,
        week_start_day: Union[int, str, Weekday, None] = None,
        location: Optional[tzinfo] = None,
        time_formats: Optional[Iterable[str]] = None,
    ) -> None:
        self._week_start_day = (
            DEFAULT_WEEK_START_DAY if week_start_day is None else to_weekday(week_start_day)
        )
        self._location = location
        self._time_formats = _check_layouts(TIME_FORMATS if time_formats is None else time_formats)

    # ---- builder ----

    def set_week_start_day(self, day: Union[int, str, Weekday]) -> Rule:
        self._week_start_day = to_weekday(day)
        return self

    def set_time_formats(self, layouts: Iterable[str]) -> Rule:
        """Replace the layout list wholesale."""
        self._time_formats = _check_layouts(layouts)
        return self

    def append_time_format(self, *layouts: str) -> Rule:
        """Append layouts after the existing ones; no-op when none are given."""
        if not layouts:
            return self
        self._time_formats.extend(_check_layouts(layouts))
        return self

    def set_location(self, location: Optional[tzinfo]) -> Rule:
        self._location = location
        return self

    def set_location_by_name(self, name: str, *, strict: bool = False) -> Rule:
        """
        Set the location from an IANA zone name.

        An unknown name leaves the current location untouched. In the
        default lenient mode that is only logged; check ``location`` to see
        which zone is in effect. With ``strict=True`` the failure raises.

        Args:
            name: IANA zone name (e.g., "Asia/Ho_Chi_Minh")
            strict: Raise instead of logging when the zone is unknown

        Returns:
            This Rule

        Raises:
            UnknownTimezoneError: If ``strict`` and the zone is unknown
        """
        try:
            self._location = load_zone(name)
        except UnknownTimezoneError:
            if strict:
                raise
            logger.warning(f"Unknown time zone {name!r}; keeping location {self._location!r}")
        return self

    def use_utc(self) -> Rule:
        self._location = tz.UTC
        return self

    def use_local(self) -> Rule:
        self._location = tz.tzlocal()
        return self

    def copy(self) -> Rule:
        return Rule(
            week_start_day=self._week_start_day,
            location=self._location,
            time_formats=self._time_formats,
        )

    # ---- read-only views ----

    @property
    def week_start_day(self) -> Weekday:
        return self._week_start_day

    @property
    def location(self) -> Optional[tzinfo]:
        return self._location

    @property
    def time_formats(self) -> tuple[str, ...]:
        return tuple(self._time_formats)

    # ---- binding ----

    def with_time(self, v: datetime) -> "Timex":
        from timewise.timex.timexapi import Timex

        return Timex(v, self)

    def now(self) -> "Timex":
        """Bind this Rule to the current time (in ``location`` when set, else naive local)."""
        return self.with_time(datetime.now(self._location))

    def parse(self, *strings: str) -> Optional[datetime]:
        """Parse against the current time; ``None`` when nothing parses."""
        return self.now().parse(*strings)

    def must_parse(self, *strings: str) -> datetime:
        """Parse against the current time; raise ``ParseError`` when nothing parses."""
        return self.now().must_parse(*strings)

    def __repr__(self) -> str:
        return (
            f"Rule(week_start_day={self._week_start_day.name}, "
            f"location={self._location!r}, "
            f"time_formats={len(self._time_formats)})"
        )


def default_rule() -> Rule:
    """
    Build a fresh Rule from library defaults and ``TIMEWISE_*`` environment overrides.

    Invalid overrides are logged and ignored.

    Returns:
        New Rule instance (never shared)

    Examples:
        >>> rule = default_rule()
        >>> rule.week_start_day
        <Weekday.SUNDAY: 6>
    """
    rule = Rule()

    env_day = os.getenv(ENV_WEEK_START_DAY)
    if env_day:
        try:
            rule.set_week_start_day(env_day)
            logger.debug(f"Week start day from {ENV_WEEK_START_DAY}: {rule.week_start_day.name}")
        except ValueError:
            logger.warning(f"Ignoring {ENV_WEEK_START_DAY}={env_day!r}: not a weekday")

    env_zone = os.getenv(ENV_TIMEZONE)
    if env_zone:
        try:
            rule.set_location_by_name(env_zone, strict=True)
            logger.debug(f"Location from {ENV_TIMEZONE}: {env_zone}")
        except UnknownTimezoneError:
            logger.warning(f"Ignoring {ENV_TIMEZONE}={env_zone!r}: unknown time zone")

    env_formats = os.getenv(ENV_TIME_FORMATS)
    if env_formats:
        extra = [f.strip() for f in env_formats.split(ENV_FORMAT_SEPARATOR) if f.strip()]
        rule.append_time_format(*extra)
        logger.debug(f"Appended {len(extra)} layouts from {ENV_TIME_FORMATS}")

    return rule


__all__ = [
    "Rule",
    "default_rule",
    "to_weekday",
    "DEFAULT_WEEK_START_DAY",
    "ENV_WEEK_START_DAY",
    "ENV_TIMEZONE",
    "ENV_TIME_FORMATS",
]

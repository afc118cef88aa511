"""Calendar Math
-------------

Stateless period-boundary arithmetic on ``datetime`` values.

Supports:
  - Boundaries: minute, hour, day, week, month, quarter, half, year
  - Shifting: seconds, minutes, hours, days (absolute durations)
  - Timezones: IANA lookup, strict and lenient conversion
  - Weekday ranges, leap years, quarter numbers, elapsed time

Key Design Principles:
  1. Every result keeps the tzinfo of its input (naive stays naive)
  2. "End of X" is always "beginning of next X" minus one microsecond
  3. Boundary math walks wall-clock fields; shifts walk absolute time
"""

from __future__ import annotations
from datetime import datetime, timedelta, tzinfo
from enum import IntEnum
from typing import Optional, Union

try:
    from dateutil import tz
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

try:
    import pandas as pd
except ImportError as e:
    raise ImportError("pandas not installed. pip install pandas") from e

from timewise.exceptions import UnknownTimezoneError


ONE_MICROSECOND = timedelta(microseconds=1)

Zone = Union[str, tzinfo]


class Weekday(IntEnum):
    """Day of week, numbered like ``datetime.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


# ---- Beginning of period ----

def beginning_of_minute(v: datetime) -> datetime:
    return v.replace(second=0, microsecond=0)


def beginning_of_hour(v: datetime) -> datetime:
    return v.replace(minute=0, second=0, microsecond=0)


def beginning_of_day(v: datetime) -> datetime:
    """Return midnight of the day containing ``v``."""
    return v.replace(hour=0, minute=0, second=0, microsecond=0)


def beginning_of_week(v: datetime, week_start_day: int = Weekday.SUNDAY) -> datetime:
    """
    Return midnight of the first day of the week containing ``v``.

    The week is anchored on ``week_start_day``. When ``v`` already falls on
    that day, the result is the same day's midnight.

    Args:
        v: Reference timestamp
        week_start_day: Weekday (Monday=0 ... Sunday=6) that opens a week

    Returns:
        Start of week, same tzinfo as ``v``

    Examples:
        >>> beginning_of_week(datetime(2024, 3, 20, 14, 30), Weekday.MONDAY)
        datetime.datetime(2024, 3, 18, 0, 0)

        >>> beginning_of_week(datetime(2024, 3, 20, 14, 30))  # Sunday start
        datetime.datetime(2024, 3, 17, 0, 0)
    """
    day = beginning_of_day(v)
    offset = (day.weekday() - int(week_start_day) + 7) % 7
    return day - timedelta(days=offset)


def beginning_of_month(v: datetime) -> datetime:
    return v.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def beginning_of_quarter(v: datetime) -> datetime:
    """
    Return midnight of the first day of the quarter containing ``v``.

    Q1 = Jan-Mar, Q2 = Apr-Jun, Q3 = Jul-Sep, Q4 = Oct-Dec
    """
    month = beginning_of_month(v)
    return month - relativedelta(months=(month.month - 1) % 3)


def beginning_of_half(v: datetime) -> datetime:
    """
    Return midnight of the first day of the half-year containing ``v``.

    H1 = Jan-Jun, H2 = Jul-Dec
    """
    month = beginning_of_month(v)
    return month - relativedelta(months=(month.month - 1) % 6)


def beginning_of_year(v: datetime) -> datetime:
    return v.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)


# ---- End of period ----

def end_of_minute(v: datetime) -> datetime:
    return beginning_of_minute(v) + timedelta(minutes=1) - ONE_MICROSECOND


def end_of_hour(v: datetime) -> datetime:
    return beginning_of_hour(v) + timedelta(hours=1) - ONE_MICROSECOND


def end_of_day(v: datetime) -> datetime:
    """Return 23:59:59.999999 of the day containing ``v``."""
    return beginning_of_day(v) + timedelta(days=1) - ONE_MICROSECOND


def end_of_week(v: datetime, week_start_day: int = Weekday.SUNDAY) -> datetime:
    return beginning_of_week(v, week_start_day) + timedelta(days=7) - ONE_MICROSECOND


def end_of_month(v: datetime) -> datetime:
    """
    Return the last microsecond of the month containing ``v``.

    Examples:
        >>> end_of_month(datetime(2024, 2, 10))
        datetime.datetime(2024, 2, 29, 23, 59, 59, 999999)
    """
    return beginning_of_month(v) + relativedelta(months=1) - ONE_MICROSECOND


def end_of_quarter(v: datetime) -> datetime:
    return beginning_of_quarter(v) + relativedelta(months=3) - ONE_MICROSECOND


def end_of_half(v: datetime) -> datetime:
    return beginning_of_half(v) + relativedelta(months=6) - ONE_MICROSECOND


def end_of_year(v: datetime) -> datetime:
    return beginning_of_year(v) + relativedelta(years=1) - ONE_MICROSECOND


def prev_beginning_of_day(v: datetime, days: int) -> datetime:
    """Return midnight of the calendar day ``days`` days before ``v``."""
    return beginning_of_day(v - timedelta(days=days))


def prev_end_of_day(v: datetime, days: int) -> datetime:
    """Return the last microsecond of the calendar day ``days`` days before ``v``."""
    return end_of_day(v - timedelta(days=days))


# ---- Shifting ----

def _shift(v: datetime, delta: timedelta) -> datetime:
    # Aware values move through UTC so DST transitions don't stretch the shift.
    if v.tzinfo is None:
        return v + delta
    return (v.astimezone(tz.UTC) + delta).astimezone(v.tzinfo)


def add_second(v: datetime, second: int) -> datetime:
    if second == 0:
        return v
    return _shift(v, timedelta(seconds=second))


def add_minute(v: datetime, minute: int) -> datetime:
    if minute == 0:
        return v
    return _shift(v, timedelta(minutes=minute))


def add_hour(v: datetime, hour: int) -> datetime:
    if hour == 0:
        return v
    return _shift(v, timedelta(hours=hour))


def add_day(v: datetime, day: int) -> datetime:
    """
    Shift ``v`` by ``day`` periods of 24 hours.

    Args:
        v: Timestamp to shift
        day: Signed number of days; 0 returns ``v`` unchanged

    Returns:
        Shifted timestamp in the tzinfo of ``v``
    """
    if day == 0:
        return v
    return _shift(v, timedelta(days=day))


# ---- Timezones ----

def load_zone(zone: Zone) -> tzinfo:
    """
    Resolve an IANA zone name to a tzinfo.

    Names are looked up with ``dateutil.tz.gettz``, so anything it accepts
    loads: IANA names, absolute paths to TZif files, POSIX TZ strings
    ("EST5EDT", "Foo3") and the local zone abbreviations in
    ``time.tzname``. Only IANA names are portable across machines.

    Args:
        zone: IANA name (e.g., "Europe/Paris") or an existing tzinfo

    Returns:
        tzinfo for the zone

    Raises:
        UnknownTimezoneError: If the name is empty, unknown or names a file
            that is not TZif data

    Examples:
        >>> load_zone("Asia/Tokyo")
        tzfile('/usr/share/zoneinfo/Asia/Tokyo')
    """
    if isinstance(zone, tzinfo):
        return zone
    # gettz("") returns the local zone; an empty name is never a valid request.
    if not zone or not str(zone).strip():
        raise UnknownTimezoneError(zone)
    try:
        loaded = tz.gettz(str(zone).strip())
    except ValueError as e:
        # A path to a file that is not TZif data.
        raise UnknownTimezoneError(zone) from e
    if loaded is None:
        raise UnknownTimezoneError(zone)
    return loaded


def set_timezone(v: datetime, zone: Zone) -> datetime:
    """
    Convert ``v`` to ``zone``.

    Raises:
        UnknownTimezoneError: If ``zone`` is not a known IANA name
    """
    return v.astimezone(load_zone(zone))


def adjust_timezone(v: datetime, zone: Zone) -> datetime:
    """Convert ``v`` to ``zone``, or return ``v`` unchanged when the zone is unknown."""
    try:
        return set_timezone(v, zone)
    except UnknownTimezoneError:
        return v


# ---- Predicates and lookups ----

def is_leap_year(year: int) -> bool:
    """
    Gregorian leap year test.

    Examples:
        >>> is_leap_year(2000), is_leap_year(1900), is_leap_year(2024)
        (True, False, True)
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_leap_year_from_timestamp(v: datetime) -> bool:
    return is_leap_year(v.year)


def quarter_of(v: datetime) -> int:
    return (v.month - 1) // 3 + 1


def _now_like(v: datetime) -> datetime:
    return datetime.now(v.tzinfo)


def is_within_tolerance(
    v: datetime,
    tolerance: timedelta = timedelta(minutes=1),
    *,
    now: Optional[datetime] = None,
) -> bool:
    """True if ``v`` lies within ``tolerance`` (default one minute) of now."""
    if now is None:
        now = _now_like(v)
    return abs(v - now) <= tolerance


def weekdays_in_range(start: datetime, end: datetime) -> list[datetime]:
    """
    List every Monday-Friday date in ``[start, end]``, inclusive.

    Steps one calendar day at a time from ``start`` and keeps its time of
    day. Weekend dates are skipped; nothing else is filtered. A wall time
    that does not exist on some day (a DST gap) is moved forward by the
    size of the gap.

    Args:
        start: First candidate date
        end: Last candidate date (inclusive)

    Returns:
        List of datetimes (empty when ``end`` precedes ``start``)

    Examples:
        >>> [d.day for d in weekdays_in_range(datetime(2024, 3, 1), datetime(2024, 3, 10))]
        [1, 4, 5, 6, 7, 8]
    """
    if end < start:
        return []
    zone = start.tzinfo
    if zone is not None and end.tzinfo is not None:
        end = end.astimezone(zone)

    # Step on wall-clock values.
    days = pd.bdate_range(
        start=start.replace(tzinfo=None), end=end.replace(tzinfo=None), normalize=False
    )
    if zone is None:
        return [day.to_pydatetime() for day in days]
    return [tz.resolve_imaginary(day.to_pydatetime().replace(tzinfo=zone)) for day in days]


def _since(v: datetime, now: Optional[datetime]) -> timedelta:
    if now is None:
        now = _now_like(v)
    return now - v


def since_hour(v: datetime, *, now: Optional[datetime] = None) -> float:
    return _since(v, now).total_seconds() / 3600


def since_minute(v: datetime, *, now: Optional[datetime] = None) -> float:
    return _since(v, now).total_seconds() / 60


def since_second(v: datetime, *, now: Optional[datetime] = None) -> float:
    return _since(v, now).total_seconds()


def decompose_to_fields(v: datetime) -> list[int]:
    """
    Split ``v`` into ``[microsecond, second, minute, hour, day, month, year]``.

    This ordering is the one the tolerant parser merges field by field.

    Examples:
        >>> decompose_to_fields(datetime(2024, 3, 15, 10, 5, 30, 250))
        [250, 30, 5, 10, 15, 3, 2024]
    """
    return [v.microsecond, v.second, v.minute, v.hour, v.day, v.month, v.year]


__all__ = [
    "Weekday",
    "Zone",
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
    "prev_beginning_of_day",
    "prev_end_of_day",
    "add_second",
    "add_minute",
    "add_hour",
    "add_day",
    "load_zone",
    "set_timezone",
    "adjust_timezone",
    "is_leap_year",
    "is_leap_year_from_timestamp",
    "quarter_of",
    "is_within_tolerance",
    "weekdays_in_range",
    "since_hour",
    "since_minute",
    "since_second",
    "decompose_to_fields",
]

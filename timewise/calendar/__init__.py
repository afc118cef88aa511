"""Calendar module for period-boundary arithmetic.

Pure functions over ``datetime`` values: beginning/end of minute, hour, day,
week, month, quarter, half and year, plus shifting, timezone conversion,
weekday ranges and leap-year checks.

Examples:
    >>> from datetime import datetime
    >>> from timewise.calendar import beginning_of_week, end_of_week, Weekday
    >>>
    >>> wed = datetime(2024, 3, 20, 14, 30)
    >>> beginning_of_week(wed, Weekday.MONDAY)
    datetime.datetime(2024, 3, 18, 0, 0)
    >>> end_of_week(wed, Weekday.MONDAY)
    datetime.datetime(2024, 3, 24, 23, 59, 59, 999999)
"""

from timewise.calendar.calendarmath import (
    Weekday,
    ONE_MICROSECOND,
    Zone,
    beginning_of_minute,
    beginning_of_hour,
    beginning_of_day,
    beginning_of_week,
    beginning_of_month,
    beginning_of_quarter,
    beginning_of_half,
    beginning_of_year,
    end_of_minute,
    end_of_hour,
    end_of_day,
    end_of_week,
    end_of_month,
    end_of_quarter,
    end_of_half,
    end_of_year,
    prev_beginning_of_day,
    prev_end_of_day,
    add_second,
    add_minute,
    add_hour,
    add_day,
    load_zone,
    set_timezone,
    adjust_timezone,
    is_leap_year,
    is_leap_year_from_timestamp,
    quarter_of,
    is_within_tolerance,
    weekdays_in_range,
    since_hour,
    since_minute,
    since_second,
    decompose_to_fields,
)

__all__ = [
    "Weekday",
    "ONE_MICROSECOND",
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

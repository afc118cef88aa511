"""Timewise - Calendar Boundaries and Tolerant Time Parsing

Public API for period boundaries, weekday lookups, tolerant parsing,
formatting, relative time phrases and timezone helpers.

Usage:
    from timewise import Rule, Weekday, Timex
    from timewise import beginning_of_week, parse, time_ago, zone_identifier

    # Boundaries of an explicit timestamp (or of now when omitted)
    start = beginning_of_month(datetime(2024, 3, 15))  # datetime(2024, 3, 1, 0, 0)

    # Configure week start, zone and layouts, then bind a timestamp
    rule = Rule().set_week_start_day(Weekday.MONDAY).set_location_by_name("UTC")
    t = rule.with_time(datetime(2024, 3, 20, 14, 30, tzinfo=tz.UTC))
    t.beginning_of_week()  # 2024-03-18 00:00:00+00:00

    # Tolerant parsing: missing components come from the reference
    t.parse("13:15")       # 2024-03-20 13:15:00+00:00
    parse("nonsense")      # None

    # Human phrases
    time_ago(datetime.now() - timedelta(minutes=5))  # '5 minutes ago'

    # Zone names
    zone_identifier("Saigon")  # 'Asia/Ho_Chi_Minh'
"""

__version__ = "0.0.1"

# ============================================================================
# Errors
# ============================================================================

from .exceptions import (
    TimewiseError,          # Base class (a ValueError)
    ParseError,             # No layout matched the candidate strings
    UnknownTimezoneError,   # Zone name not in the IANA database
)

# ============================================================================
# Calendar Math
# ============================================================================
# Boundary functions are exported from nowapi below (``v`` optional there).
# Explicit week start days: timewise.calendar.beginning_of_week(v, day)

from .calendar.calendarmath import (
    Weekday,                     # IntEnum, Monday=0 ... Sunday=6
    ONE_MICROSECOND,             # Smallest representable step
    prev_beginning_of_day,       # Midnight N days back
    prev_end_of_day,             # Last microsecond N days back
    add_second,                  # Absolute shifts
    add_minute,
    add_hour,
    add_day,
    load_zone,                   # IANA name -> tzinfo (raises)
    set_timezone,                # Convert to zone (raises)
    adjust_timezone,             # Convert to zone (unchanged on failure)
    is_leap_year,
    is_leap_year_from_timestamp,
    quarter_of,
    is_within_tolerance,
    weekdays_in_range,           # Mon-Fri dates between two timestamps
    since_hour,
    since_minute,
    since_second,
    decompose_to_fields,         # [microsecond, second, ..., year]
)

# ============================================================================
# Configuration
# ============================================================================

from .rule.ruleconfig import (
    Rule,           # Week start day, location, layouts
    default_rule,   # Fresh Rule from defaults + TIMEWISE_* env vars
)

from .rule.rulelayouts import (
    TIME_FORMATS,
    DEFAULT_FORMAT,
    FORMAT_ISO,
    FORMAT_ISO_MICRO,
    FORMAT_DATETIME,
    FORMAT_DATE,
    CLOCK_HM_COLON,
    CLOCK_COLON,
)

# ============================================================================
# Timestamp Wrapper and Convenience Entry Points
# ============================================================================

from .timex.timexapi import Timex

from .timex.nowapi import (
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
    monday,
    tuesday,
    wednesday,
    thursday,
    friday,
    saturday,
    sunday,
    end_of_sunday,
    quarter,
    parse,                    # None on failure
    must_parse,               # ParseError on failure
    parse_in_location,
    must_parse_in_location,
    between,
    format_rfc,
    format_rfc_short,
    default_format,
    time_ago,
    time_until,
)

# ============================================================================
# Zones
# ============================================================================

from .zones.zoneapi import (
    zone_identifier,   # Loose city/zone name -> IANA identifier
    match_zone,        # Top-K candidates with scores
    list_zones,        # City table as a DataFrame
)

__all__ = [
    # Errors
    "TimewiseError",
    "ParseError",
    "UnknownTimezoneError",
    # Calendar math
    "Weekday",
    "ONE_MICROSECOND",
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
    # Configuration
    "Rule",
    "default_rule",
    "TIME_FORMATS",
    "DEFAULT_FORMAT",
    "FORMAT_ISO",
    "FORMAT_ISO_MICRO",
    "FORMAT_DATETIME",
    "FORMAT_DATE",
    "CLOCK_HM_COLON",
    "CLOCK_COLON",
    # Timestamp wrapper
    "Timex",
    # Convenience entry points
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
    # Zones
    "zone_identifier",
    "match_zone",
    "list_zones",
]

"""Layout Tables
-------------

Built-in ``strftime``/``strptime`` layouts accepted by the tolerant parser
and offered for formatting.

  - ``TIME_FORMATS``: default parse order (first match wins)
  - ``FORMAT_*``: named date-time layouts
  - ``CLOCK_*``: clock-only layouts
  - ``DEFAULT_FORMAT``: layout used by ``default_format()``

A ``%Z`` zone name of UTC or GMT yields a UTC value. Other zone
abbreviations are matched but carry no offset, so the value takes the
parser's current location.

Examples:
  >>> from datetime import datetime
  >>> datetime(2024, 3, 15, 10, 5).strftime(FORMAT_DATETIME)
  '2024-03-15 10:05:00'

  >>> datetime(2024, 3, 15, 10, 5).strftime(CLOCK_HM_DOT)
  '10.05'
"""

# ---- Named date-time layouts ----

FORMAT_ISO_MICRO = "%Y-%m-%dT%H:%M:%S.%f"
FORMAT_ISO = "%Y-%m-%dT%H:%M:%S"
FORMAT_DATETIME = "%Y-%m-%d %H:%M:%S"
FORMAT_DATETIME_DMY_DASH = "%d-%m-%Y %H:%M:%S"
FORMAT_DATETIME_DMY_SLASH = "%d/%m/%Y %H:%M:%S"
FORMAT_DATETIME_MICRO = "%Y-%m-%d %H:%M:%S.%f"
FORMAT_DATETIME_MICRO_OFFSET = "%Y-%m-%d %H:%M:%S.%f %z"
FORMAT_DATE = "%Y-%m-%d"
FORMAT_DATE_DMY_SLASH = "%d/%m/%Y"
FORMAT_DATETIME_MINUTE = "%Y-%m-%d %H:%M"
FORMAT_DATETIME_HOUR = "%Y-%m-%d %H"
FORMAT_YEAR_MONTH = "%Y-%m"
FORMAT_DATE_DMY_DASH = "%d-%m-%Y"
FORMAT_DATE_MDY_DASH = "%m-%d-%Y"
FORMAT_DATETIME_OFFSET = "%Y-%m-%d %H:%M:%S %z"
FORMAT_ISO_OFFSET = "%Y-%m-%dT%H:%M:%S%z"
FORMAT_DATETIME_UTC_OFFSET = "%Y-%m-%d %H:%M:%S UTC%z"
FORMAT_ISO_UTC_OFFSET = "%Y-%m-%dT%H:%M:%SUTC%z"
FORMAT_RFC1123Z = "%a, %d %b %Y %H:%M:%S %z"

# ---- Clock-only layouts ----

CLOCK_COLON = "%H:%M:%S"
CLOCK_DOT = "%H.%M.%S"
CLOCK_DASH = "%H-%M-%S"
CLOCK_SLASH = "%H/%M/%S"
CLOCK_SPACE = "%H %M %S"
CLOCK_COMPACT = "%H%M%S"
CLOCK_HM_COLON = "%H:%M"
CLOCK_HM_DOT = "%H.%M"
CLOCK_HM_DASH = "%H-%M"
CLOCK_HM_SLASH = "%H/%M"
CLOCK_HM_COMPACT = "%H%M"

DEFAULT_FORMAT = FORMAT_DATETIME

# ---- Default parse order ----

TIME_FORMATS = (
    "%Y",                          # 2023
    "%Y-%m",                       # 2023-8
    "%Y-%m-%d",                    # 2023-8-15
    "%Y-%m-%d %H",                 # 2023-8-15 13
    "%Y-%m-%d %H:%M",              # 2023-8-15 13:45
    "%Y-%m-%d %H:%M:%S",           # 2023-8-15 13:45:30
    "%m-%d",                       # 8-15
    "%H:%M:%S",                    # 13:45:30
    "%H:%M",                       # 13:45
    "%H",                          # 13
    "%H:%M:%S %b %d, %Y %Z",       # 13:45:30 Aug 15, 2023 UTC
    "%Y-%m-%d %H:%M:%S.%f%z",      # 2023-08-15 13:45:30.123456+07:00 (str(datetime))
    "%Y-%m-%d %H:%M:%S%z",         # 2023-08-15 13:45:30+07:00
    "%Y-%m-%d %H:%M:%S.%f",        # 2023-08-15 13:45:30.123456
    "%Y-%m-%dT%H:%M:%S%z",         # 2023-08-15T13:45:30+0700, 2023-08-15T13:45:30Z
    "%Y.%m.%d",                    # 2023.8.15
    "%Y.%m.%d %H:%M:%S",           # 2023.8.15 13:45:30
    "%Y.%m.%d %H:%M:%S.%f",        # 2023.08.15 13:45:30.123456
    "%m/%d/%Y",                    # 8/15/2023
    "%m/%d/%Y %H:%M:%S",           # 8/15/2023 13:45:30
    "%Y/%m/%d",                    # 2023/08/15
    "%Y%m%d",                      # 20230815
    "%Y/%m/%d %H:%M:%S",           # 2023/08/15 13:45:30
    "%a %b %d %H:%M:%S %Y",        # ANSI C: Tue Aug 15 13:45:30 2023
    "%a %b %d %H:%M:%S %Z %Y",     # Unix date: Tue Aug 15 13:45:30 UTC 2023
    "%a %b %d %H:%M:%S %z %Y",     # Ruby date: Tue Aug 15 13:45:30 +0700 2023
    "%d %b %y %H:%M %Z",           # RFC 822: 15 Aug 23 13:45 UTC
    "%d %b %y %H:%M %z",           # RFC 822 numeric zone: 15 Aug 23 13:45 +0700
    "%A, %d-%b-%y %H:%M:%S %Z",    # RFC 850: Tuesday, 15-Aug-23 13:45:30 UTC
    "%a, %d %b %Y %H:%M:%S %Z",    # RFC 1123: Tue, 15 Aug 2023 13:45:30 UTC
    "%a, %d %b %Y %H:%M:%S %z",    # RFC 1123 numeric zone: Tue, 15 Aug 2023 13:45:30 +0700
    "%Y-%m-%dT%H:%M:%S.%f%z",      # RFC 3339 fractional: 2023-08-15T13:45:30.123456Z
    "%I:%M%p",                     # Kitchen: 1:45PM
    "%b %d %H:%M:%S",              # Stamp: Aug 15 13:45:30
    "%b %d %H:%M:%S.%f",           # Stamp with fraction: Aug 15 13:45:30.123
)


__all__ = [
    "TIME_FORMATS",
    "DEFAULT_FORMAT",
    "FORMAT_ISO_MICRO",
    "FORMAT_ISO",
    "FORMAT_DATETIME",
    "FORMAT_DATETIME_DMY_DASH",
    "FORMAT_DATETIME_DMY_SLASH",
    "FORMAT_DATETIME_MICRO",
    "FORMAT_DATETIME_MICRO_OFFSET",
    "FORMAT_DATE",
    "FORMAT_DATE_DMY_SLASH",
    "FORMAT_DATETIME_MINUTE",
    "FORMAT_DATETIME_HOUR",
    "FORMAT_YEAR_MONTH",
    "FORMAT_DATE_DMY_DASH",
    "FORMAT_DATE_MDY_DASH",
    "FORMAT_DATETIME_OFFSET",
    "FORMAT_ISO_OFFSET",
    "FORMAT_DATETIME_UTC_OFFSET",
    "FORMAT_ISO_UTC_OFFSET",
    "FORMAT_RFC1123Z",
    "CLOCK_COLON",
    "CLOCK_DOT",
    "CLOCK_DASH",
    "CLOCK_SLASH",
    "CLOCK_SPACE",
    "CLOCK_COMPACT",
    "CLOCK_HM_COLON",
    "CLOCK_HM_DOT",
    "CLOCK_HM_DASH",
    "CLOCK_HM_SLASH",
    "CLOCK_HM_COMPACT",
]

"""Parse Text Classification
-------------------------

Helpers that inspect candidate strings and layouts before parsing.

Examples:
  >>> has_time("2023-08-15 13:45")
  True

  >>> only_time("13:45")
  True

  >>> only_time("2023-08-15 13:45")
  False

  >>> layout_has_year("%H:%M")
  False
"""

import re

# A clock component: "13", "13:45", "13:45:30", "13:45:30.123456", preceded by
# whitespace, the start of the string or an ISO "T", and followed by the end
# of the string or an offset marker.
HAS_TIME_PATTERN = re.compile(
    r"(\s+|^\s*|T)\d{1,2}((:\d{1,2})*|((:\d{1,2}){2}\.(\d{3}|\d{6}|\d{9})))(\s*$|[Z+-])"
)

# The whole string is a clock component and nothing else.
ONLY_TIME_PATTERN = re.compile(
    r"^\s*\d{1,2}((:\d{1,2})*|((:\d{1,2}){2}\.(\d{3}|\d{6}|\d{9})))\s*$"
)

_YEAR_DIRECTIVE = re.compile(r"%[YyG]")

# Zone names strptime accepts for %Z that pin the value to UTC.
_UTC_NAME = re.compile(r"\b(?:UTC|GMT)\b", re.IGNORECASE)


def normalize_candidate(text: str) -> str:
    """
    Strip surrounding whitespace from a candidate string.

    Args:
        text: Raw candidate string

    Returns:
        Candidate ready for layout matching ("" for None)
    """
    if not text:
        return ""
    return text.strip()


def has_time(text: str) -> bool:
    """True if ``text`` carries a time-of-day component."""
    return HAS_TIME_PATTERN.search(text) is not None


def only_time(text: str) -> bool:
    """True if ``text`` is a time of day with no date component."""
    return ONLY_TIME_PATTERN.match(text) is not None


def layout_has_year(layout: str) -> bool:
    """
    True if the ``strptime`` layout contains a year directive.

    Examples:
        >>> layout_has_year("%Y-%m-%d")
        True

        >>> layout_has_year("%m-%d")
        False

        >>> layout_has_year("100%%Y")
        False
    """
    return _YEAR_DIRECTIVE.search(layout.replace("%%", "")) is not None


def names_utc(text: str, layout: str) -> bool:
    """
    True if ``layout`` reads a zone name and ``text`` names UTC or GMT.

    ``strptime`` matches these names for ``%Z`` but returns a naive value.
    Other zone abbreviations are ambiguous and are not resolved.

    Examples:
        >>> names_utc("15 Aug 23 13:45 GMT", "%d %b %y %H:%M %Z")
        True

        >>> names_utc("2023-08-15 13:45:30 UTC+0700", "%Y-%m-%d %H:%M:%S UTC%z")
        False
    """
    return "%Z" in layout.replace("%%", "") and _UTC_NAME.search(text) is not None


__all__ = [
    "HAS_TIME_PATTERN",
    "ONLY_TIME_PATTERN",
    "normalize_candidate",
    "has_time",
    "only_time",
    "layout_has_year",
    "names_utc",
]

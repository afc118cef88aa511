"""Exceptions raised by timewise.

All errors derive from ``TimewiseError`` (itself a ``ValueError``) so callers
can catch library failures with a single clause.
"""

from typing import Sequence


class TimewiseError(ValueError):
    """Base class for timewise errors."""


class ParseError(TimewiseError):
    """No configured layout matched the candidate string(s)."""

    def __init__(self, strings: Sequence[str], layouts: int = 0):
        self.strings = tuple(strings)
        self.layouts = layouts
        if len(self.strings) == 1:
            subject = repr(self.strings[0])
        else:
            subject = ", ".join(repr(s) for s in self.strings) or "<no input>"
        super().__init__(f"Can't parse string as time: {subject} (tried {layouts} layouts)")


class UnknownTimezoneError(TimewiseError):
    """Timezone name could not be resolved against the IANA database."""

    def __init__(self, zone):
        self.zone = zone
        super().__init__(f"Unknown time zone: {zone!r}")


__all__ = [
    "TimewiseError",
    "ParseError",
    "UnknownTimezoneError",
]

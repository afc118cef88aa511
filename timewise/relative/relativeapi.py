"""Relative time phrases.

Maps the distance between a timestamp and now to a coarse human phrase
("just now", "5 minutes ago", "in 2 days") through an ordered threshold
table. The first row whose bound exceeds the elapsed quantity wins.
"""

from datetime import datetime, timedelta
from typing import Optional

# (unit, exclusive bound, divisor, ago phrase, until phrase)
# Phrases are formatted with n = quantity in unit // divisor.
_THRESHOLDS = (
    ("seconds", 60, 1, "just now", "in a few seconds"),
    ("minutes", 2, 1, "1 minute ago", "in 1 minute"),
    ("minutes", 60, 1, "{n} minutes ago", "in {n} minutes"),
    ("hours", 2, 1, "1 hour ago", "in 1 hour"),
    ("hours", 24, 1, "{n} hours ago", "in {n} hours"),
    ("days", 2, 1, "1 day ago", "in 1 day"),
    ("days", 7, 1, "{n} days ago", "in {n} days"),
    ("days", 14, 1, "1 week ago", "in 1 week"),
    ("days", 30, 7, "{n} weeks ago", "in {n} weeks"),
    ("days", 60, 1, "1 month ago", "in 1 month"),
    ("days", 365, 30, "{n} months ago", "in {n} months"),
    ("days", 730, 1, "1 year ago", "in 1 year"),
)
_BEYOND = ("days", 365, "{n} years ago", "in {n} years")

_SECONDS_PER_UNIT = {
    "seconds": 1,
    "minutes": 60,
    "hours": 3600,
    "days": 86400,
}


def _quantity(delta: timedelta, unit: str) -> int:
    # int() truncates toward zero for negative durations too.
    return int(delta.total_seconds() / _SECONDS_PER_UNIT[unit])


def _phrase(delta: timedelta, column: int) -> str:
    for unit, bound, divisor, *phrases in _THRESHOLDS:
        quantity = _quantity(delta, unit)
        if quantity < bound:
            return phrases[column].format(n=quantity // divisor)
    unit, divisor, *phrases = _BEYOND
    return phrases[column].format(n=_quantity(delta, unit) // divisor)


def time_ago(v: datetime, *, now: Optional[datetime] = None) -> str:
    """
    Describe how long ago ``v`` was.

    Args:
        v: Past timestamp
        now: Comparison instant (default: current time in the tzinfo of ``v``)

    Returns:
        Phrase such as "just now", "5 minutes ago", "2 weeks ago"

    Examples:
        >>> now = datetime(2024, 3, 20, 12, 0)
        >>> time_ago(datetime(2024, 3, 20, 11, 55), now=now)
        '5 minutes ago'

        >>> time_ago(datetime(2024, 3, 5, 12, 0), now=now)
        '2 weeks ago'
    """
    if now is None:
        now = datetime.now(v.tzinfo)
    return _phrase(now - v, 0)


def time_until(v: datetime, *, now: Optional[datetime] = None) -> str:
    """
    Describe how far in the future ``v`` is.

    A timestamp already passed yields "in the past".

    Examples:
        >>> now = datetime(2024, 3, 20, 12, 0)
        >>> time_until(datetime(2024, 3, 22, 12, 0, 2), now=now)
        'in 2 days'

        >>> time_until(datetime(2024, 3, 20, 11, 0), now=now)
        'in the past'
    """
    if now is None:
        now = datetime.now(v.tzinfo)
    delta = v - now
    if delta < timedelta(0):
        return "in the past"
    return _phrase(delta, 1)


__all__ = [
    "time_ago",
    "time_until",
]

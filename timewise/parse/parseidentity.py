"""Tolerant Date/Time Parsing
--------------------------

Core parser that turns one or more loosely formatted strings into a
``datetime`` by trying an ordered list of layouts and back-filling the
components a string leaves out from a reference timestamp.

Candidates are folded left to right through an immutable
``ParseAccumulator``. Each successful candidate becomes the reference for
the next one, so callers can pass a full string ("2024-03-15 13:15") or
compose fragments ("2024", then "3-15").

Key Design Principles:
  1. First layout that parses wins; layout order is significant
  2. A string that carries a clock time keeps its clock fields verbatim
  3. A time-only input never moves the calendar date
  4. A candidate no layout accepts contributes nothing
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, tzinfo
from functools import reduce
from typing import Optional, Sequence

try:
    from dateutil import tz
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from timewise.calendar.calendarmath import decompose_to_fields
from timewise.exceptions import ParseError
from timewise.parse.parsenormalize import (
    normalize_candidate,
    has_time,
    only_time,
    layout_has_year,
    names_utc,
)

logger = logging.getLogger(__name__)

# Field indices in decompose_to_fields() order.
FIELD_MICROSECOND = 0
FIELD_SECOND = 1
FIELD_MINUTE = 2
FIELD_HOUR = 3
FIELD_DAY = 4
FIELD_MONTH = 5
FIELD_YEAR = 6

# Year-less layouts are parsed against a leap year so "2-29" is accepted.
_PLACEHOLDER_YEAR = 1904


def parse_with_layouts(
    text: str,
    layouts: Sequence[str],
    location: Optional[tzinfo],
) -> Optional[tuple[datetime, list[int]]]:
    """
    Parse ``text`` with the first layout that accepts it.

    Values without an explicit offset are placed in ``location``, except
    that a ``%Z`` zone name of UTC or GMT places them in UTC. Layouts
    that carry no year report year 0 in the returned fields, marking the
    year as unset.

    Args:
        text: Candidate string
        layouts: strptime layouts, tried in order
        location: tzinfo for offset-less values (None keeps them naive)

    Returns:
        (parsed datetime, seven decomposed fields) or None if no layout matched

    Examples:
        >>> parse_with_layouts("13:15", ["%Y-%m-%d", "%H:%M"], None)[1]
        [0, 0, 15, 13, 1, 1, 0]
    """
    for layout in layouts:
        with_year = layout_has_year(layout)
        try:
            if with_year:
                parsed = datetime.strptime(text, layout)
            else:
                parsed = datetime.strptime(f"{_PLACEHOLDER_YEAR} {text}", f"%Y {layout}")
        except ValueError:
            continue

        if parsed.tzinfo is None and names_utc(text, layout):
            parsed = parsed.replace(tzinfo=tz.UTC)
        elif parsed.tzinfo is None and location is not None:
            parsed = parsed.replace(tzinfo=location)

        fields = decompose_to_fields(parsed)
        if not with_year:
            fields[FIELD_YEAR] = 0
        return parsed, fields

    return None


def merge_fields(
    parsed: Sequence[int],
    reference: Sequence[int],
    *,
    has_time: bool,
    only_time: bool,
    set_current_time: bool,
) -> tuple[list[int], bool]:
    """
    Back-fill unset parsed fields from the reference.

    Walks the seven fields from microsecond to year:
      - Clock fields (microsecond..hour) are kept verbatim when the string
        carried a time
      - A zero field takes the reference value once an earlier non-zero
        field has been seen (in this or a previous candidate)
      - A non-zero field is kept and switches back-filling on
      - Day and month always come from the reference while every candidate
        so far was time-only

    Args:
        parsed: Fields of the newly parsed value
        reference: Fields of the running reference
        has_time: The candidate carried a time of day
        only_time: Every candidate so far was time-only
        set_current_time: Back-filling already switched on

    Returns:
        (merged fields, updated set_current_time)

    Examples:
        >>> merge_fields([0, 0, 15, 13, 1, 1, 0], [0, 0, 0, 10, 15, 3, 2024],
        ...              has_time=True, only_time=True, set_current_time=False)
        ([0, 0, 15, 13, 15, 3, 2024], True)
    """
    merged = list(parsed)
    for i, value in enumerate(merged):
        if has_time and i <= FIELD_HOUR:
            continue

        if value == 0:
            if set_current_time:
                merged[i] = reference[i]
        else:
            set_current_time = True

        if only_time and i in (FIELD_DAY, FIELD_MONTH):
            merged[i] = reference[i]

    return merged, set_current_time


def build_from_fields(fields: Sequence[int], location: Optional[tzinfo]) -> datetime:
    """
    Rebuild a datetime from seven fields.

    A day past the end of the month rolls forward into the next month
    (Feb 30 becomes Mar 1 or Mar 2).
    """
    base = datetime(
        fields[FIELD_YEAR],
        fields[FIELD_MONTH],
        1,
        fields[FIELD_HOUR],
        fields[FIELD_MINUTE],
        fields[FIELD_SECOND],
        fields[FIELD_MICROSECOND],
        tzinfo=location,
    )
    return base + timedelta(days=fields[FIELD_DAY] - 1)


@dataclass(frozen=True)
class ParseAccumulator:
    """State threaded through the candidate strings."""

    reference: tuple[int, ...]
    location: Optional[tzinfo]
    set_current_time: bool = False
    only_time: bool = True
    result: Optional[datetime] = None
    failed: tuple[str, ...] = ()

    @classmethod
    def start(cls, reference: datetime) -> ParseAccumulator:
        return cls(reference=tuple(decompose_to_fields(reference)), location=reference.tzinfo)

    def absorb(self, text: str, layouts: Sequence[str]) -> ParseAccumulator:
        """Fold one candidate string into the state."""
        text = normalize_candidate(text)
        text_has_time = has_time(text)
        still_only_time = text_has_time and self.only_time and only_time(text)

        match = parse_with_layouts(text, layouts, self.location)
        if match is None:
            logger.debug(f"No layout matched {text!r} ({len(layouts)} tried)")
            return replace(self, only_time=still_only_time, failed=self.failed + (text,))

        parsed, fields = match
        merged, set_current_time = merge_fields(
            fields,
            self.reference,
            has_time=text_has_time,
            only_time=still_only_time,
            set_current_time=self.set_current_time,
        )
        value = build_from_fields(merged, parsed.tzinfo)

        return replace(
            self,
            reference=tuple(decompose_to_fields(value)),
            location=value.tzinfo,
            set_current_time=set_current_time,
            only_time=still_only_time,
            result=value,
        )


def fold_candidates(
    reference: datetime,
    strings: Sequence[str],
    layouts: Sequence[str],
) -> ParseAccumulator:
    """Run every candidate through a ParseAccumulator seeded from ``reference``."""
    return reduce(
        lambda state, text: state.absorb(text, layouts),
        strings,
        ParseAccumulator.start(reference),
    )


def parse(
    reference: datetime,
    strings: Sequence[str],
    layouts: Sequence[str],
) -> Optional[datetime]:
    """
    Parse candidate strings against ``reference``.

    Args:
        reference: Timestamp that supplies missing components
        strings: Candidate strings, most general first
        layouts: strptime layouts, tried in order for each candidate

    Returns:
        Last successfully merged datetime, or None if no candidate parsed

    Examples:
        >>> ref = datetime(2024, 3, 15, 10, 0)
        >>> parse(ref, ["13:15"], ["%Y-%m-%d", "%H:%M"])
        datetime.datetime(2024, 3, 15, 13, 15)

        >>> parse(ref, ["2023-10-25"], ["%Y-%m-%d"])
        datetime.datetime(2023, 10, 25, 0, 0)
    """
    return fold_candidates(reference, strings, layouts).result


def must_parse(
    reference: datetime,
    strings: Sequence[str],
    layouts: Sequence[str],
) -> datetime:
    """
    Like ``parse`` but raises when no candidate parsed.

    Raises:
        ParseError: Naming the candidate strings that failed
    """
    state = fold_candidates(reference, strings, layouts)
    if state.result is None:
        raise ParseError(state.failed or tuple(strings), len(layouts))
    return state.result


__all__ = [
    "ParseAccumulator",
    "parse_with_layouts",
    "merge_fields",
    "build_from_fields",
    "fold_candidates",
    "parse",
    "must_parse",
]

"""Parse module for tolerant multi-layout date/time parsing.

Public API:
    parse(reference, strings, layouts) -> datetime | None
        Fold candidate strings into one datetime, back-filling from reference

    must_parse(reference, strings, layouts) -> datetime
        Same, raising ParseError when nothing parses

    merge_fields(parsed, reference, *, has_time, only_time, set_current_time)
        The field back-fill rule on its own

Examples:
    >>> from datetime import datetime
    >>> from timewise.parse import parse
    >>> from timewise.rule import TIME_FORMATS
    >>>
    >>> ref = datetime(2024, 3, 15, 10, 0)
    >>> parse(ref, ["13:15"], TIME_FORMATS)
    datetime.datetime(2024, 3, 15, 13, 15)
    >>> parse(ref, ["2023", "8-15"], TIME_FORMATS)
    datetime.datetime(2023, 8, 15, 0, 0)
"""

from timewise.parse.parseidentity import (
    ParseAccumulator,
    parse_with_layouts,
    merge_fields,
    build_from_fields,
    fold_candidates,
    parse,
    must_parse,
)
from timewise.parse.parsenormalize import (
    normalize_candidate,
    has_time,
    only_time,
    layout_has_year,
    names_utc,
)

__all__ = [
    "ParseAccumulator",
    "parse_with_layouts",
    "merge_fields",
    "build_from_fields",
    "fold_candidates",
    "parse",
    "must_parse",
    "normalize_candidate",
    "has_time",
    "only_time",
    "layout_has_year",
    "names_utc",
]

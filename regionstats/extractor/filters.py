"""Region, measure, and year filters shared by every parser.

Filters are immutable values built by the caller and only read by parsers.

Region filter
    Set of lowercase tokens. Empty matches everything. A candidate matches
    when its code equals a token or any lowercased name contains a token.
    One matching token is enough.
Measure filter
    Set of lowercase measure codes. Empty matches everything. Exact match.
Year filter
    Inclusive ``(start, end)`` range; ``(0, 0)`` disables year filtering.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, NamedTuple

from regionstats.errors import InvalidArgument

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = [
    "ALL_TOKEN",
    "NO_YEAR_FILTER",
    "StringFilter",
    "YearFilter",
    "make_string_filter",
    "measure_matches",
    "region_matches",
    "year_matches",
]

StringFilter = frozenset[str]

ALL_TOKEN = "all"

_YEAR_RANGE_PATTERN = re.compile(r"^\s*(\d{1,4})\s*(?:-\s*(\d{1,4})\s*)?$")


class YearFilter(NamedTuple):
    """Closed inclusive year range; ``(0, 0)`` means import all years."""

    start: int = 0
    end: int = 0

    @property
    def active(self) -> bool:
        """``True`` unless both bounds are the ``0`` sentinel."""
        return not (self.start == 0 and self.end == 0)

    def contains(self, year: int) -> bool:
        """Return ``True`` if ``year`` passes this filter."""
        return not self.active or self.start <= year <= self.end

    @classmethod
    def parse(cls, text: str) -> YearFilter:
        """Parse ``"YYYY"``, ``"YYYY-ZZZZ"``, or ``"0"``.

        Raises
        ------
        InvalidArgument
            If the text is not a year or year range, or the range is reversed.

        Examples
        --------
        >>> YearFilter.parse("1991-1993")
        YearFilter(start=1991, end=1993)
        >>> YearFilter.parse("0")
        YearFilter(start=0, end=0)
        """
        match = _YEAR_RANGE_PATTERN.match(text)
        if not match:
            msg = f"Invalid input for years argument: {text!r}"
            raise InvalidArgument(msg)

        start = int(match.group(1))
        end = int(match.group(2)) if match.group(2) is not None else start
        if start > end:
            msg = f"Invalid input for years argument: start {start} is after end {end}"
            raise InvalidArgument(msg)
        return cls(start, end)


NO_YEAR_FILTER = YearFilter(0, 0)


def make_string_filter(tokens: Iterable[str] | None) -> StringFilter:
    """Build a lowercase token filter.

    Blank tokens are dropped; the token ``all`` anywhere yields the empty
    (match everything) filter.
    """
    if tokens is None:
        return frozenset()

    cleaned = {token.strip().lower() for token in tokens if token.strip()}
    if ALL_TOKEN in cleaned:
        return frozenset()
    return frozenset(cleaned)


def region_matches(region_filter: StringFilter | None, code: str, *names: str) -> bool:
    """Apply the region filter to a code and its names.

    Codes are compared whole (case-insensitively); names are lowercased and
    searched for each token as a substring.
    """
    if not region_filter:
        return True

    code_lower = code.lower()
    lowered_names = [name.lower() for name in names if name]
    for token in region_filter:
        if code_lower == token:
            return True
        if any(token in name for name in lowered_names):
            return True
    return False


def measure_matches(measure_filter: StringFilter | None, code: str) -> bool:
    """Apply the measure filter to a measure code (case-insensitive, exact)."""
    if not measure_filter:
        return True
    return code.lower() in measure_filter


def year_matches(year_filter: YearFilter | None, year: int) -> bool:
    """Apply the year filter; ``None`` behaves like the ``(0, 0)`` sentinel."""
    if year_filter is None:
        return True
    return year_filter.contains(year)

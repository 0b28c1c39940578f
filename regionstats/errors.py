"""Exception types raised by the regionstats pipeline.

Each class also derives from the built-in exception a caller would expect
(``ValueError``, ``KeyError``, ``OSError``) so generic handlers keep working.
"""

from __future__ import annotations

__all__ = [
    "InvalidArgument",
    "LookupFailure",
    "MissingColumnError",
    "ParseError",
    "RegionStatsError",
    "SourceOpenError",
    "UnknownFormatError",
]


class RegionStatsError(Exception):
    """Base class for all regionstats errors."""


class ParseError(RegionStatsError, ValueError):
    """A source stream is structurally malformed or unreadable."""


class MissingColumnError(RegionStatsError, KeyError):
    """A column role required by a source format is absent from the mapping."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class LookupFailure(RegionStatsError, KeyError):
    """A region, measure, language, or year is not stored in the model."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class InvalidArgument(RegionStatsError, ValueError):
    """An argument failed validation (e.g., a malformed language tag)."""


class UnknownFormatError(RegionStatsError, ValueError):
    """The source format tag is not supported."""


class SourceOpenError(RegionStatsError, OSError):
    """An input source could not be opened for reading."""

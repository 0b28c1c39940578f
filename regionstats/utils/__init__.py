"""Shared utility functions for regionstats package."""

from regionstats.utils.parsing import (
    parse_number,
    parse_year,
    split_line,
)

__all__ = [
    "parse_number",
    "parse_year",
    "split_line",
]

"""Extractor module: source parsers, filters, and column mappings.

Submodules
----------
columns
    Source format tags, column roles, and typed field extraction.
filters
    Region, measure, and year filters shared by every parser.
reference_parser
    Reference CSV of region codes with English and Welsh names.
wide_parser
    Single-measure CSV with one column per year.
json_parser
    Row-oriented JSON tables (one observation per row).
populate
    Dispatch on a format tag to the matching parser.

Every parser upserts into a :class:`~regionstats.model.RegionCollection`
through ``set_region`` and returns the number of records imported.
"""

from regionstats.extractor.columns import (
    ColumnMapping,
    SourceColumn,
    SourceFormat,
    mapping_from_config,
)
from regionstats.extractor.filters import (
    NO_YEAR_FILTER,
    StringFilter,
    YearFilter,
    make_string_filter,
)
from regionstats.extractor.json_parser import populate_from_welsh_stats_json
from regionstats.extractor.populate import populate, resolve_format
from regionstats.extractor.reference_parser import populate_from_authority_code_csv
from regionstats.extractor.wide_parser import populate_from_authority_by_year_csv

__all__ = [
    "NO_YEAR_FILTER",
    "ColumnMapping",
    "SourceColumn",
    "SourceFormat",
    "StringFilter",
    "YearFilter",
    "make_string_filter",
    "mapping_from_config",
    "populate",
    "populate_from_authority_by_year_csv",
    "populate_from_authority_code_csv",
    "populate_from_welsh_stats_json",
    "resolve_format",
]

"""Wide-format parser: one measure per file, one row per region, one column per year.

Input layout::

    AuthorityCode,1991,1992,1993
    W06000001,711.6801,711.6801,711.6801
    ...

The measure code and label are not in the data; they come from the column
mapping (``SINGLE_MEASURE_CODE`` / ``SINGLE_MEASURE_NAME``). Region names are
not in the data either, so the region filter matches against names already
ingested from the reference table, falling back to the code alone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from regionstats.config import setup_logging
from regionstats.errors import ParseError
from regionstats.extractor.columns import SourceColumn, require_columns
from regionstats.extractor.filters import measure_matches, region_matches, year_matches
from regionstats.extractor.stream import iter_data_lines, read_header, stream_name
from regionstats.model import Measure, Region
from regionstats.utils.parsing import parse_number, parse_year, split_line

if TYPE_CHECKING:
    from typing import TextIO

    from regionstats.extractor.columns import ColumnMapping
    from regionstats.extractor.filters import StringFilter, YearFilter
    from regionstats.model import RegionCollection

logger = setup_logging(__name__)


def _parse_year_header(header: str, source: str) -> list[int]:
    """Return the year labels following the code column."""
    years = []
    for label in split_line(header)[1:]:
        year = parse_year(label)
        if year is None:
            msg = f"Error parsing {source}: invalid year label {label!r} in header"
            raise ParseError(msg)
        years.append(year)
    return years


def _parse_row_values(fields: list[str], years: list[int], source: str, line_number: int) -> list[float]:
    if len(fields) != len(years):
        msg = (
            f"Error parsing {source} at line {line_number}: "
            f"expected {len(years)} values, got {len(fields)}"
        )
        raise ParseError(msg)

    values = []
    for year, raw in zip(years, fields, strict=True):
        value = parse_number(raw)
        if value is None:
            msg = f"Error parsing {source} at line {line_number}: non-numeric value {raw!r} for {year}"
            raise ParseError(msg)
        values.append(value)
    return values


def populate_from_authority_by_year_csv(
    stream: TextIO,
    collection: RegionCollection,
    cols: ColumnMapping,
    areas_filter: StringFilter | None = None,
    measures_filter: StringFilter | None = None,
    years_filter: YearFilter | None = None,
) -> int:
    """Import a single-measure wide CSV into ``collection``.

    Parameters
    ----------
    stream
        Open text stream positioned at the header line.
    collection
        Target collection; also consulted for names already known per code.
    cols
        Must define ``SINGLE_MEASURE_CODE`` and ``SINGLE_MEASURE_NAME``.
    areas_filter, measures_filter, years_filter
        Optional filters (see :mod:`regionstats.extractor.filters`). Years
        outside ``years_filter`` are not stored; a row accepted by the area
        and measure filters is upserted even when no years remain.

    Returns
    -------
    int
        Number of rows upserted.

    Raises
    ------
    MissingColumnError
        If the single-measure roles are missing; raised before reading.
    ParseError
        On a malformed header, a column-count mismatch, or a non-numeric value.
        Rows upserted before the failure stay in ``collection``.
    """
    measure_code, measure_label = require_columns(
        cols, SourceColumn.SINGLE_MEASURE_CODE, SourceColumn.SINGLE_MEASURE_NAME,
    )
    measure_code = measure_code.lower()

    source = stream_name(stream)
    years = _parse_year_header(read_header(stream), source)
    accept_measure = measure_matches(measures_filter, measure_code)

    imported = 0
    skipped = 0
    for line_number, line in iter_data_lines(stream):
        fields = split_line(line)
        code = fields[0].strip()
        values = _parse_row_values(fields[1:], years, source, line_number)

        known_names = collection.known_names(code)
        if not accept_measure or not region_matches(areas_filter, code, *known_names.values()):
            skipped += 1
            continue

        measure = Measure(measure_code, measure_label)
        for year, value in zip(years, values, strict=True):
            if year_matches(years_filter, year):
                measure.set_value(year, value)

        if not measure.size():
            logger.debug("No years in range for %s in %s", code, source)

        region = Region(code)
        region.set_measure(measure_code, measure)
        collection.set_region(code, region)
        imported += 1

    logger.info(
        "Imported %d rows of '%s' from %s (%d skipped)", imported, measure_code, source, skipped,
    )
    return imported

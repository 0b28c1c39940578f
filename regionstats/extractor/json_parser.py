"""Row-oriented JSON parser for StatsWales-style tables.

Input layout::

    {
      "odata.metadata": "...",
      "value": [
        {"Localauthority_Code": "W06000001", "Year_Code": "1991", "Data": 711.68, ...},
        ...
      ]
    }

Only ``value`` is read. Each row is one (region, measure, year, value)
observation. Regions keep only the English name; a Welsh name in the row is
used for filter matching and then discarded.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from regionstats.config import setup_logging
from regionstats.errors import MissingColumnError, ParseError
from regionstats.extractor.columns import (
    SourceColumn,
    extract_number,
    extract_text,
    extract_year,
    require_columns,
)
from regionstats.extractor.filters import measure_matches, region_matches, year_matches
from regionstats.extractor.stream import stream_name
from regionstats.model import ENGLISH, Measure, Region

if TYPE_CHECKING:
    from typing import TextIO

    from regionstats.extractor.columns import ColumnMapping
    from regionstats.extractor.filters import StringFilter, YearFilter
    from regionstats.model import RegionCollection

logger = setup_logging(__name__)


@dataclass(frozen=True)
class Observation:
    """One decoded row of a JSON table."""

    code: str
    name_eng: str
    name_cym: str
    measure_code: str
    measure_label: str
    year: int
    value: float


@dataclass(frozen=True)
class _RowReader:
    """Typed extraction of each role from a row, built once per source."""

    code_field: str
    eng_field: str
    year_field: str
    value_field: str
    cym_field: str | None = None
    measure_code_field: str | None = None
    measure_name_field: str | None = None
    constant_code: str | None = None
    constant_label: str | None = None

    @classmethod
    def from_mapping(cls, cols: ColumnMapping) -> _RowReader:
        """Resolve the mapping, failing before any row is read.

        Raises
        ------
        MissingColumnError
            If a required role is absent, or neither a measure-code column
            nor a single-measure constant is configured.
        """
        code_field, eng_field, year_field, value_field = require_columns(
            cols,
            SourceColumn.AUTH_CODE,
            SourceColumn.AUTH_NAME_ENG,
            SourceColumn.YEAR,
            SourceColumn.VALUE,
        )
        cym_field = cols.get(SourceColumn.AUTH_NAME_CYM)

        if SourceColumn.SINGLE_MEASURE_CODE in cols:
            constant_code, constant_label = require_columns(
                cols, SourceColumn.SINGLE_MEASURE_CODE, SourceColumn.SINGLE_MEASURE_NAME,
            )
            return cls(
                code_field, eng_field, year_field, value_field, cym_field,
                constant_code=constant_code, constant_label=constant_label,
            )

        if SourceColumn.MEASURE_CODE not in cols:
            msg = "Not enough columns in mapping, missing: MEASURE_CODE or SINGLE_MEASURE_CODE"
            raise MissingColumnError(msg)
        measure_code_field, measure_name_field = require_columns(
            cols, SourceColumn.MEASURE_CODE, SourceColumn.MEASURE_NAME,
        )
        return cls(
            code_field, eng_field, year_field, value_field, cym_field,
            measure_code_field=measure_code_field, measure_name_field=measure_name_field,
        )

    def read(self, row: Mapping[str, Any]) -> Observation:
        """Extract an :class:`Observation` from ``row``.

        Raises
        ------
        ParseError
            If a field is missing or has the wrong type.
        """
        name_cym = ""
        if self.cym_field is not None and self.cym_field in row:
            name_cym = extract_text(row, self.cym_field, SourceColumn.AUTH_NAME_CYM)

        if self.constant_code is not None:
            measure_code = self.constant_code
            measure_label = self.constant_label or ""
        else:
            measure_code = extract_text(row, self.measure_code_field or "", SourceColumn.MEASURE_CODE)
            measure_label = extract_text(row, self.measure_name_field or "", SourceColumn.MEASURE_NAME)

        return Observation(
            code=extract_text(row, self.code_field, SourceColumn.AUTH_CODE),
            name_eng=extract_text(row, self.eng_field, SourceColumn.AUTH_NAME_ENG),
            name_cym=name_cym,
            measure_code=measure_code.lower(),
            measure_label=measure_label,
            year=extract_year(row, self.year_field, SourceColumn.YEAR),
            value=extract_number(row, self.value_field, SourceColumn.VALUE),
        )


def _load_rows(stream: TextIO) -> list[Any]:
    """Decode the document and return its ``value`` array."""
    source = stream_name(stream)
    try:
        document = json.load(stream)
    except json.JSONDecodeError as e:
        msg = f"Error parsing {source}: invalid JSON ({e})"
        raise ParseError(msg) from e
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Error parsing {source}: could not read stream ({e})"
        raise ParseError(msg) from e

    if not isinstance(document, dict):
        msg = f"Error parsing {source}: top-level JSON value must be an object"
        raise ParseError(msg)

    rows = document.get("value")
    if not isinstance(rows, list):
        msg = f"Error parsing {source}: 'value' must be an array of rows"
        raise ParseError(msg)
    return rows


def populate_from_welsh_stats_json(
    stream: TextIO,
    collection: RegionCollection,
    cols: ColumnMapping,
    areas_filter: StringFilter | None = None,
    measures_filter: StringFilter | None = None,
    years_filter: YearFilter | None = None,
) -> int:
    """Import a row-oriented JSON table into ``collection``.

    Parameters
    ----------
    stream
        Open text stream holding the JSON document.
    collection
        Target collection; Regions are upserted by code.
    cols
        Column mapping. Requires ``AUTH_CODE``, ``AUTH_NAME_ENG``, ``YEAR``,
        ``VALUE`` and either ``MEASURE_CODE``/``MEASURE_NAME`` or the
        ``SINGLE_MEASURE_*`` constants. ``AUTH_NAME_CYM`` is optional.
    areas_filter, measures_filter, years_filter
        Optional filters; a row is imported only when all three accept it.

    Returns
    -------
    int
        Number of rows upserted.

    Raises
    ------
    MissingColumnError
        If the mapping lacks a required role; raised before reading.
    ParseError
        On invalid JSON, a missing ``value`` array, or a mistyped field.
        Rows upserted before the failure stay in ``collection``.
    """
    reader = _RowReader.from_mapping(cols)
    source = stream_name(stream)
    rows = _load_rows(stream)

    imported = 0
    skipped = 0
    for index, row in enumerate(rows):
        if not isinstance(row, Mapping):
            msg = f"Error parsing {source}: row {index} is not an object"
            raise ParseError(msg)
        try:
            obs = reader.read(row)
        except ParseError as e:
            msg = f"Error parsing {source} at row {index}: {e}"
            raise ParseError(msg) from e

        if not (
            region_matches(areas_filter, obs.code, obs.name_eng, obs.name_cym)
            and measure_matches(measures_filter, obs.measure_code)
            and year_matches(years_filter, obs.year)
        ):
            skipped += 1
            continue

        measure = Measure(obs.measure_code, obs.measure_label)
        measure.set_value(obs.year, obs.value)

        region = Region(obs.code)
        region.set_name(ENGLISH, obs.name_eng)
        region.set_measure(obs.measure_code, measure)
        collection.set_region(obs.code, region)
        imported += 1

    logger.info("Imported %d rows from %s (%d filtered out)", imported, source, skipped)
    return imported

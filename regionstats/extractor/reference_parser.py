"""Reference-table parser: region code to English and Welsh names.

Input layout::

    Local authority code,Name (eng),Name (cym)
    W06000001,Isle of Anglesey,Ynys Môn
    ...

Fields are split on commas without quoting support, so a name containing a
comma cannot be represented.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from regionstats.config import setup_logging
from regionstats.errors import ParseError
from regionstats.extractor.filters import region_matches
from regionstats.extractor.stream import iter_data_lines, read_header, stream_name
from regionstats.model import ENGLISH, WELSH, Region
from regionstats.utils.parsing import split_line

if TYPE_CHECKING:
    from typing import TextIO

    from regionstats.extractor.columns import ColumnMapping
    from regionstats.extractor.filters import StringFilter
    from regionstats.model import RegionCollection

logger = setup_logging(__name__)

REFERENCE_FIELD_COUNT = 3


def populate_from_authority_code_csv(
    stream: TextIO,
    collection: RegionCollection,
    cols: ColumnMapping | None = None,
    areas_filter: StringFilter | None = None,
) -> int:
    """Import region names from a reference CSV into ``collection``.

    Parameters
    ----------
    stream
        Open text stream positioned at the header line.
    collection
        Target collection; Regions are upserted by code.
    cols
        Column mapping. The layout is fixed, so it is accepted for a uniform
        parser signature only.
    areas_filter
        Region filter tokens; empty or ``None`` accepts every line.

    Returns
    -------
    int
        Number of Regions upserted.

    Raises
    ------
    ParseError
        If the stream cannot be read or a line does not have three fields.
    """
    source = stream_name(stream)
    read_header(stream)

    imported = 0
    skipped = 0
    for line_number, line in iter_data_lines(stream):
        fields = split_line(line)
        if len(fields) != REFERENCE_FIELD_COUNT:
            msg = (
                f"Error parsing {source} at line {line_number}: "
                f"expected {REFERENCE_FIELD_COUNT} fields, got {len(fields)}"
            )
            raise ParseError(msg)

        code, eng, cym = (field.strip() for field in fields)
        if not region_matches(areas_filter, code, eng, cym):
            skipped += 1
            continue

        region = Region(code)
        region.set_name(ENGLISH, eng)
        region.set_name(WELSH, cym)
        collection.set_region(code, region)
        imported += 1

    logger.info("Imported %d areas from %s (%d filtered out)", imported, source, skipped)
    return imported

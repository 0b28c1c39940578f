"""Format dispatch: pick the parser for a source format tag.

The tag is validated before the stream is touched, so an unsupported format
never consumes input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from regionstats.errors import UnknownFormatError
from regionstats.extractor.columns import SourceFormat
from regionstats.extractor.json_parser import populate_from_welsh_stats_json
from regionstats.extractor.reference_parser import populate_from_authority_code_csv
from regionstats.extractor.wide_parser import populate_from_authority_by_year_csv

if TYPE_CHECKING:
    from typing import TextIO

    from regionstats.extractor.columns import ColumnMapping
    from regionstats.extractor.filters import StringFilter, YearFilter
    from regionstats.model import RegionCollection


def resolve_format(source_format: SourceFormat | str) -> SourceFormat:
    """Return the :class:`SourceFormat` for a tag or enum member.

    Raises
    ------
    UnknownFormatError
        If the tag is unknown or ``SourceFormat.NONE``.
    """
    if isinstance(source_format, SourceFormat):
        resolved = source_format
    else:
        try:
            resolved = SourceFormat(str(source_format).lower())
        except ValueError:
            msg = f"Unexpected data type: {source_format!r}"
            raise UnknownFormatError(msg) from None

    if resolved is SourceFormat.NONE:
        msg = "Unexpected data type: none"
        raise UnknownFormatError(msg)
    return resolved


def populate(
    stream: TextIO,
    source_format: SourceFormat | str,
    cols: ColumnMapping,
    collection: RegionCollection,
    areas_filter: StringFilter | None = None,
    measures_filter: StringFilter | None = None,
    years_filter: YearFilter | None = None,
) -> int:
    """Parse ``stream`` with the parser for ``source_format`` into ``collection``.

    Returns
    -------
    int
        Number of records upserted.

    Raises
    ------
    UnknownFormatError
        If the format tag is unsupported (the stream is not read).
    MissingColumnError
        If ``cols`` lacks a role the format requires.
    ParseError
        If the stream is malformed.
    """
    resolved = resolve_format(source_format)

    if resolved is SourceFormat.AUTHORITY_CODE_CSV:
        return populate_from_authority_code_csv(stream, collection, cols, areas_filter)
    if resolved is SourceFormat.AUTHORITY_BY_YEAR_CSV:
        return populate_from_authority_by_year_csv(
            stream, collection, cols, areas_filter, measures_filter, years_filter,
        )
    return populate_from_welsh_stats_json(
        stream, collection, cols, areas_filter, measures_filter, years_filter,
    )

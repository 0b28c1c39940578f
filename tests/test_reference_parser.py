"""Tests for the reference CSV parser (region codes and names)."""

import io

import pytest

from regionstats.errors import ParseError
from regionstats.extractor import populate_from_authority_code_csv
from regionstats.model import RegionCollection


class TestReferenceImport:
    """Tests for successful imports."""

    def test_imports_every_row(self, areas_stream: io.StringIO, collection: RegionCollection) -> None:
        """Each line becomes a Region with English and Welsh names."""
        count = populate_from_authority_code_csv(areas_stream, collection)

        assert count == 3
        assert [r.code for r in collection] == ["W06000001", "W06000002", "W06000011"]
        anglesey = collection.get_region("W06000001")
        assert anglesey.names == {"eng": "Isle of Anglesey", "cym": "Ynys Môn"}
        assert anglesey.size() == 0

    def test_anglesey_filter_accepts_only_anglesey(
        self, areas_stream: io.StringIO, collection: RegionCollection,
    ) -> None:
        """Case-insensitive substring match on the English name."""
        count = populate_from_authority_code_csv(areas_stream, collection, areas_filter=frozenset({"anglesey"}))

        assert count == 1
        assert list(collection.regions) == ["W06000001"]

    def test_filter_on_welsh_name(self, areas_stream: io.StringIO, collection: RegionCollection) -> None:
        """Welsh names are also searched."""
        populate_from_authority_code_csv(areas_stream, collection, areas_filter=frozenset({"abertawe"}))

        assert list(collection.regions) == ["W06000011"]

    def test_header_shape_is_ignored(self, collection: RegionCollection) -> None:
        """The header line is discarded whatever its field count."""
        stream = io.StringIO("Local authority code,Name\nW06000001,Isle of Anglesey,Ynys Môn\n")

        assert populate_from_authority_code_csv(stream, collection) == 1
        assert collection.get_region("W06000001").get_name("cym") == "Ynys Môn"

    def test_empty_stream_imports_nothing(self, collection: RegionCollection) -> None:
        """An empty file leaves the collection untouched."""
        assert populate_from_authority_code_csv(io.StringIO(""), collection) == 0
        assert len(collection) == 0

    def test_blank_lines_and_crlf(self, collection: RegionCollection) -> None:
        """Blank lines are skipped and CRLF endings are stripped."""
        stream = io.StringIO("code,eng,cym\r\nW06000002,Gwynedd,Gwynedd\r\n\r\n")

        assert populate_from_authority_code_csv(stream, collection) == 1
        assert collection.get_region("W06000002").get_name("cym") == "Gwynedd"


class TestReferenceErrors:
    """Tests for structural failures."""

    def test_unreadable_stream(self, collection: RegionCollection) -> None:
        """A stream that fails before the header is a parse error."""
        stream = io.StringIO("code,eng,cym\n")
        stream.close()

        with pytest.raises(ParseError, match="could not read header"):
            populate_from_authority_code_csv(stream, collection)

    def test_bad_line_keeps_earlier_rows(self, collection: RegionCollection) -> None:
        """Rows before the malformed line stay in the collection."""
        stream = io.StringIO("code,eng,cym\nW06000001,Isle of Anglesey,Ynys Môn\nW06000002,Gwynedd\n")

        with pytest.raises(ParseError, match="line 3"):
            populate_from_authority_code_csv(stream, collection)

        assert list(collection.regions) == ["W06000001"]

    def test_quoted_comma_is_not_supported(self, collection: RegionCollection) -> None:
        """A comma inside a name produces too many fields."""
        stream = io.StringIO('code,eng,cym\nW06000015,"Cardiff, City of",Caerdydd\n')

        with pytest.raises(ParseError):
            populate_from_authority_code_csv(stream, collection)

"""Tests for the text report formatter."""

import pytest

from regionstats.model import ENGLISH, WELSH, Measure, Region, RegionCollection
from regionstats.transformer import NO_MEASURES_MARKER, format_measure, format_region, format_report


@pytest.fixture
def report_collection() -> RegionCollection:
    """Two regions: one with a measure, one without."""
    collection = RegionCollection()

    swansea = Region("W06000011")
    swansea.set_name(ENGLISH, "Swansea")
    swansea.set_name(WELSH, "Abertawe")
    swansea.set_measure("pop", Measure("pop", "Population", {1990: 100.0, 2010: 150.0}))
    collection.set_region(swansea.code, swansea)

    gwynedd = Region("W06000002")
    gwynedd.set_name(ENGLISH, "Gwynedd")
    collection.set_region(gwynedd.code, gwynedd)
    return collection


class TestFormatMeasure:
    """Tests for format_measure."""

    def test_layout(self) -> None:
        """Label line, right-aligned header row, six-decimal value row."""
        text = format_measure(Measure("pop", "Population", {1990: 100.0, 2010: 150.0}))

        assert text.split("\n") == [
            "Population (pop)",
            "      1990       2010    Average     Diff.   % Diff.",
            "100.000000 150.000000 125.000000 50.000000 50.000000",
        ]

    def test_columns_align(self) -> None:
        """Header and value rows have the same width and no trailing spaces."""
        text = format_measure(Measure("area", "Land area", {1991: 711.6801, 1992: 711.6801, 1993: 711.6801}))
        _, header, values = text.split("\n")

        assert len(header) == len(values)
        assert header == header.rstrip()
        assert values.split()[-3:] == ["711.680100", "0.000000", "0.000000"]

    def test_empty_measure(self) -> None:
        """A Measure without years still prints zero statistics."""
        _, header, values = format_measure(Measure("pop", "Population")).split("\n")

        assert header.split() == ["Average", "Diff.", "%", "Diff."]
        assert values.split() == ["0.000000", "0.000000", "0.000000"]


class TestFormatReport:
    """Tests for format_region and format_report."""

    def test_region_without_measures(self, report_collection: RegionCollection) -> None:
        """The marker replaces the measure blocks."""
        text = format_region(report_collection.get_region("W06000002"))

        assert text == f"Gwynedd (W06000002)\n{NO_MEASURES_MARKER}"

    def test_regions_in_code_order(self, report_collection: RegionCollection) -> None:
        """Blocks are sorted by code and separated by one blank line."""
        blocks = format_report(report_collection).split("\n\n")

        assert len(blocks) == 2
        assert blocks[0].startswith("Gwynedd (W06000002)")
        assert blocks[1].startswith("Swansea / Abertawe (W06000011)\nPopulation (pop)")

    def test_unnamed_region(self) -> None:
        """Regions without names print the placeholder."""
        collection = RegionCollection()
        collection.set_region("W06000099", Region("W06000099"))

        assert format_report(collection).startswith("Unnamed (W06000099)")

    def test_empty_collection(self) -> None:
        """Nothing to report renders as an empty string."""
        assert format_report(RegionCollection()) == ""

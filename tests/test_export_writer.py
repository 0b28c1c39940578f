"""Tests for JSON export and CSV/Excel writers."""

from __future__ import annotations

import io
import json
from typing import TYPE_CHECKING

import pandas as pd
import pytest

from regionstats.errors import InvalidArgument
from regionstats.extractor import populate_from_authority_code_csv, populate_from_welsh_stats_json
from regionstats.model import RegionCollection
from regionstats.writer import (
    save_export_json,
    to_json,
    write_collection_to_csv,
    write_collection_to_excel,
    write_export,
)
from tests.conftest import AREAS_CSV, POPDEN_ROWS, json_document

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def populated(json_cols: dict) -> RegionCollection:
    """Areas plus the density JSON table."""
    collection = RegionCollection()
    populate_from_authority_code_csv(io.StringIO(AREAS_CSV), collection)
    populate_from_welsh_stats_json(io.StringIO(json_document(POPDEN_ROWS)), collection, json_cols)
    return collection


class TestToJson:
    """Tests for the compact structured export."""

    def test_empty_collection(self) -> None:
        """An empty collection exports as the literal {}."""
        assert to_json(RegionCollection()) == "{}"

    def test_shape_and_encoding(self, populated: RegionCollection) -> None:
        """Codes map to names and measures; non-ASCII is kept."""
        text = to_json(populated)
        data = json.loads(text)

        assert "Ynys Môn" in text
        assert ": " not in text
        assert list(data) == ["W06000001", "W06000002", "W06000011"]
        assert data["W06000002"] == {"names": {"cym": "Gwynedd", "eng": "Gwynedd"}, "measures": {}}
        assert data["W06000011"]["measures"]["dens"] == {"2010": 629.9, "2011": 634.4}


class TestFileWriters:
    """Tests for JSON, CSV, and Excel files."""

    def test_save_export_json(self, populated: RegionCollection, tmp_path: Path) -> None:
        """The saved file holds the same structure as to_json."""
        path = save_export_json(populated, tmp_path / "out" / "export.json")

        assert path.exists()
        assert json.loads(path.read_text(encoding="utf-8")) == json.loads(to_json(populated))

    def test_write_csv(self, populated: RegionCollection, tmp_path: Path) -> None:
        """The CSV has one row per observation."""
        path = write_collection_to_csv(populated, tmp_path / "export.csv")
        df = pd.read_csv(path)

        assert len(df) == 4
        assert set(df["measure_code"]) == {"area", "dens"}

    def test_write_excel(self, populated: RegionCollection, tmp_path: Path) -> None:
        """The workbook has Data and Summary sheets."""
        path = write_collection_to_excel(populated, tmp_path / "export.xlsx")
        sheets = pd.read_excel(path, sheet_name=None, engine="openpyxl")

        assert list(sheets) == ["Data", "Summary"]
        assert len(sheets["Data"]) == 4
        assert len(sheets["Summary"]) == 3

    @pytest.mark.parametrize("suffix", [".json", ".csv", ".xlsx", ".JSON"])
    def test_write_export_dispatch(self, populated: RegionCollection, tmp_path: Path, suffix: str) -> None:
        """The suffix selects the writer."""
        path = write_export(populated, tmp_path / f"export{suffix}")

        assert path.exists()

    def test_write_export_unsupported(self, populated: RegionCollection, tmp_path: Path) -> None:
        """Unknown suffixes are rejected before writing."""
        with pytest.raises(InvalidArgument, match="Unsupported export format"):
            write_export(populated, tmp_path / "export.txt")

        assert not (tmp_path / "export.txt").exists()

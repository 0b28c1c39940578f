"""Pytest configuration for regionstats tests.

This module provides:
- In-memory streams for the three source layouts (reference CSV, wide CSV, JSON table)
- Column mappings matching ``config/datasets.json``
- A temporary data directory holding files named as in the dataset catalogue
"""

from __future__ import annotations

import io
import json
from typing import TYPE_CHECKING, Any

import pytest

from regionstats.extractor import SourceColumn
from regionstats.model import RegionCollection

if TYPE_CHECKING:
    from pathlib import Path

AREAS_CSV = """Local authority code,Name (eng),Name (cym)
W06000001,Isle of Anglesey,Ynys Môn
W06000002,Gwynedd,Gwynedd
W06000011,Swansea,Abertawe
"""

WIDE_POP_CSV = """AuthorityCode,2009,2010,2011
W06000001,69000,69500,70000
W06000011,232000,236000,239000
"""

POPDEN_ROWS: list[dict[str, Any]] = [
    {
        "Localauthority_Code": "W06000011",
        "Localauthority_ItemName_ENG": "Swansea",
        "Measure_Code": "DENS",
        "Measure_ItemName_ENG": "Population density",
        "Year_Code": "2010",
        "Data": 629.9,
    },
    {
        "Localauthority_Code": "W06000011",
        "Localauthority_ItemName_ENG": "Swansea",
        "Measure_Code": "DENS",
        "Measure_ItemName_ENG": "Population density",
        "Year_Code": "2011",
        "Data": "634.4",
    },
    {
        "Localauthority_Code": "W06000011",
        "Localauthority_ItemName_ENG": "Swansea",
        "Measure_Code": "AREA",
        "Measure_ItemName_ENG": "Land area",
        "Year_Code": "2010",
        "Data": 380.0,
    },
    {
        "Localauthority_Code": "W06000001",
        "Localauthority_ItemName_ENG": "Isle of Anglesey",
        "Measure_Code": "DENS",
        "Measure_ItemName_ENG": "Population density",
        "Year_Code": "2010",
        "Data": 97.3,
    },
]


def json_document(rows: list[Any]) -> str:
    """Wrap ``rows`` in a StatsWales-style document."""
    return json.dumps({"odata.metadata": "https://example.invalid/$metadata", "value": rows})


@pytest.fixture
def collection() -> RegionCollection:
    """Provide an empty collection."""
    return RegionCollection()


@pytest.fixture
def areas_stream() -> io.StringIO:
    """Reference CSV with three Welsh authorities."""
    return io.StringIO(AREAS_CSV)


@pytest.fixture
def wide_stream() -> io.StringIO:
    """Wide-format population CSV for 2009-2011."""
    return io.StringIO(WIDE_POP_CSV)


@pytest.fixture
def json_stream() -> io.StringIO:
    """JSON table with density and land-area observations."""
    return io.StringIO(json_document(POPDEN_ROWS))


@pytest.fixture
def wide_cols() -> dict[SourceColumn, str]:
    """Mapping for the single-measure population CSV."""
    return {
        SourceColumn.AUTH_CODE: "AuthorityCode",
        SourceColumn.SINGLE_MEASURE_CODE: "pop",
        SourceColumn.SINGLE_MEASURE_NAME: "Population",
    }


@pytest.fixture
def json_cols() -> dict[SourceColumn, str]:
    """Mapping for the population density JSON table."""
    return {
        SourceColumn.AUTH_CODE: "Localauthority_Code",
        SourceColumn.AUTH_NAME_ENG: "Localauthority_ItemName_ENG",
        SourceColumn.MEASURE_CODE: "Measure_Code",
        SourceColumn.MEASURE_NAME: "Measure_ItemName_ENG",
        SourceColumn.YEAR: "Year_Code",
        SourceColumn.VALUE: "Data",
    }


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Directory with the areas, population and density files from the catalogue."""
    (tmp_path / "areas.csv").write_text(AREAS_CSV, encoding="utf-8")
    (tmp_path / "complete-popu1009-pop.csv").write_text(WIDE_POP_CSV, encoding="utf-8")
    (tmp_path / "popu1009.json").write_text(json_document(POPDEN_ROWS), encoding="utf-8")
    return tmp_path

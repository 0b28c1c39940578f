"""Structured export and file output for a RegionCollection.

Export shape::

    {"W06000001": {"names": {"cym": "Ynys Môn", "eng": "Isle of Anglesey"},
                   "measures": {"pop": {"1991": 69123.0, ...}}}, ...}

An empty collection exports as ``{}``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import pandas as pd

from regionstats.config import OUTPUT_DIR, setup_logging
from regionstats.errors import InvalidArgument
from regionstats.transformer.statistics import collection_to_frame, summarize_collection

if TYPE_CHECKING:
    from regionstats.model import RegionCollection

logger = setup_logging(__name__)

DEFAULT_EXPORT_NAME = "regionstats_export"
DATA_SHEET = "Data"
SUMMARY_SHEET = "Summary"


def to_json(collection: RegionCollection) -> str:
    """Return the compact structured export of ``collection``.

    Non-ASCII names are kept as-is; the result for an empty collection is
    exactly ``"{}"``.
    """
    return json.dumps(collection.to_dict(), ensure_ascii=False, separators=(",", ":"))


def save_export_json(collection: RegionCollection, filepath: Path | None = None) -> Path:
    """Write the structured export to a JSON file.

    Parameters
    ----------
    collection
        Collection to export.
    filepath
        Destination; defaults to ``OUTPUT_DIR/regionstats_export.json``.

    Returns
    -------
    Path
        Location of the written file.
    """
    target = filepath if filepath is not None else OUTPUT_DIR / f"{DEFAULT_EXPORT_NAME}.json"
    target.parent.mkdir(parents=True, exist_ok=True)

    with target.open("w", encoding="utf-8") as f:
        json.dump(collection.to_dict(), f, indent=2, ensure_ascii=False)

    logger.info("Saved export: %s", target)
    return target


def write_collection_to_csv(collection: RegionCollection, filepath: Path | None = None) -> Path:
    """Write one row per (region, measure, year) to a CSV file.

    Returns
    -------
    Path
        Location of the written CSV file.
    """
    target = filepath if filepath is not None else OUTPUT_DIR / f"{DEFAULT_EXPORT_NAME}.csv"
    target.parent.mkdir(parents=True, exist_ok=True)

    df = collection_to_frame(collection)
    df.to_csv(target, index=False, encoding="utf-8")

    logger.info("Saved CSV (%d rows): %s", len(df), target)
    return target


def write_collection_to_excel(collection: RegionCollection, filepath: Path | None = None) -> Path:
    """Write a workbook with a tidy ``Data`` sheet and a per-measure ``Summary`` sheet.

    Returns
    -------
    Path
        Location of the written workbook.
    """
    target = filepath if filepath is not None else OUTPUT_DIR / f"{DEFAULT_EXPORT_NAME}.xlsx"
    target.parent.mkdir(parents=True, exist_ok=True)

    data_df = collection_to_frame(collection)
    summary_df = summarize_collection(collection)

    with pd.ExcelWriter(target, engine="openpyxl") as writer:
        data_df.to_excel(writer, sheet_name=DATA_SHEET, index=False)
        summary_df.to_excel(writer, sheet_name=SUMMARY_SHEET, index=False)
        logger.debug("Wrote %d data rows and %d summary rows", len(data_df), len(summary_df))

    logger.info("Workbook saved: %s", target)
    return target


_WRITERS = {
    ".json": save_export_json,
    ".csv": write_collection_to_csv,
    ".xlsx": write_collection_to_excel,
}

EXPORT_SUFFIXES = tuple(_WRITERS)


def write_export(collection: RegionCollection, filepath: Path | str) -> Path:
    """Write ``collection`` in the format implied by the file suffix.

    Raises
    ------
    InvalidArgument
        If the suffix is not ``.json``, ``.csv``, or ``.xlsx``.
    """
    target = Path(filepath)
    writer = _WRITERS.get(target.suffix.lower())
    if writer is None:
        msg = f"Unsupported export format: {target.suffix or target.name} (use .json, .csv or .xlsx)"
        raise InvalidArgument(msg)
    return writer(collection, target)

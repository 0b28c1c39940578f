"""Derived statistics and pandas views of a RegionCollection.

``compute_statistics`` is what the text report prints for each Measure; the
DataFrame builders feed the CSV and Excel writers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import pandas as pd

from regionstats.model import ENGLISH, WELSH

if TYPE_CHECKING:
    from regionstats.model import Measure, RegionCollection

TIDY_COLUMNS = [
    "region_code",
    "name_eng",
    "name_cym",
    "measure_code",
    "measure_label",
    "year",
    "value",
]

SUMMARY_COLUMNS = [
    "region_code",
    "measure_code",
    "measure_label",
    "first_year",
    "last_year",
    "years",
    "average",
    "difference",
    "difference_pct",
]


@dataclass(frozen=True)
class MeasureStatistics:
    """Summary of one Measure.

    Attributes
    ----------
    average : float
        Mean of all stored values.
    difference : float
        Last-year value minus first-year value.
    difference_pct : float
        ``difference`` as a percentage of the first-year value.
    """

    average: float
    difference: float
    difference_pct: float


def compute_statistics(measure: Measure) -> MeasureStatistics:
    """Return average, difference, and percentage difference for ``measure``.

    All three are ``0.0`` for a Measure with no years.
    """
    return MeasureStatistics(
        average=measure.get_average(),
        difference=measure.get_difference(),
        difference_pct=measure.get_difference_as_percentage(),
    )


def collection_to_frame(collection: RegionCollection) -> pd.DataFrame:
    """Flatten ``collection`` to one row per (region, measure, year).

    Regions without measures are omitted. Rows are ordered by region code,
    measure code, and year.
    """
    records = []
    for region in collection:
        name_eng = region.names.get(ENGLISH, "")
        name_cym = region.names.get(WELSH, "")
        for measure in region.sorted_measures():
            records.extend(
                {
                    "region_code": region.code,
                    "name_eng": name_eng,
                    "name_cym": name_cym,
                    "measure_code": measure.code,
                    "measure_label": measure.label,
                    "year": year,
                    "value": value,
                }
                for year, value in measure.items()
            )

    df = pd.DataFrame.from_records(records, columns=TIDY_COLUMNS)
    return df.astype({"year": "int64", "value": "float64"})


def summarize_collection(collection: RegionCollection) -> pd.DataFrame:
    """Return one row of derived statistics per (region, measure)."""
    records = []
    for region in collection:
        for measure in region.sorted_measures():
            stats = compute_statistics(measure)
            years = measure.years()
            records.append(
                {
                    "region_code": region.code,
                    "measure_code": measure.code,
                    "measure_label": measure.label,
                    "first_year": years[0] if years else None,
                    "last_year": years[-1] if years else None,
                    "years": len(years),
                    "average": stats.average,
                    "difference": stats.difference,
                    "difference_pct": stats.difference_pct,
                },
            )

    df = pd.DataFrame.from_records(records, columns=SUMMARY_COLUMNS)
    return df.astype({"first_year": "Int64", "last_year": "Int64"})

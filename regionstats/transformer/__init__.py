"""Transformer module: derived statistics and report formatting.

Submodules
----------
statistics
    Per-measure average/difference/percentage and pandas DataFrame views.
formatter
    Human-readable tabular report.
"""

from regionstats.transformer.formatter import (
    NO_MEASURES_MARKER,
    format_measure,
    format_region,
    format_report,
)
from regionstats.transformer.statistics import (
    MeasureStatistics,
    collection_to_frame,
    compute_statistics,
    summarize_collection,
)

__all__ = [
    "NO_MEASURES_MARKER",
    "MeasureStatistics",
    "collection_to_frame",
    "compute_statistics",
    "format_measure",
    "format_region",
    "format_report",
    "summarize_collection",
]

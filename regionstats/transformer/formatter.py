"""Text report rendering.

Report layout, one block per region in code order, blocks separated by a
blank line::

    Isle of Anglesey / Ynys Môn (W06000001)
    Land area (area)
          1991       1992       1993    Average    Diff.  % Diff.
    711.680100 711.680100 711.680100 711.680100 0.000000 0.000000

Each column is right-aligned to the wider of its header and its value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from regionstats.transformer.statistics import compute_statistics

if TYPE_CHECKING:
    from regionstats.model import Measure, Region, RegionCollection

NO_MEASURES_MARKER = "<no measures>"
STATISTIC_HEADERS = ("Average", "Diff.", "% Diff.")
VALUE_FORMAT = "{:.6f}"


def _align(cells: list[str], widths: list[int]) -> str:
    return " ".join(cell.rjust(width) for cell, width in zip(cells, widths, strict=True))


def format_measure(measure: Measure) -> str:
    """Render a Measure as its label line, year header row, and value row."""
    stats = compute_statistics(measure)
    items = measure.items()

    header_cells = [str(year) for year, _ in items] + list(STATISTIC_HEADERS)
    value_cells = [VALUE_FORMAT.format(value) for _, value in items] + [
        VALUE_FORMAT.format(stats.average),
        VALUE_FORMAT.format(stats.difference),
        VALUE_FORMAT.format(stats.difference_pct),
    ]
    widths = [max(len(h), len(v)) for h, v in zip(header_cells, value_cells, strict=True)]

    return "\n".join(
        (
            f"{measure.label} ({measure.code})",
            _align(header_cells, widths),
            _align(value_cells, widths),
        ),
    )


def format_region(region: Region) -> str:
    """Render a Region's name line followed by its Measures in code order."""
    lines = [f"{region.display_name()} ({region.code})"]
    measures = region.sorted_measures()
    if not measures:
        lines.append(NO_MEASURES_MARKER)
    lines.extend(format_measure(measure) for measure in measures)
    return "\n".join(lines)


def format_report(collection: RegionCollection) -> str:
    """Render every Region in code order, separated by one blank line.

    Returns an empty string for an empty collection.
    """
    return "\n\n".join(format_region(region) for region in collection)

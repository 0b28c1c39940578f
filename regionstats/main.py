#!/usr/bin/env python3
"""regionstats command line - import datasets, filter, and report.

This module orchestrates a complete run:
1. Load the areas reference dataset (region names in English and Welsh)
2. Load each selected statistics dataset into one RegionCollection
3. Optionally write the collection to a JSON, CSV or Excel file
4. Print the JSON export or the text report to stdout

A dataset that fails to open or parse is logged and skipped; the remaining
datasets are still imported.

Usage (from project root):
    python -m regionstats.main
    python -m regionstats.main -d popden -a W06000011 -y 2010-2015
    python -m regionstats.main -d complete-pop,complete-area -m pop -j
    python -m regionstats.main -d all --output output/all.xlsx

CLI Flags:
    --dir               Directory holding the dataset files (default: DATA_DIR)
    --datasets, -d      Dataset codes, comma-separated or repeated (default: all)
    --areas, -a         Area codes or name fragments to keep (default: all)
    --measures, -m      Measure codes to keep (default: all)
    --years, -y         YYYY or YYYY-ZZZZ; 0 imports every year (default: 0)
    --json, -j          Print the JSON export instead of the text report
    --output            Also write the collection to a .json, .csv or .xlsx file
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path

from regionstats.config import DATA_DIR, get_config, get_program_name, setup_logging
from regionstats.errors import InvalidArgument, RegionStatsError
from regionstats.extractor import (
    NO_YEAR_FILTER,
    StringFilter,
    YearFilter,
    make_string_filter,
    populate,
)
from regionstats.model import RegionCollection
from regionstats.sources import DatasetSpec, get_areas_dataset, select_datasets
from regionstats.transformer import format_report
from regionstats.writer import EXPORT_SUFFIXES, to_json, write_export

logger = setup_logging(__name__)


@dataclass
class RunOptions:
    """Everything a run needs, resolved from the command line.

    Attributes
    ----------
    data_dir : Path
        Directory the dataset files are read from.
    datasets : list[DatasetSpec]
        Statistics datasets to import, in order.
    areas_dataset : DatasetSpec or None
        Reference dataset loaded before the others; skipped when ``None``.
    areas_filter, measures_filter : StringFilter
        Token filters; empty keeps everything.
    years_filter : YearFilter
        Inclusive year range; ``(0, 0)`` keeps every year.
    as_json : bool
        Print the JSON export instead of the text report.
    output : Path or None
        Optional export file (suffix selects the format).
    """

    data_dir: Path
    datasets: list[DatasetSpec] = field(default_factory=list)
    areas_dataset: DatasetSpec | None = None
    areas_filter: StringFilter = frozenset()
    measures_filter: StringFilter = frozenset()
    years_filter: YearFilter = NO_YEAR_FILTER
    as_json: bool = False
    output: Path | None = None


# =============================================================================
# Loading
# =============================================================================


def load_dataset(spec: DatasetSpec, options: RunOptions, collection: RegionCollection) -> int:
    """Open one dataset file and populate ``collection`` from it.

    Returns
    -------
    int
        Number of records upserted.

    Raises
    ------
    RegionStatsError
        If the file cannot be opened or parsed.
    """
    source = spec.input_file(options.data_dir)
    logger.info("Loading %s (%s) from %s", spec.name, spec.code, source.source)
    with source as stream:
        return populate(
            stream,
            spec.source_format,
            spec.cols,
            collection,
            areas_filter=options.areas_filter,
            measures_filter=options.measures_filter,
            years_filter=options.years_filter,
        )


def load_areas(options: RunOptions, collection: RegionCollection) -> bool:
    """Load the areas reference dataset, logging and continuing on failure.

    Returns
    -------
    bool
        ``True`` when the reference names were imported.
    """
    if options.areas_dataset is None:
        return False
    try:
        load_dataset(options.areas_dataset, options, collection)
    except RegionStatsError as e:
        logger.error("Could not import area names: %s", e)
        return False
    return True


def load_datasets(options: RunOptions, collection: RegionCollection) -> list[str]:
    """Load every selected dataset, skipping the ones that fail.

    Returns
    -------
    list[str]
        Codes of the datasets that failed.
    """
    failed: list[str] = []
    for spec in options.datasets:
        try:
            count = load_dataset(spec, options, collection)
        except RegionStatsError as e:
            logger.error("Error importing dataset %s: %s", spec.code, e)
            failed.append(spec.code)
            continue
        logger.info("  ✓ %s: %d records", spec.code, count)
    return failed


def build_collection(options: RunOptions) -> tuple[RegionCollection, list[str]]:
    """Import the areas dataset then the selected datasets.

    Returns
    -------
    tuple[RegionCollection, list[str]]
        The populated collection and the codes of datasets that failed.
    """
    collection = RegionCollection()
    load_areas(options, collection)
    failed = load_datasets(options, collection)
    logger.info("Collection holds %d regions", len(collection))
    return collection, failed


def render(collection: RegionCollection, as_json: bool = False) -> str:
    """Return the JSON export or the text report for ``collection``."""
    if as_json:
        return to_json(collection)
    return format_report(collection)


def run(options: RunOptions) -> tuple[str, list[str]]:
    """Run the full import and produce the printable output.

    Returns
    -------
    tuple[str, list[str]]
        Rendered output and the codes of datasets that failed.

    Raises
    ------
    InvalidArgument
        If ``options.output`` has an unsupported suffix.
    """
    collection, failed = build_collection(options)

    if options.output is not None:
        output_path = write_export(collection, options.output)
        logger.info("Saved to: %s", output_path)

    return render(collection, options.as_json), failed


# =============================================================================
# CLI
# =============================================================================


def _split_tokens(values: list[str] | None) -> list[str]:
    """Flatten repeated and comma-separated option values."""
    tokens: list[str] = []
    for value in values or []:
        tokens.extend(part.strip() for part in value.split(",") if part.strip())
    return tokens


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser; name and description come from config.json."""
    program = get_config().get("program", {})
    parser = argparse.ArgumentParser(
        prog=get_program_name(),
        description=program.get("description", "Report on regional statistics datasets."),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m regionstats.main                                   # All datasets
  python -m regionstats.main -d popden -a W06000011            # One dataset, one area
  python -m regionstats.main -d complete-pop -a swansea,cardiff -y 2010-2015
  python -m regionstats.main -d popden -m dens -j              # JSON export
  python -m regionstats.main -d all --output output/all.xlsx   # Excel workbook
        """,
    )
    parser.add_argument(
        "--dir",
        type=Path,
        default=DATA_DIR,
        help=f"Directory holding the dataset files (default: {DATA_DIR})",
    )
    parser.add_argument(
        "--datasets",
        "-d",
        action="append",
        metavar="CODES",
        help="Dataset codes, comma-separated or repeated (default: all)",
    )
    parser.add_argument(
        "--areas",
        "-a",
        action="append",
        metavar="AREAS",
        help="Area codes or name fragments to keep (default: all)",
    )
    parser.add_argument(
        "--measures",
        "-m",
        action="append",
        metavar="CODES",
        help="Measure codes to keep (default: all)",
    )
    parser.add_argument(
        "--years",
        "-y",
        default="0",
        help="Year YYYY or range YYYY-ZZZZ; 0 imports every year (default: 0)",
    )
    parser.add_argument(
        "--json", "-j", action="store_true", help="Print the JSON export instead of the report"
    )
    parser.add_argument(
        "--output",
        type=Path,
        help=f"Also write the collection to a file ({', '.join(EXPORT_SUFFIXES)})",
    )
    return parser


def parse_options(
    parser: argparse.ArgumentParser,
    argv: list[str] | None = None,
) -> RunOptions:
    """Parse ``argv`` into RunOptions, exiting with status 2 on bad input."""
    args = parser.parse_args(argv)

    try:
        years_filter = YearFilter.parse(args.years)
        datasets = select_datasets(_split_tokens(args.datasets))
        areas_dataset = get_areas_dataset()
    except InvalidArgument as e:
        parser.error(str(e))

    if args.output is not None and args.output.suffix.lower() not in EXPORT_SUFFIXES:
        parser.error(f"Unsupported export format: {args.output} (use {', '.join(EXPORT_SUFFIXES)})")

    return RunOptions(
        data_dir=args.dir,
        datasets=datasets,
        areas_dataset=areas_dataset,
        areas_filter=make_string_filter(_split_tokens(args.areas)),
        measures_filter=make_string_filter(_split_tokens(args.measures)),
        years_filter=years_filter,
        as_json=args.json,
        output=args.output,
    )


def main(argv: list[str] | None = None) -> int:
    """Parse CLI flags, import the datasets, and print the result.

    Returns
    -------
    int
        ``0`` when at least one selected dataset imported; ``1`` when every
        selected dataset failed.
    """
    options = parse_options(build_parser(), argv)

    output, failed = run(options)
    if output:
        print(output)

    if options.datasets and len(failed) == len(options.datasets):
        logger.error("No dataset could be imported")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

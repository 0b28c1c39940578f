"""Dataset catalogue loaded from ``config/datasets.json``.

Each entry names a file, its source format, and its column mapping. The
``areas`` entry is the reference table of region names and is always loaded
first by the CLI; ``datasets`` lists the statistics files users select with
``--datasets``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from regionstats.config import get_dataset_catalogue
from regionstats.errors import InvalidArgument
from regionstats.extractor.columns import SourceColumn, SourceFormat, mapping_from_config
from regionstats.extractor.filters import ALL_TOKEN
from regionstats.sources.input_source import InputFile

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True)
class DatasetSpec:
    """One importable dataset.

    Attributes
    ----------
    name : str
        Human-readable dataset name.
    code : str
        Short code used on the command line (e.g., ``"popden"``).
    file : str
        File name relative to the data directory.
    source_format : SourceFormat
        Encoding of the file.
    cols : dict[SourceColumn, str]
        Column mapping handed to the parser.
    """

    name: str
    code: str
    file: str
    source_format: SourceFormat
    cols: dict[SourceColumn, str] = field(default_factory=dict, hash=False)

    def input_file(self, directory: Path | str) -> InputFile:
        """Return an :class:`InputFile` for this dataset inside ``directory``."""
        return InputFile(Path(directory) / self.file)


def _spec_from_config(entry: dict[str, Any]) -> DatasetSpec:
    """Build a DatasetSpec from one catalogue entry.

    Raises
    ------
    InvalidArgument
        If the entry lacks a required key or names an unknown format.
    """
    try:
        raw_format = entry["format"]
        spec = DatasetSpec(
            name=entry["name"],
            code=entry["code"],
            file=entry["file"],
            source_format=SourceFormat(raw_format),
            cols=mapping_from_config(entry.get("cols", {})),
        )
    except KeyError as e:
        msg = f"Dataset entry is missing key {e}: {entry}"
        raise InvalidArgument(msg) from None
    except ValueError as e:
        msg = f"Invalid dataset entry {entry.get('code', '?')}: {e}"
        raise InvalidArgument(msg) from e
    return spec


def get_areas_dataset(catalogue: dict[str, Any] | None = None) -> DatasetSpec:
    """Return the reference dataset of region names.

    Parameters
    ----------
    catalogue
        Parsed catalogue; loaded from disk when ``None``.
    """
    if catalogue is None:
        catalogue = get_dataset_catalogue()
    return _spec_from_config(catalogue["areas"])


def get_datasets(catalogue: dict[str, Any] | None = None) -> list[DatasetSpec]:
    """Return every statistics dataset in catalogue order."""
    if catalogue is None:
        catalogue = get_dataset_catalogue()
    return [_spec_from_config(entry) for entry in catalogue.get("datasets", [])]


def find_dataset(code: str, catalogue: dict[str, Any] | None = None) -> DatasetSpec:
    """Return the dataset with ``code``.

    Raises
    ------
    InvalidArgument
        If no dataset matches.
    """
    for spec in get_datasets(catalogue):
        if spec.code == code:
            return spec
    msg = f"No dataset matches key: {code}"
    raise InvalidArgument(msg)


def select_datasets(
    codes: Iterable[str] | None,
    catalogue: dict[str, Any] | None = None,
) -> list[DatasetSpec]:
    """Resolve dataset codes to specs.

    ``None``, an empty selection, or the token ``all`` selects every
    dataset. Codes are resolved in the order given; duplicates are dropped.

    Raises
    ------
    InvalidArgument
        If any code is unknown.
    """
    if catalogue is None:
        catalogue = get_dataset_catalogue()

    requested = [code.strip() for code in codes or [] if code.strip()]
    if not requested or ALL_TOKEN in requested:
        return get_datasets(catalogue)

    selected: list[DatasetSpec] = []
    for code in dict.fromkeys(requested):
        selected.append(find_dataset(code, catalogue))
    return selected

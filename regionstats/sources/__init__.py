"""Input sources and the dataset catalogue.

- InputSource / InputFile / InputURL: open a dataset as a text stream.
- DatasetSpec and catalogue helpers: which files exist and how to parse them.
"""

from regionstats.sources.datasets import (
    DatasetSpec,
    find_dataset,
    get_areas_dataset,
    get_datasets,
    select_datasets,
)
from regionstats.sources.input_source import InputFile, InputSource, InputURL

__all__ = [
    "DatasetSpec",
    "InputFile",
    "InputSource",
    "InputURL",
    "find_dataset",
    "get_areas_dataset",
    "get_datasets",
    "select_datasets",
]

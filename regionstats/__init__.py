"""regionstats: regional statistics import and reporting for Welsh local authorities.

The package reads Welsh Government statistics files in three layouts, merges
them into one in-memory model keyed by local authority code, and renders a
text report, a JSON export, or CSV/Excel tables.

Architecture
------------
* ``model``: Measure, Region and RegionCollection with upsert/merge semantics.
* ``extractor``: parsers for the reference CSV, wide per-year CSV and JSON tables, plus filters.
* ``sources``: file/URL input sources and the dataset catalogue (``config/datasets.json``).
* ``transformer``: per-measure statistics, pandas views and the text report.
* ``writer``: JSON export and CSV/Excel output.

Configuration
-------------
Paths default to ``datasets/``, ``output/``, ``logs/`` and ``config/`` under the
project root but respect ``DATA_DIR``, ``OUTPUT_DIR``, ``LOGS_DIR`` and
``CONFIG_DIR`` overrides (a ``.env`` file is honoured).

Examples
--------
Report population density for Swansea between 2010 and 2015:

    >>> python -m regionstats.main -d popden -a swansea -y 2010-2015

Export everything as JSON:

    >>> python -m regionstats.main -j
"""

from regionstats.model import Measure, Region, RegionCollection

__version__ = "0.1.0"
__all__ = ["Measure", "Region", "RegionCollection", "__version__"]

# Public helper for introspection tools.
def get_version() -> str:
    """Return the current package version string.

    Returns
    -------
    str
        Semantic version identifier (e.g., ``"0.1.0"``).
    """
    return __version__


__all__.append("get_version")

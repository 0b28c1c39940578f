"""In-memory data model: Measure -> Region -> RegionCollection.

Measure
    Named time series of values keyed by year.
Region
    Administrative unit with names per language and a set of Measures.
RegionCollection
    Top-level store keyed by region code; the only mutable shared state.
"""

from regionstats.model.collection import RegionCollection
from regionstats.model.measure import Measure
from regionstats.model.region import ENGLISH, UNNAMED, WELSH, Region, normalize_language

__all__ = [
    "ENGLISH",
    "UNNAMED",
    "WELSH",
    "Measure",
    "Region",
    "RegionCollection",
    "normalize_language",
]

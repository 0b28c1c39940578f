"""Measure: a named statistic tracked over years.

A Measure holds one value per year. Codes are normalized to lowercase at
construction so that ``"Pop"`` and ``"pop"`` name the same statistic.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from regionstats.errors import LookupFailure

__all__ = ["Measure"]


@dataclass
class Measure:
    """A time series of values keyed by year.

    Attributes
    ----------
    code : str
        Lowercase identifier, unique within a Region (e.g., ``"pop"``).
    label : str
        Human-readable name (e.g., ``"Population"``).
    values : dict[int, float]
        Year to value mapping. Inserting an existing year overwrites it.
    """

    code: str
    label: str = ""
    values: dict[int, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.code = self.code.lower()
        self.values = {int(year): float(value) for year, value in self.values.items()}

    def __len__(self) -> int:
        return len(self.values)

    def size(self) -> int:
        """Return the number of years with a stored value."""
        return len(self.values)

    def years(self) -> list[int]:
        """Return stored years in ascending order."""
        return sorted(self.values)

    def items(self) -> list[tuple[int, float]]:
        """Return ``(year, value)`` pairs in ascending year order."""
        return [(year, self.values[year]) for year in self.years()]

    def set_value(self, year: int, value: float) -> None:
        """Store ``value`` for ``year``, replacing any existing value."""
        self.values[int(year)] = float(value)

    def get_value(self, year: int) -> float:
        """Return the value stored for ``year``.

        Raises
        ------
        LookupFailure
            If no value is stored for ``year``.
        """
        try:
            return self.values[year]
        except KeyError:
            msg = f"No value found for year {year}"
            raise LookupFailure(msg) from None

    def merge(self, other: Measure) -> None:
        """Merge ``other`` into this Measure.

        Years are unioned; on a shared year the value from ``other`` wins.
        A non-empty label on ``other`` replaces the current label.
        """
        if other.label:
            self.label = other.label
        self.values.update(other.values)

    def copy(self) -> Measure:
        """Return an independent copy of this Measure."""
        return Measure(self.code, self.label, dict(self.values))

    # ------------------------------------------------------------------
    # Derived statistics
    # ------------------------------------------------------------------

    def get_average(self) -> float:
        """Return the mean of all stored values, or ``0.0`` when empty."""
        if not self.values:
            return 0.0
        return sum(self.values.values()) / len(self.values)

    def get_difference(self) -> float:
        """Return last-year value minus first-year value.

        Years are ordered chronologically, so the result never depends on the
        insertion order. Returns ``0.0`` with fewer than two years.
        """
        if len(self.values) < 2:
            return 0.0
        years = self.years()
        return self.values[years[-1]] - self.values[years[0]]

    def get_difference_as_percentage(self) -> float:
        """Return the first-to-last change as a percentage of the first value.

        Returns ``0.0`` when the difference is zero or the first value is
        missing or zero.
        """
        difference = self.get_difference()
        if difference == 0 or not self.values:
            return 0.0
        first_value = self.values[self.years()[0]]
        if first_value == 0:
            return 0.0
        return difference / first_value * 100

    def to_dict(self) -> dict[str, float]:
        """Return the year->value map with string year keys, ascending."""
        return {str(year): value for year, value in self.items()}

    def summary(self) -> dict[str, Any]:
        """Return code, label, and the three derived statistics."""
        return {
            "code": self.code,
            "label": self.label,
            "years": len(self.values),
            "average": self.get_average(),
            "difference": self.get_difference(),
            "difference_pct": self.get_difference_as_percentage(),
        }

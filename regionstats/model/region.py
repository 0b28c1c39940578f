"""Region: an administrative unit with names and Measures."""

from __future__ import annotations

from typing import Any

from regionstats.errors import InvalidArgument, LookupFailure
from regionstats.model.measure import Measure

__all__ = ["ENGLISH", "UNNAMED", "WELSH", "Region", "normalize_language"]

ENGLISH = "eng"
WELSH = "cym"
UNNAMED = "Unnamed"


def normalize_language(lang: str) -> str:
    """Validate and lowercase a three-letter language tag.

    Raises
    ------
    InvalidArgument
        If ``lang`` is not exactly three ASCII letters.
    """
    if len(lang) != 3 or not (lang.isascii() and lang.isalpha()):
        msg = f"Language code must be three alphabetical letters only, got {lang!r}"
        raise InvalidArgument(msg)
    return lang.lower()


class Region:
    """A region keyed by its administrative code.

    The code is fixed at construction; names and measures are upserted
    through :meth:`set_name` and :meth:`set_measure`.
    """

    def __init__(self, code: str) -> None:
        self._code = code
        self.names: dict[str, str] = {}
        self.measures: dict[str, Measure] = {}

    def __repr__(self) -> str:
        return f"Region(code={self._code!r}, names={self.names!r}, measures={sorted(self.measures)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Region):
            return NotImplemented
        return (
            self._code == other._code
            and self.names == other.names
            and self.measures == other.measures
        )

    @property
    def code(self) -> str:
        """Administrative code (read-only)."""
        return self._code

    def size(self) -> int:
        """Return the number of Measures held."""
        return len(self.measures)

    def __len__(self) -> int:
        return len(self.measures)

    # ------------------------------------------------------------------
    # Names
    # ------------------------------------------------------------------

    def set_name(self, lang: str, name: str) -> None:
        """Store ``name`` under language ``lang`` (upsert).

        Raises
        ------
        InvalidArgument
            If ``lang`` is not a three-letter alphabetic tag. Nothing is
            stored in that case.
        """
        self.names[normalize_language(lang)] = name

    def get_name(self, lang: str) -> str:
        """Return the name stored for ``lang``.

        Raises
        ------
        LookupFailure
            If no name is stored for that language.
        """
        try:
            return self.names[lang.lower()]
        except KeyError:
            msg = f"No name stored for language {lang}"
            raise LookupFailure(msg) from None

    def display_name(self) -> str:
        """Return ``"English / Welsh"``, whichever single name exists, or ``Unnamed``."""
        eng = self.names.get(ENGLISH, "")
        cym = self.names.get(WELSH, "")
        if eng and cym:
            return f"{eng} / {cym}"
        return eng or cym or UNNAMED

    # ------------------------------------------------------------------
    # Measures
    # ------------------------------------------------------------------

    def set_measure(self, code: str, measure: Measure) -> None:
        """Insert ``measure`` under ``code`` or merge it into the existing one.

        The code is lowercased. A copy is stored, so later changes to the
        caller's Measure do not leak into this Region.
        """
        key = code.lower()
        existing = self.measures.get(key)
        if existing is None:
            self.measures[key] = measure.copy()
        else:
            existing.merge(measure)

    def get_measure(self, code: str) -> Measure:
        """Return the Measure stored under ``code``.

        Raises
        ------
        LookupFailure
            If no such Measure exists.
        """
        try:
            return self.measures[code.lower()]
        except KeyError:
            msg = f"No measure found matching {code}"
            raise LookupFailure(msg) from None

    def sorted_measures(self) -> list[Measure]:
        """Return Measures ordered by code."""
        return [self.measures[key] for key in sorted(self.measures)]

    # ------------------------------------------------------------------
    # Merge / copy / serialization
    # ------------------------------------------------------------------

    def merge(self, other: Region) -> None:
        """Merge ``other`` into this Region.

        Names are upserted per language and measures merged one by one;
        nothing held here is dropped unless replaced by an entry with the
        same key.
        """
        for lang, name in other.names.items():
            self.set_name(lang, name)
        for code, measure in other.measures.items():
            self.set_measure(code, measure)

    def copy(self) -> Region:
        """Return an independent deep copy of this Region."""
        clone = Region(self._code)
        clone.names = dict(self.names)
        clone.measures = {key: measure.copy() for key, measure in self.measures.items()}
        return clone

    def to_dict(self) -> dict[str, Any]:
        """Convert to the structured export shape (names + measures)."""
        return {
            "names": {lang: self.names[lang] for lang in sorted(self.names)},
            "measures": {key: self.measures[key].to_dict() for key in sorted(self.measures)},
        }

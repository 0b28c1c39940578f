"""RegionCollection: the top-level store of Regions keyed by code."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from regionstats.errors import InvalidArgument, LookupFailure

if TYPE_CHECKING:
    from collections.abc import Iterator

    from regionstats.model.region import Region

__all__ = ["RegionCollection"]


class RegionCollection:
    """All ingested Regions, exactly one per code.

    :meth:`set_region` is the single upsert entry point used by every parser.
    Iteration yields Regions in ascending code order.
    """

    def __init__(self) -> None:
        self._regions: dict[str, Region] = {}

    def __len__(self) -> int:
        return len(self._regions)

    def __contains__(self, code: object) -> bool:
        return code in self._regions

    def __iter__(self) -> Iterator[Region]:
        return iter(self._regions[code] for code in sorted(self._regions))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RegionCollection):
            return NotImplemented
        return self._regions == other._regions

    def __repr__(self) -> str:
        return f"RegionCollection({sorted(self._regions)!r})"

    @property
    def regions(self) -> dict[str, Region]:
        """Code to Region mapping in ascending code order (a new dict)."""
        return {code: self._regions[code] for code in sorted(self._regions)}

    def size(self) -> int:
        """Return the number of Regions."""
        return len(self._regions)

    def set_region(self, code: str, region: Region) -> None:
        """Insert ``region`` or merge it into the Region already stored for ``code``.

        Merging upserts names per language and merges measures one by one, so
        previously ingested data survives unless replaced by a same-key entry.

        Raises
        ------
        InvalidArgument
            If ``code`` does not match ``region.code``.
        """
        if code != region.code:
            msg = f"Region code {region.code!r} does not match key {code!r}"
            raise InvalidArgument(msg)

        existing = self._regions.get(code)
        if existing is None:
            self._regions[code] = region.copy()
        else:
            existing.merge(region)

    def get_region(self, code: str) -> Region:
        """Return the Region stored for ``code``.

        Raises
        ------
        LookupFailure
            If no Region has that code.
        """
        try:
            return self._regions[code]
        except KeyError:
            msg = f"No region found matching {code}"
            raise LookupFailure(msg) from None

    def known_names(self, code: str) -> dict[str, str]:
        """Return a copy of the names already ingested for ``code`` (empty if unknown)."""
        region = self._regions.get(code)
        return dict(region.names) if region is not None else {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to the structured export shape keyed by region code."""
        return {region.code: region.to_dict() for region in self}

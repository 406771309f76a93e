"""Search result containers handed to post-processors.

Backends build a fresh :class:`RecordCollection` per request. Post-processors
mutate the facet containers in place; they never replace them, so any
reference obtained through :meth:`Facets.get_field_facets` stays current.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping, Sequence
from dataclasses import dataclass, field
from typing import Any


class FacetValues(MutableMapping[str, int]):
    """Ordered ``value -> count`` mapping for a single facet field."""

    def __init__(self, pairs: Iterable[tuple[str, int]] | Mapping[str, int] = ()) -> None:
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        self._counts: dict[str, int] = {}
        for value, count in items:
            self[value] = count

    def __getitem__(self, key: str) -> int:
        return self._counts[key]

    def __setitem__(self, key: str, count: int) -> None:
        if count < 0:
            raise ValueError(f"Facet count for {key!r} cannot be negative")
        self._counts[str(key)] = int(count)

    def __delitem__(self, key: str) -> None:
        del self._counts[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"FacetValues({self._counts!r})"

    def remove_keys(self, keys: Iterable[str]) -> list[str]:
        """Remove ``keys`` that are present and return the ones actually removed."""

        removed: list[str] = []
        for key in keys:
            if self._counts.pop(key, None) is not None:
                removed.append(key)
        return removed

    def to_dict(self) -> dict[str, int]:
        return dict(self._counts)


class Facets:
    """Facet counts keyed by field name."""

    def __init__(self, field_facets: Mapping[str, FacetValues] | None = None) -> None:
        self._field_facets: dict[str, FacetValues] = dict(field_facets or {})

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Facets:
        """Build facets from ``{"facet_fields": {field: [[value, count], ...]}}``."""

        raw_fields = payload.get("facet_fields") or {}
        return cls(
            {
                str(name): FacetValues((value, count) for value, count in pairs)
                for name, pairs in raw_fields.items()
            }
        )

    def get_field_facets(self) -> dict[str, FacetValues]:
        return self._field_facets

    def to_dict(self) -> dict[str, dict[str, int]]:
        return {name: values.to_dict() for name, values in self._field_facets.items()}


@dataclass
class RecordCollection:
    """Records and facet counts returned by a backend for one request."""

    records: Sequence[Any] = field(default_factory=list)
    total: int = 0
    facets: Facets = field(default_factory=Facets)

    def get_facets(self) -> Facets:
        return self.facets


__all__ = ["FacetValues", "Facets", "RecordCollection"]

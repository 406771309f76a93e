"""Post-processors that adjust search results before they are rendered."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Protocol, runtime_checkable

from shelfsearch.backend.config.schema import FacetValueRules, coerce_value_lists

from .commands import SearchContext, context_value
from .results import RecordCollection

_LOGGER = logging.getLogger(__name__)

FILTERED_CONTEXTS = frozenset({SearchContext.SEARCH.value, SearchContext.RETRIEVE.value})


@runtime_checkable
class ResultPostProcessor(Protocol):
    """Capability invoked by :class:`SearchService` after a backend answers."""

    def applies_to(self, target_identifier: str) -> bool: ...

    def apply(self, result: RecordCollection, context: SearchContext | str) -> RecordCollection: ...


def backend_identifier(backend: Any) -> str:
    """Return the identifier of ``backend``, accepting plain strings as-is."""

    if isinstance(backend, str):
        return backend
    return str(backend.identifier)


class FacetValueFilter:
    """Hide facet values, or restrict fields to an allow-list of values.

    ``hide`` maps field names to values removed from that field. ``show`` maps
    field names to the only values kept. Hide rules are applied first, so a
    value removed by ``hide`` is never restored by ``show``. Unknown fields and
    values are ignored.
    """

    def __init__(
        self,
        backend: Any,
        hide: Mapping[str, Any] | None = None,
        show: Mapping[str, Any] | None = None,
    ) -> None:
        self.backend_id = backend_identifier(backend)
        self.hide: Mapping[str, tuple[str, ...]] = MappingProxyType(coerce_value_lists(hide))
        self.show: Mapping[str, tuple[str, ...]] = MappingProxyType(coerce_value_lists(show))

    @classmethod
    def from_rules(cls, backend: Any, rules: FacetValueRules) -> FacetValueFilter:
        return cls(backend, hide=rules.hide, show=rules.show)

    def __repr__(self) -> str:
        return (
            f"FacetValueFilter(backend={self.backend_id!r}, "
            f"hide={dict(self.hide)!r}, show={dict(self.show)!r})"
        )

    def applies_to(self, target_identifier: str) -> bool:
        return target_identifier == self.backend_id

    def apply(self, result: RecordCollection, context: SearchContext | str) -> RecordCollection:
        """Mutate the facet values of ``result`` in place and return it."""

        tag = context_value(context)
        if tag not in FILTERED_CONTEXTS:
            _LOGGER.debug("Skipping facet value filter for context %r", tag)
            return result

        field_facets = result.get_facets().get_field_facets()

        for field_name, values in self.hide.items():
            facet_values = field_facets.get(field_name)
            if facet_values is None:
                continue
            removed = facet_values.remove_keys(values)
            if removed:
                _LOGGER.debug("Hid %s value(s) from facet %r: %s", len(removed), field_name, removed)

        for field_name, values in self.show.items():
            facet_values = field_facets.get(field_name)
            if facet_values is None:
                continue
            allowed = set(values)
            removed = facet_values.remove_keys(
                [value for value in list(facet_values) if value not in allowed]
            )
            if removed:
                _LOGGER.debug(
                    "Restricted facet %r to configured values, dropping %s",
                    field_name,
                    removed,
                )

        return result


__all__ = [
    "FILTERED_CONTEXTS",
    "FacetValueFilter",
    "ResultPostProcessor",
    "backend_identifier",
]

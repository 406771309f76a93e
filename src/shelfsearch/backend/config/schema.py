"""Pydantic models describing the search extension configuration file."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


def coerce_value_lists(value: Any) -> dict[str, tuple[str, ...]]:
    """Normalise ``field -> scalar-or-list`` mappings into tuples of strings.

    A scalar entry is treated as a single-element list and ``None`` as an
    empty one, so ``{"format": "Unknown"}`` and ``{"format": ["Unknown"]}``
    describe the same rule.
    """

    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError("Facet value rules must be a mapping of field names")

    normalised: dict[str, tuple[str, ...]] = {}
    for field_name, values in value.items():
        if values is None:
            normalised[str(field_name)] = ()
        elif isinstance(values, (list, tuple, set, frozenset)):
            normalised[str(field_name)] = tuple(str(entry) for entry in values)
        else:
            normalised[str(field_name)] = (str(values),)
    return normalised


class FacetValueRules(ImmutableModel):
    """Values to hide from, or exclusively show in, each facet field."""

    hide: Mapping[str, tuple[str, ...]] = Field(
        default_factory=dict, alias="hide_facet_values"
    )
    show: Mapping[str, tuple[str, ...]] = Field(
        default_factory=dict, alias="show_facet_values"
    )

    @field_validator("hide", "show", mode="before")
    @classmethod
    def _coerce_values(cls, value: Any) -> dict[str, tuple[str, ...]]:
        return coerce_value_lists(value)

    @property
    def is_empty(self) -> bool:
        return not self.hide and not self.show


class SearchConfiguration(ImmutableModel):
    """Top-level configuration keyed by backend identifier."""

    backends: Mapping[str, FacetValueRules] = Field(default_factory=dict)

    @field_validator("backends", mode="before")
    @classmethod
    def _default_backends(cls, value: Any) -> Any:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise ConfigurationError("'backends' must map backend identifiers to rules")
        return {key: rules or {} for key, rules in value.items()}

    def rules_for(self, backend_id: str) -> FacetValueRules:
        """Return the rules for ``backend_id``, or empty rules when undeclared."""

        return self.backends.get(backend_id) or FacetValueRules()


__all__ = [
    "ConfigurationError",
    "FacetValueRules",
    "ImmutableModel",
    "SearchConfiguration",
    "coerce_value_lists",
]

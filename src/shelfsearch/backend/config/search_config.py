"""Configuration loader wrapping the search extension schema models."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .schema import ConfigurationError, FacetValueRules, SearchConfiguration

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
CONFIG_FILE = CONFIG_DIRECTORY / "facets.yaml"
CONFIG_ENV_VAR = "SHELFSEARCH_FACET_CONFIG"

_LOGGER = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as error:
            raise ConfigurationError(f"Malformed YAML in {path.name}: {error}") from error
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


def configuration_path() -> Path:
    """Return the configuration file in use, honouring the environment override."""

    override = os.getenv(CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return CONFIG_FILE


def parse_search_configuration(raw: dict[str, Any]) -> SearchConfiguration:
    """Validate an already-decoded configuration mapping."""

    try:
        return SearchConfiguration.model_validate(raw)
    except ValidationError as error:
        raise ConfigurationError(f"Search configuration validation failed: {error}") from error


@lru_cache(maxsize=1)
def load_search_configuration() -> SearchConfiguration:
    """Load and cache the facet rule configuration from disk."""

    path = configuration_path()
    if not path.exists():
        raise FileNotFoundError(f"Search configuration not found: {path}")

    configuration = parse_search_configuration(_load_yaml(path))
    _LOGGER.debug(
        "Loaded facet rules for %d backend(s) from %s",
        len(configuration.backends),
        path,
    )
    return configuration


def rules_for_backend(backend_id: str) -> FacetValueRules:
    """Return the configured rules for ``backend_id`` (empty when undeclared)."""

    return load_search_configuration().rules_for(backend_id)


def configured_backends() -> tuple[str, ...]:
    """Return the backend identifiers declared in the configuration."""

    return tuple(load_search_configuration().backends)


__all__ = [
    "CONFIG_DIRECTORY",
    "CONFIG_ENV_VAR",
    "CONFIG_FILE",
    "ConfigurationError",
    "FacetValueRules",
    "SearchConfiguration",
    "configuration_path",
    "configured_backends",
    "load_search_configuration",
    "parse_search_configuration",
    "rules_for_backend",
]

"""Utilities for validating facet rule configuration and surfacing issues."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path
from typing import Mapping, Sequence

from .schema import ConfigurationError, FacetValueRules, SearchConfiguration
from .search_config import (
    _load_yaml,
    configuration_path,
    load_search_configuration,
    parse_search_configuration,
)


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def _validate_value_lists(scope: str, rules: Mapping[str, tuple[str, ...]]) -> list[str]:
    errors: list[str] = []

    for field_name, values in rules.items():
        field_scope = f"{scope}.{field_name}"
        if not values:
            errors.append(_format_scope(field_scope, "no facet values listed"))
            continue

        duplicates = sorted(value for value, count in Counter(values).items() if count > 1)
        if duplicates:
            errors.append(
                _format_scope(field_scope, f"duplicate facet values detected: {duplicates}")
            )

    return errors


def validate_backend_rules(backend_id: str, rules: FacetValueRules) -> list[str]:
    """Return advisory issues for the rules configured on ``backend_id``."""

    errors: list[str] = []
    errors.extend(_validate_value_lists(f"{backend_id}.hide_facet_values", rules.hide))
    errors.extend(_validate_value_lists(f"{backend_id}.show_facet_values", rules.show))

    # Hide rules run first, so overlapping fields depend on evaluation order.
    for field_name in sorted(set(rules.hide) & set(rules.show)):
        errors.append(
            _format_scope(
                f"{backend_id}.{field_name}",
                "field is listed in both hide_facet_values and show_facet_values; "
                "hidden values are removed before the show list is applied",
            )
        )

    return errors


def validate_search_configuration(config: SearchConfiguration) -> dict[str, list[str]]:
    """Validate every configured backend and return issues keyed by backend."""

    return {
        backend_id: validate_backend_rules(backend_id, rules)
        for backend_id, rules in config.backends.items()
    }


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate facet value rules and report issues helpful to contributors."
    )
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        help=f"Configuration file to validate (defaults to {configuration_path()})",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running validations from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)

    try:
        if args.path is not None:
            config = parse_search_configuration(_load_yaml(args.path))
        else:
            config = load_search_configuration()
    except (FileNotFoundError, ConfigurationError) as error:
        print(f"failed to load configuration: {error}")
        return 1

    if not config.backends:
        print("no backends configured")
        return 0

    exit_code = 0
    for backend_id, issues in validate_search_configuration(config).items():
        if issues:
            exit_code = 1
            print(f"[{backend_id}] {len(issues)} issue(s) detected:")
            for issue in issues:
                print(f"  - {issue}")
        else:
            print(f"[{backend_id}] OK")

    return exit_code


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())

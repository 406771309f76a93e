"""Translation catalogue helpers backed by packaged JSON resources."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from functools import cache
from importlib import resources
from typing import Any, Mapping

_BASE_LOCALE = "en"
_TRANSLATIONS_PACKAGE = "shelfsearch.translations"
_PLACEHOLDER_PATTERN = re.compile(r"{{\s*([a-zA-Z0-9_.-]+)\s*}}")


@dataclass(frozen=True)
class Translator:
    """Callable helper for retrieving localized strings.

    Unknown keys fall back to the base locale, then to ``default`` when one is
    given, and finally to the key itself.
    ``{{ name }}`` placeholders are replaced from ``params``; placeholders
    without a matching parameter are left as-is.
    """

    locale: str
    _messages: Mapping[str, str]
    _fallback: Mapping[str, str]

    def __call__(
        self,
        key: str,
        params: Mapping[str, Any] | None = None,
        default: str | None = None,
    ) -> str:
        message = self._messages.get(key) or self._fallback.get(key)
        if message is None:
            message = key if default is None else default
        if not params:
            return message

        def _substitute(match: re.Match[str]) -> str:
            name = match.group(1)
            return str(params[name]) if name in params else match.group(0)

        return _PLACEHOLDER_PATTERN.sub(_substitute, message)


@cache
def _available_locales() -> tuple[str, ...]:
    """Return the locales with published translation payloads."""

    root = resources.files(_TRANSLATIONS_PACKAGE)
    locales = sorted(
        entry.name.removesuffix(".json")
        for entry in root.iterdir()
        if entry.name.endswith(".json")
    )
    return tuple(locales) or (_BASE_LOCALE,)


@cache
def _load_messages(locale: str) -> Mapping[str, str]:
    """Load the flat ``key -> message`` table for ``locale``."""

    resource = resources.files(_TRANSLATIONS_PACKAGE).joinpath(f"{locale}.json")
    if not resource.is_file():
        return {}

    with resource.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)

    messages = payload.get("messages") if isinstance(payload, dict) else None
    if not isinstance(messages, dict):
        return {}
    return {str(key): str(value) for key, value in messages.items()}


def available_locales() -> list[str]:
    return list(_available_locales())


def normalise_locale(locale: str | None) -> str:
    """Normalise requested locale to a supported catalogue key."""

    if not locale:
        return _BASE_LOCALE

    normalized = locale.strip().lower().replace("_", "-").split("-")[0]
    return normalized if normalized in _available_locales() else _BASE_LOCALE


def get_translator(locale: str | None = None) -> Translator:
    """Return a translator instance for the requested locale."""

    normalized = normalise_locale(locale)
    return Translator(
        locale=normalized,
        _messages=_load_messages(normalized),
        _fallback=_load_messages(_BASE_LOCALE),
    )


def load_translations(locale: str | None = None) -> dict[str, Any]:
    """Expose the catalogue for ``locale`` alongside its fallback for API consumers."""

    normalized = normalise_locale(locale)
    return {
        "locale": normalized,
        "available_locales": available_locales(),
        "messages": dict(_load_messages(normalized)),
        "fallback": {
            "locale": _BASE_LOCALE,
            "messages": dict(_load_messages(_BASE_LOCALE)),
        },
    }


__all__ = [
    "Translator",
    "available_locales",
    "get_translator",
    "load_translations",
    "normalise_locale",
]

"""Serialise translated strings into a script consumed by the front-end."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from markupsafe import escape

from .catalog import Translator

DEFAULT_VAR_NAME = "catalogString"


@dataclass(frozen=True)
class TranslationString:
    """A client-side key bound to a catalogue message.

    ``escape`` controls whether the translated text is HTML-escaped before it
    is handed to the browser. Messages that deliberately carry markup set it
    to ``False``. ``default`` is used when no catalogue defines ``template``.
    """

    key: str
    template: str
    params: Mapping[str, Any] = field(default_factory=dict)
    escape: bool = True
    default: str | None = None


StringSpec = Union[
    str,
    tuple[str],
    tuple[str, Mapping[str, Any]],
    tuple[str, Mapping[str, Any], str],
    TranslationString,
]


def _coerce_entry(key: str, value: StringSpec) -> TranslationString:
    if isinstance(value, TranslationString):
        return value
    if isinstance(value, str):
        return TranslationString(key=key, template=value)
    if not 1 <= len(value) <= 3:
        raise ValueError(
            f"Translation entry {key!r} must be (template[, params[, default]])"
        )
    template, params, default = (*value, None, None)[:3]
    return TranslationString(
        key=key, template=template, params=dict(params or {}), default=default
    )


class JsTranslations:
    """Collect translation strings and render them as a JavaScript assignment."""

    def __init__(
        self,
        translator: Translator,
        escaper: Callable[[str], str] = escape,
        var_name: str = DEFAULT_VAR_NAME,
    ) -> None:
        self.translator = translator
        self.escaper = escaper
        self.var_name = var_name
        self._strings: dict[str, TranslationString] = {}

    def add_strings(
        self, new: Mapping[str, StringSpec] | Iterable[TranslationString]
    ) -> None:
        """Register strings, replacing any earlier entry with the same key."""

        if isinstance(new, Mapping):
            entries = [_coerce_entry(key, value) for key, value in new.items()]
        else:
            entries = list(new)
        for entry in entries:
            self._strings[entry.key] = entry

    def resolve(self, entry: TranslationString) -> str:
        text = self.translator(entry.template, entry.params, entry.default)
        return str(self.escaper(text)) if entry.escape else text

    def get_json(self) -> str:
        return self.get_json_from(self._strings.values())

    def get_json_from(
        self, strings: Mapping[str, StringSpec] | Iterable[TranslationString]
    ) -> str:
        """Translate ``strings`` and return them as a JSON object."""

        if isinstance(strings, Mapping):
            entries = [_coerce_entry(key, value) for key, value in strings.items()]
        else:
            entries = list(strings)
        return json.dumps({entry.key: self.resolve(entry) for entry in entries})

    def get_script(self) -> str:
        return f"{self.var_name} = {self.get_json()};"


__all__ = ["DEFAULT_VAR_NAME", "JsTranslations", "TranslationString"]

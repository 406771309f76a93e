"""Translation helpers shared by the API and the client-side script renderer."""

from .catalog import (
    Translator,
    available_locales,
    get_translator,
    load_translations,
    normalise_locale,
)
from .js_translations import JsTranslations, TranslationString

__all__ = [
    "JsTranslations",
    "TranslationString",
    "Translator",
    "available_locales",
    "get_translator",
    "load_translations",
    "normalise_locale",
]

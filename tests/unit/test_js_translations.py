"""Unit tests for the client-side translation serialiser."""

from __future__ import annotations

import json

import pytest

from shelfsearch.backend.app.localization import (
    JsTranslations,
    TranslationString,
    get_translator,
)


def _payload(script: str, var_name: str = "catalogString") -> dict[str, str]:
    prefix = f"{var_name} = "
    assert script.startswith(prefix)
    assert script.endswith(";")
    return json.loads(script[len(prefix) : -1])


def test_get_script_assigns_json_to_variable() -> None:
    helper = JsTranslations(get_translator("en"))
    helper.add_strings({"loading": "loading", "close": "close"})

    script = helper.get_script()

    assert _payload(script) == {"loading": "Loading", "close": "Close"}


def test_custom_variable_name() -> None:
    helper = JsTranslations(get_translator("en"), var_name="appStrings")
    helper.add_strings({"close": "close"})

    assert _payload(helper.get_script(), "appStrings") == {"close": "Close"}


def test_escaping_is_controlled_per_entry() -> None:
    helper = JsTranslations(get_translator("en"))
    helper.add_strings(
        [
            TranslationString("syntax_escaped", "search_syntax_error"),
            TranslationString("syntax_markup", "search_syntax_error", escape=False),
        ]
    )

    payload = json.loads(helper.get_json())

    assert "&lt;em&gt;syntax&lt;/em&gt;" in payload["syntax_escaped"]
    assert "<em>syntax</em>" in payload["syntax_markup"]


def test_parameters_are_substituted() -> None:
    helper = JsTranslations(get_translator("en"))

    payload = json.loads(
        helper.get_json_from(
            {"results": ("results_count", {"start": 1, "end": 20, "total": 143})}
        )
    )

    assert payload == {"results": "Showing 1 - 20 of 143"}


def test_later_strings_replace_earlier_keys_and_keep_order() -> None:
    helper = JsTranslations(get_translator("en"))
    helper.add_strings({"a": "close", "b": "loading"})
    helper.add_strings({"a": "error_occurred"})

    payload = json.loads(helper.get_json())

    assert list(payload) == ["a", "b"]
    assert payload["a"] == "An error has occurred"


def test_unknown_keys_fall_back_to_the_key() -> None:
    helper = JsTranslations(get_translator("de"))

    payload = json.loads(helper.get_json_from({"x": "no_such_message", "y": "close"}))

    assert payload == {"x": "no_such_message", "y": "Schließen"}


def test_custom_escaper_is_used() -> None:
    helper = JsTranslations(get_translator("en"), escaper=str.upper)
    helper.add_strings({"close": "close"})

    assert json.loads(helper.get_json()) == {"close": "CLOSE"}


def test_entry_default_is_used_for_missing_messages() -> None:
    helper = JsTranslations(get_translator("en"))

    payload = json.loads(
        helper.get_json_from(
            {
                "missing": ("no_such_message", {}, "Fallback <text>"),
                "present": ("close", None, "Ignored default"),
                "bare": ("loading",),
            }
        )
    )

    assert payload == {
        "missing": "Fallback &lt;text&gt;",
        "present": "Close",
        "bare": "Loading",
    }


def test_default_on_translation_string_is_not_escaped_when_disabled() -> None:
    helper = JsTranslations(get_translator("de"))
    helper.add_strings(
        [TranslationString("hint", "no_such_message", escape=False, default="<b>Hinweis</b>")]
    )

    assert helper.get_script() == 'catalogString = {"hint": "<b>Hinweis</b>"};'


def test_oversized_entries_are_rejected() -> None:
    helper = JsTranslations(get_translator("en"))

    with pytest.raises(ValueError, match="template"):
        helper.add_strings({"x": ("close", {}, "default", "extra")})  # type: ignore[dict-item]

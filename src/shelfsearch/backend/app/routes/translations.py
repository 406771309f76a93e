"""Expose translation catalogues and the client string script."""

from __future__ import annotations

import re

from flask import Blueprint, Response, current_app, jsonify, request

from shelfsearch.backend.app.http import problem_response
from shelfsearch.backend.app.localization import (
    JsTranslations,
    TranslationString,
    get_translator,
    load_translations,
)

blueprint = Blueprint("translations", __name__, url_prefix="/api/v1/translations")

_LOCALE_PATTERN = re.compile(r"^[A-Za-z]{2,3}(?:[-_][A-Za-z0-9]{2,8})?$")

# Strings the front-end scripts look up from the global translation object.
CLIENT_STRINGS: tuple[TranslationString, ...] = (
    TranslationString("loading", "loading"),
    TranslationString("close", "close"),
    TranslationString("error_occurred", "error_occurred"),
    TranslationString("facet_more", "facet_more"),
    TranslationString("facet_less", "facet_less"),
    TranslationString("bulk_noitems_advice", "bulk_noitems_advice"),
    TranslationString("search_syntax_error", "search_syntax_error", escape=False),
)


def _invalid_locale(locale: str):
    return problem_response(
        "invalid_locale", status=400, message=f"Unsupported locale identifier: {locale!r}"
    ).to_response()


@blueprint.get("/")
def get_default_translations():
    """Return translations for the requested or default locale."""

    payload = load_translations(request.args.get("locale"))
    return jsonify(payload), 200


@blueprint.get("/<locale>")
def get_locale_translations(locale: str):
    """Return translations for a specific locale slug."""

    if not _LOCALE_PATTERN.match(locale):
        return _invalid_locale(locale)
    return jsonify(load_translations(locale)), 200


@blueprint.get("/<locale>/script.js")
def get_translation_script(locale: str):
    """Return the client strings as a JavaScript variable assignment."""

    if not _LOCALE_PATTERN.match(locale):
        return _invalid_locale(locale)

    translations = JsTranslations(
        get_translator(locale),
        var_name=current_app.config.get("SHELFSEARCH_JS_VAR_NAME", "catalogString"),
    )
    translations.add_strings(CLIENT_STRINGS)
    return Response(
        translations.get_script(),
        status=200,
        mimetype="application/javascript",
    )

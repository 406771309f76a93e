"""Integration tests for the translations API."""

from __future__ import annotations

import json
from http import HTTPStatus

from flask import Flask
from flask.testing import FlaskClient


def _script_payload(body: str, var_name: str = "catalogString") -> dict[str, str]:
    prefix = f"{var_name} = "
    assert body.startswith(prefix) and body.endswith(";")
    return json.loads(body[len(prefix) : -1])


def test_translations_endpoint_returns_default_catalogue(client: FlaskClient) -> None:
    response = client.get("/api/v1/translations/")
    assert response.status_code == HTTPStatus.OK
    payload = response.get_json()

    assert payload["locale"] == "en"
    assert "de" in payload["available_locales"]
    assert payload["messages"]["close"] == "Close"
    assert payload["fallback"]["locale"] == "en"


def test_translations_endpoint_respects_locale_path(client: FlaskClient) -> None:
    response = client.get("/api/v1/translations/de")
    assert response.status_code == HTTPStatus.OK
    payload = response.get_json()

    assert payload["locale"] == "de"
    assert payload["messages"]["close"] == "Schließen"


def test_invalid_locale_is_rejected(client: FlaskClient) -> None:
    response = client.get("/api/v1/translations/not-a-locale!")

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.get_json()["error"] == "invalid_locale"


def test_translation_script_renders_client_strings(client: FlaskClient) -> None:
    response = client.get("/api/v1/translations/de/script.js")

    assert response.status_code == HTTPStatus.OK
    assert response.mimetype == "application/javascript"
    payload = _script_payload(response.get_data(as_text=True))
    assert payload["close"] == "Schließen"
    assert "<em>Syntax</em>" in payload["search_syntax_error"]
    # Missing German entry falls back to English, escaped.
    assert payload["bulk_noitems_advice"].startswith("No items were selected")


def test_translation_script_variable_name_is_configurable(app: Flask) -> None:
    app.config["SHELFSEARCH_JS_VAR_NAME"] = "vuStrings"

    response = app.test_client().get("/api/v1/translations/en/script.js")

    payload = _script_payload(response.get_data(as_text=True), "vuStrings")
    assert payload["loading"] == "Loading"

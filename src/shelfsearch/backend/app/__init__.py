"""Application factory for the ShelfSearch catalogue helpers."""

from __future__ import annotations

from collections.abc import Iterable
from warnings import warn

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import BadRequest

from shelfsearch.backend.config.schema import SearchConfiguration
from shelfsearch.backend.config.search_config import (
    configuration_path,
    load_search_configuration,
)
from shelfsearch.backend.search import Backend, BackendError, SearchService
from shelfsearch.backend.version import get_project_version

from .http import backend_error_problem, problem_response
from .localization import get_translator
from .routes import register_routes

SEARCH_EXTENSION_KEY = "shelfsearch.search"


def _resolve_configuration(config: SearchConfiguration | None) -> SearchConfiguration:
    if config is not None:
        return config
    try:
        return load_search_configuration()
    except FileNotFoundError:
        warn(
            f"No facet configuration found at {configuration_path()}; "
            "search results will not be filtered.",
            stacklevel=2,
        )
        return SearchConfiguration()


def get_search_service(app: Flask | None = None) -> SearchService:
    """Return the search service bound to ``app`` (or the current app)."""

    target = app if app is not None else current_app
    return target.extensions[SEARCH_EXTENSION_KEY]


def create_app(
    backends: Iterable[Backend] = (),
    config: SearchConfiguration | None = None,
) -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__)

    configuration = _resolve_configuration(config)
    app.extensions[SEARCH_EXTENSION_KEY] = SearchService.from_config(backends, configuration)

    register_routes(app)

    @app.route("/health", methods=["GET"])
    def health_check():
        """Simple health check endpoint for infrastructure monitoring."""

        return jsonify(
            {
                "status": "ok",
                "version": get_project_version(),
                "configured_backends": sorted(configuration.backends),
            }
        )

    @app.errorhandler(BadRequest)
    def handle_bad_request(error: BadRequest):
        """Return consistent JSON responses for malformed payloads."""

        message = error.description or "Invalid request"
        return problem_response("bad_request", status=400, message=message).to_response()

    @app.errorhandler(ValueError)
    def handle_value_error(error: ValueError):
        return problem_response(
            "validation_error", status=400, message=str(error)
        ).to_response()

    @app.errorhandler(BackendError)
    def handle_backend_error(error: BackendError):
        """Translate tagged backend failures into client-facing problems."""

        translator = get_translator(request.args.get("locale"))
        return backend_error_problem(error, translator).to_response()

    return app


__all__ = ["SEARCH_EXTENSION_KEY", "create_app", "get_search_service"]

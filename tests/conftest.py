"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# Make ``src`` importable when pytest runs without an editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from shelfsearch.backend.app import create_app  # noqa: E402
from shelfsearch.backend.config import search_config  # noqa: E402
from shelfsearch.backend.search import RecordCollection, StaticBackend  # noqa: E402
from shelfsearch.backend.search.results import Facets  # noqa: E402

FORMAT_PAYLOAD = {
    "facet_fields": {
        "format": [["Book", 124], ["Unknown", 16], ["Fake", 3]],
        "language": [["English", 90], ["German", 40]],
    }
}


@pytest.fixture()
def search_result() -> RecordCollection:
    """Return a result with ``format`` and ``language`` facet counts."""

    return RecordCollection(total=143, facets=Facets.from_payload(FORMAT_PAYLOAD))


@pytest.fixture()
def solr_backend() -> StaticBackend:
    return StaticBackend("Solr", {"total": 143, "facet_counts": FORMAT_PAYLOAD})


@pytest.fixture(autouse=True)
def _reset_configuration_cache():
    search_config.load_search_configuration.cache_clear()
    yield
    search_config.load_search_configuration.cache_clear()


@pytest.fixture()
def app(solr_backend: StaticBackend) -> Flask:
    """Return a configured Flask application for integration tests."""

    application = create_app(backends=[solr_backend])
    application.config.update(TESTING=True)
    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()

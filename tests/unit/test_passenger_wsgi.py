from flask import Flask


def test_passenger_entrypoint_exposes_application() -> None:
    from shelfsearch.backend import passenger_wsgi

    assert isinstance(passenger_wsgi.application, Flask)
    assert "translations" in passenger_wsgi.application.blueprints

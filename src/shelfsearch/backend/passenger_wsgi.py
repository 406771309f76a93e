"""WSGI entrypoint for Passenger-style hosting of the catalogue helpers."""

from shelfsearch.backend.app import create_app

# Passenger looks up a module-level ``application`` callable.
application = create_app()

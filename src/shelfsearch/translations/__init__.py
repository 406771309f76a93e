"""Packaged translation catalogues, one JSON file per locale."""

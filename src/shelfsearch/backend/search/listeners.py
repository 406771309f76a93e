"""Listeners notified when a backend fails to answer a command."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Final

from .commands import SearchCommand
from .errors import BackendError
from .processors import backend_identifier

_LOGGER = logging.getLogger(__name__)


class ErrorListener(ABC):
    """Base class of listeners that react to backend errors."""

    TAG_PARSER_ERROR: Final = "shelfsearch.search.parser_error"

    def __init__(self, backend: Any) -> None:
        self._backends: set[str] = set()
        self.add_backend(backend)

    def add_backend(self, backend: Any) -> None:
        """Listen for errors raised by ``backend`` as well."""

        self._backends.add(backend_identifier(backend))

    def listen_for_backend(self, backend: Any) -> bool:
        """Return ``True`` when errors from ``backend`` are handled here."""

        return backend_identifier(backend) in self._backends

    @abstractmethod
    def on_search_error(self, error: BackendError, command: SearchCommand) -> BackendError:
        """Inspect ``error`` raised while executing ``command``."""


class ParserErrorListener(ErrorListener):
    """Tag errors caused by queries the backend could not parse."""

    PARSER_ERROR_MARKERS: Final = (
        "org.apache.solr.search.SyntaxError",
        "undefined field",
    )

    def on_search_error(self, error: BackendError, command: SearchCommand) -> BackendError:
        if not self.listen_for_backend(command.target_backend_name):
            return error

        body = error.response_body
        if any(marker in body for marker in self.PARSER_ERROR_MARKERS):
            error.add_tag(self.TAG_PARSER_ERROR)
            _LOGGER.info(
                "Backend %r rejected query as unparseable", command.target_backend_name
            )
        return error


__all__ = ["ErrorListener", "ParserErrorListener"]

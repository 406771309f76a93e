"""Composition root wiring backends, post-processors, and error listeners.

The service owns an ordered list of :class:`ResultPostProcessor` instances and
calls them synchronously once a backend has assembled its response. Backend
failures are handed to the registered :class:`ErrorListener` instances before
being re-raised to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from copy import deepcopy
from typing import Any, Protocol

from shelfsearch.backend.config.schema import SearchConfiguration

from .commands import SearchCommand, context_value
from .errors import BackendError
from .listeners import ErrorListener, ParserErrorListener
from .processors import FacetValueFilter, ResultPostProcessor
from .results import Facets, RecordCollection

_LOGGER = logging.getLogger(__name__)


class Backend(Protocol):
    """Minimal interface expected from a search backend."""

    identifier: str

    def execute(self, command: SearchCommand) -> RecordCollection: ...


class StaticBackend:
    """Backend answering every command from a canned payload.

    A fresh :class:`RecordCollection` is built per call so that post-processors
    never see mutations made during an earlier request. Likewise ``error`` is
    only a template: every failing call raises a new :class:`BackendError`
    carrying the same message, status, and response body.
    """

    def __init__(
        self,
        identifier: str,
        payload: Mapping[str, Any] | None = None,
        *,
        error: BackendError | None = None,
    ) -> None:
        self.identifier = identifier
        self._payload = dict(payload or {})
        self._error = error

    def execute(self, command: SearchCommand) -> RecordCollection:
        if self._error is not None:
            raise BackendError(
                str(self._error),
                backend=self._error.backend,
                status=self._error.status,
                response_body=self._error.response_body,
            )

        payload = deepcopy(self._payload)
        records = list(payload.get("records") or [])
        return RecordCollection(
            records=records,
            total=int(payload.get("total", len(records))),
            facets=Facets.from_payload(payload.get("facet_counts") or {}),
        )


class SearchService:
    """Route commands to backends and run registered extensions."""

    def __init__(self) -> None:
        self._backends: dict[str, Backend] = {}
        self._post_processors: list[ResultPostProcessor] = []
        self._error_listeners: list[ErrorListener] = []

    @classmethod
    def from_config(
        cls, backends: Iterable[Backend], config: SearchConfiguration
    ) -> SearchService:
        """Build a service with facet filters and error listeners from ``config``."""

        service = cls()
        parser_listener: ParserErrorListener | None = None
        for backend in backends:
            service.register_backend(backend)
            if parser_listener is None:
                parser_listener = ParserErrorListener(backend)
                service.add_error_listener(parser_listener)
            else:
                parser_listener.add_backend(backend)

            rules = config.rules_for(backend.identifier)
            if not rules.is_empty:
                service.add_post_processor(FacetValueFilter.from_rules(backend, rules))
        return service

    @property
    def post_processors(self) -> Sequence[ResultPostProcessor]:
        return tuple(self._post_processors)

    @property
    def error_listeners(self) -> Sequence[ErrorListener]:
        return tuple(self._error_listeners)

    def register_backend(self, backend: Backend) -> None:
        self._backends[backend.identifier] = backend

    def add_post_processor(self, processor: ResultPostProcessor) -> None:
        self._post_processors.append(processor)

    def add_error_listener(self, listener: ErrorListener) -> None:
        self._error_listeners.append(listener)

    def get_backend(self, identifier: str) -> Backend:
        try:
            return self._backends[identifier]
        except KeyError:
            raise KeyError(f"Unknown search backend: {identifier}") from None

    def invoke(self, command: SearchCommand) -> SearchCommand:
        """Execute ``command`` and post-process its result."""

        backend = self.get_backend(command.target_backend_name)

        try:
            command.result = backend.execute(command)
        except BackendError as error:
            if error.backend is None:
                error.backend = backend.identifier
            for listener in self._error_listeners:
                if listener.listen_for_backend(backend.identifier):
                    listener.on_search_error(error, command)
            _LOGGER.warning(
                "Backend %r failed during %s: %s",
                backend.identifier,
                context_value(command.context),
                error,
            )
            raise

        for processor in self._post_processors:
            if processor.applies_to(command.target_backend_name):
                processor.apply(command.result, command.context)

        return command


__all__ = ["Backend", "SearchService", "StaticBackend"]

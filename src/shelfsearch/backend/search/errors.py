"""Exceptions raised by search backends."""

from __future__ import annotations


class BackendError(Exception):
    """Raised when a backend fails to answer a command.

    Error listeners annotate the exception with tags so that the HTTP layer
    can pick a user-facing message without inspecting backend internals.
    """

    def __init__(
        self,
        message: str,
        *,
        backend: str | None = None,
        status: int | None = None,
        response_body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.backend = backend
        self.status = status
        self.response_body = response_body or ""
        self._tags: set[str] = set()

    @property
    def tags(self) -> frozenset[str]:
        return frozenset(self._tags)

    def add_tag(self, tag: str) -> None:
        self._tags.add(tag)

    def has_tag(self, tag: str) -> bool:
        return tag in self._tags


__all__ = ["BackendError"]

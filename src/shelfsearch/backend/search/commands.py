"""Operation descriptors passed through the search pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .results import RecordCollection


class SearchContext(str, Enum):
    """Kind of search operation that produced a result."""

    SEARCH = "search"
    RETRIEVE = "retrieve"
    RETRIEVE_BATCH = "retrieve_batch"
    SIMILAR = "similar"
    GET_IDS = "get_ids"
    BROWSE = "browse"
    TERMS = "terms"
    ALPHABETIC_BROWSE = "alphabetic_browse"


def context_value(context: SearchContext | str) -> str:
    """Return the plain string tag for ``context``."""

    return context.value if isinstance(context, SearchContext) else str(context)


@dataclass
class SearchCommand:
    """A single operation routed to one backend.

    ``result`` is populated by the service once the backend has answered.
    """

    target_backend_name: str
    context: SearchContext | str = SearchContext.SEARCH
    arguments: dict[str, Any] = field(default_factory=dict)
    result: RecordCollection | None = None

    @property
    def executed(self) -> bool:
        return self.result is not None

    def get_result(self) -> RecordCollection:
        if self.result is None:
            raise RuntimeError(f"Command for {self.target_backend_name!r} has not been executed")
        return self.result


__all__ = ["SearchCommand", "SearchContext", "context_value"]

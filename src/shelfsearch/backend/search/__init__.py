"""Search pipeline extensions: facet filters, error listeners, and the service root."""

from .commands import SearchCommand, SearchContext
from .errors import BackendError
from .listeners import ErrorListener, ParserErrorListener
from .processors import FacetValueFilter, ResultPostProcessor
from .results import Facets, FacetValues, RecordCollection
from .service import Backend, SearchService, StaticBackend

__all__ = [
    "Backend",
    "BackendError",
    "ErrorListener",
    "FacetValueFilter",
    "FacetValues",
    "Facets",
    "ParserErrorListener",
    "RecordCollection",
    "ResultPostProcessor",
    "SearchCommand",
    "SearchContext",
    "SearchService",
    "StaticBackend",
]

"""JSON error payloads shared by the blueprints and error handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from flask import jsonify

from shelfsearch.backend.search import BackendError, ErrorListener

from .localization import Translator


@dataclass(frozen=True)
class ProblemResponse:
    """Machine-readable error code plus an optional human message."""

    error: str
    status: int
    message: str | None = None
    extra: Mapping[str, Any] | None = None

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.error}
        if self.message:
            payload["message"] = self.message
        if self.extra:
            payload.update(self.extra)
        return payload

    def to_response(self) -> tuple[Any, int]:
        return jsonify(self.as_dict()), self.status


def problem_response(
    error: str,
    *,
    status: int,
    message: str | None = None,
    **extra: Any,
) -> ProblemResponse:
    return ProblemResponse(error=error, status=status, message=message, extra=extra or None)


def backend_error_problem(error: BackendError, translator: Translator) -> ProblemResponse:
    """Map a tagged backend error onto a localized problem payload.

    Queries the backend could not parse are the user's to fix, so they are
    reported as ``400``; anything else is an upstream failure.
    """

    if error.has_tag(ErrorListener.TAG_PARSER_ERROR):
        return problem_response(
            "search_syntax_error",
            status=400,
            message=translator("search_syntax_error"),
            backend=error.backend,
        )
    return problem_response(
        "backend_unavailable",
        status=502,
        message=translator("error_occurred"),
        backend=error.backend,
    )


__all__ = ["ProblemResponse", "backend_error_problem", "problem_response"]

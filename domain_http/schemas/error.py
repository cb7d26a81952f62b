"""Error body schemas produced by the HTTP adapters."""

from __future__ import annotations

from pydantic import BaseModel

from domain_http.domain.exceptions import DomainException


class ProblemDetails(BaseModel):
    """Structured HTTP error body (title, detail, status, type URI)."""

    title: str | None = None
    detail: str | None = None
    status: int | None = None
    type: str | None = None
    instance: str | None = None


class ErrorResponse(BaseModel):
    """Legacy error body holding the reason an exception was raised.

    Deprecated: results should fail with an ``Error`` and be rendered as
    ``ProblemDetails`` instead.
    """

    reason: str

    @classmethod
    def from_exception(cls, exception: DomainException) -> ErrorResponse:
        return cls(reason=exception.message)

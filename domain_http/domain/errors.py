"""Classified failure values carried by failed results."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Error:
    """Unclassified failure with a short title and a human-readable detail."""

    title: str
    detail: str


class UnauthorizedError(Error):
    """The caller lacks permission for the requested operation."""

    def __init__(self, detail: str) -> None:
        super().__init__(title="Unauthorized", detail=detail)


class NotFoundError(Error):
    """The referenced entity does not exist."""

    def __init__(self, detail: str) -> None:
        super().__init__(title="Not found", detail=detail)


class ConflictError(Error):
    """The operation conflicts with the current state."""

    def __init__(self, detail: str) -> None:
        super().__init__(title="Conflict", detail=detail)

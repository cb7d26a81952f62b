"""Exception-channel counterparts of domain errors."""

from __future__ import annotations


class DomainException(Exception):
    """Base exception raised by the domain layer."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnauthorizedException(DomainException):
    """Raised when the caller is not allowed to perform an operation."""


class EntityNotFoundException(DomainException):
    """Raised when a requested entity does not exist."""

    @classmethod
    def create(cls, entity_type: type, id_type: type) -> EntityNotFoundException:
        """Build the standardized not-found exception for an entity keyed by ``id_type``."""
        return cls(f"The {entity_type.__name__} could not be found.")

"""Domain result, error and exception types consumed by the HTTP adapters."""

from domain_http.domain.errors import ConflictError
from domain_http.domain.errors import Error
from domain_http.domain.errors import NotFoundError
from domain_http.domain.errors import UnauthorizedError
from domain_http.domain.exceptions import DomainException
from domain_http.domain.exceptions import EntityNotFoundException
from domain_http.domain.exceptions import UnauthorizedException
from domain_http.domain.result import UNIT
from domain_http.domain.result import Failure
from domain_http.domain.result import Result
from domain_http.domain.result import Success
from domain_http.domain.result import Unit

__all__ = [
    "ConflictError",
    "DomainException",
    "EntityNotFoundException",
    "Error",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
    "UNIT",
    "UnauthorizedError",
    "UnauthorizedException",
    "Unit",
]

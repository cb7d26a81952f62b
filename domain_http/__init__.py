"""Adapters from domain results, errors and exceptions to FastAPI responses."""

from domain_http.core.errors import create_default_problem_details
from domain_http.core.errors import error_to_response
from domain_http.core.filters import DomainExceptionFilter
from domain_http.core.filters import ExceptionContext
from domain_http.core.filters import register_domain_exception_filter
from domain_http.core.results import result_to_response
from domain_http.core.results import result_to_response_async
from domain_http.core.results import unit_result_to_response
from domain_http.core.results import unit_result_to_response_async
from domain_http.schemas.error import ErrorResponse
from domain_http.schemas.error import ProblemDetails

__all__ = [
    "DomainExceptionFilter",
    "ErrorResponse",
    "ExceptionContext",
    "ProblemDetails",
    "create_default_problem_details",
    "error_to_response",
    "register_domain_exception_filter",
    "result_to_response",
    "result_to_response_async",
    "unit_result_to_response",
    "unit_result_to_response_async",
]

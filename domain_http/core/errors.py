"""Default mapping from domain errors to problem details responses."""

from __future__ import annotations

from collections.abc import Callable
import logging

from fastapi import status
from fastapi.responses import JSONResponse

from domain_http.core.config import get_problem_details_settings
from domain_http.domain.errors import ConflictError
from domain_http.domain.errors import Error
from domain_http.domain.errors import NotFoundError
from domain_http.domain.errors import UnauthorizedError
from domain_http.schemas.error import ProblemDetails

logger = logging.getLogger(__name__)

ProblemDetailsSelector = Callable[[Error], ProblemDetails | None]


def _error_status_code(error: Error) -> int:
    if isinstance(error, UnauthorizedError):
        return status.HTTP_403_FORBIDDEN
    if isinstance(error, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(error, ConflictError):
        return status.HTTP_409_CONFLICT
    return status.HTTP_400_BAD_REQUEST


def create_default_problem_details(error: Error) -> ProblemDetails:
    """Build problem details for an error using the standard status table."""

    status_code = _error_status_code(error)
    return ProblemDetails(
        title=error.title,
        detail=error.detail,
        status=status_code,
        type=get_problem_details_settings().problem_type(status_code),
    )


def problem_details_response(problem_details: ProblemDetails) -> JSONResponse:
    """Render problem details with the status code they carry."""

    status_code = status.HTTP_200_OK if problem_details.status is None else problem_details.status
    return JSONResponse(status_code=status_code, content=problem_details.model_dump(exclude_none=True))


def error_to_response(error: Error, on_error: ProblemDetailsSelector | None = None) -> JSONResponse:
    """Convert an error to a response, preferring problem details chosen by ``on_error``."""

    problem_details = on_error(error) if on_error is not None else None
    if problem_details is None:
        problem_details = create_default_problem_details(error)
        logger.debug("Mapped %s to default status %s", type(error).__name__, problem_details.status)
    else:
        logger.info("Selected problem details for %s with status %s", type(error).__name__, problem_details.status)
    return problem_details_response(problem_details)

"""Domain exception filter and its FastAPI handler registration."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import logging

from fastapi import FastAPI
from fastapi import Request
from fastapi import status
from fastapi.responses import JSONResponse
from starlette.responses import Response

from domain_http.domain.exceptions import DomainException
from domain_http.domain.exceptions import EntityNotFoundException
from domain_http.domain.exceptions import UnauthorizedException
from domain_http.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)

ExceptionMapper = Callable[[DomainException, ErrorResponse], Response | None]


@dataclass
class ExceptionContext:
    """State shared between the host and an exception filter for one failed request."""

    exception: BaseException
    request: Request | None = None
    exception_handled: bool = False
    result: Response | None = None


class DomainExceptionFilter:
    """Convert domain exceptions to responses, leaving every other exception alone.

    ``exception_mapper`` extends the filter for application-specific domain
    exceptions. It receives the exception and its ``ErrorResponse`` body and
    may return ``None`` to keep the default ``400 Bad Request``.
    """

    def __init__(self, exception_mapper: ExceptionMapper | None = None) -> None:
        self._exception_mapper = exception_mapper

    def on_exception(self, context: ExceptionContext) -> None:
        exception = context.exception
        if not isinstance(exception, DomainException):
            return

        context.exception_handled = True
        context.result = self._create_result(exception)

    def _create_result(self, exception: DomainException) -> Response:
        error_response = ErrorResponse.from_exception(exception)
        if isinstance(exception, EntityNotFoundException):
            logger.debug("Mapped %s to not found", type(exception).__name__)
            return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=error_response.model_dump())
        if isinstance(exception, UnauthorizedException):
            logger.debug("Mapped %s to unauthorized", type(exception).__name__)
            return Response(status_code=status.HTTP_401_UNAUTHORIZED)

        if self._exception_mapper is not None:
            mapped = self._exception_mapper(exception, error_response)
            if mapped is not None:
                logger.info("Custom mapper handled %s with status %s", type(exception).__name__, mapped.status_code)
                return mapped

        logger.debug("Mapped %s to bad request", type(exception).__name__)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error_response.model_dump())


def register_domain_exception_filter(app: FastAPI, exception_filter: DomainExceptionFilter | None = None) -> None:
    """Attach a domain exception filter to a FastAPI app instance."""

    active_filter = exception_filter if exception_filter is not None else DomainExceptionFilter()

    async def domain_exception_handler(request: Request, exc: DomainException) -> Response:
        context = ExceptionContext(exception=exc, request=request)
        active_filter.on_exception(context)
        if not context.exception_handled or context.result is None:
            logger.debug("Filter left %s unhandled, re-raising", type(exc).__name__)
            raise exc
        return context.result

    app.add_exception_handler(DomainException, domain_exception_handler)

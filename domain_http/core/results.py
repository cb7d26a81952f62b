"""Conversion of domain results into HTTP responses."""

from __future__ import annotations

from collections.abc import Awaitable
from collections.abc import Callable
from typing import Any
from typing import TypeVar

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.responses import Response

from domain_http.core.errors import ProblemDetailsSelector
from domain_http.core.errors import error_to_response
from domain_http.domain.result import Failure
from domain_http.domain.result import Result
from domain_http.domain.result import Success
from domain_http.domain.result import Unit

T = TypeVar("T")


def _ok(value: Any) -> Response:
    return JSONResponse(status_code=status.HTTP_200_OK, content=jsonable_encoder(value))


def _no_content() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def result_to_response(
    result: Result[T],
    on_success: Callable[[T], Response] | None = None,
    on_error: ProblemDetailsSelector | None = None,
) -> Response:
    """Convert a result to a response.

    A success carrying ``Unit`` always becomes ``204 No Content``. Any other
    success is passed to ``on_success`` or, when it is omitted, returned as a
    ``200 OK`` JSON body. A failure is rendered as problem details, using
    ``on_error`` when it selects any and the default status table otherwise.
    """

    match result:
        case Success(value=Unit()):
            return _no_content()
        case Success(value=value):
            return on_success(value) if on_success is not None else _ok(value)
        case Failure(error=error):
            return error_to_response(error, on_error)
        case _:
            raise TypeError(f"Expected Success or Failure, got {type(result).__name__}")


def unit_result_to_response(
    result: Result[Unit],
    on_error: ProblemDetailsSelector | None = None,
) -> Response:
    """Convert a payload-less result: ``204`` on any success, problem details on failure."""

    return result_to_response(result, lambda _: _no_content(), on_error)


async def result_to_response_async(
    pending: Awaitable[Result[T]],
    on_success: Callable[[T], Response] | None = None,
    on_error: ProblemDetailsSelector | None = None,
) -> Response:
    """Await a pending result and convert it with ``result_to_response``."""

    return result_to_response(await pending, on_success, on_error)


async def unit_result_to_response_async(
    pending: Awaitable[Result[Unit]],
    on_error: ProblemDetailsSelector | None = None,
) -> Response:
    """Await a pending payload-less result and convert it with ``unit_result_to_response``."""

    return unit_result_to_response(await pending, on_error)

"""Unit tests for the domain exception filter."""

from __future__ import annotations

import json

import pytest
from fastapi.responses import JSONResponse
from starlette.responses import Response

from domain_http.core.filters import DomainExceptionFilter
from domain_http.core.filters import ExceptionContext
from domain_http.domain.exceptions import DomainException
from domain_http.domain.exceptions import EntityNotFoundException
from domain_http.domain.exceptions import UnauthorizedException
from domain_http.schemas.error import ErrorResponse


class Invoice:
    pass


class InvoiceLockedException(DomainException):
    """Application-specific domain exception."""


def _run(exception: BaseException, exception_filter: DomainExceptionFilter | None = None) -> ExceptionContext:
    context = ExceptionContext(exception=exception)
    (exception_filter or DomainExceptionFilter()).on_exception(context)
    return context


@pytest.mark.parametrize(
    ("exception", "expected"),
    [
        (Exception(), False),
        (RuntimeError("boom"), False),
        (DomainException("Foo"), True),
        (UnauthorizedException("Foo"), True),
        (EntityNotFoundException.create(Invoice, int), True),
    ],
)
def test_only_domain_exceptions_are_marked_handled(exception: BaseException, expected: bool) -> None:
    context = _run(exception)

    assert context.exception_handled is expected


def test_non_domain_exception_leaves_result_unset() -> None:
    context = _run(ValueError("not ours"))

    assert context.result is None


def test_domain_exception_becomes_bad_request() -> None:
    context = _run(DomainException("Foo"))

    assert isinstance(context.result, JSONResponse)
    assert context.result.status_code == 400
    assert json.loads(context.result.body) == {"reason": "Foo"}


def test_entity_not_found_exception_becomes_not_found() -> None:
    context = _run(EntityNotFoundException.create(Invoice, int))

    assert isinstance(context.result, JSONResponse)
    assert context.result.status_code == 404
    assert json.loads(context.result.body) == {"reason": "The Invoice could not be found."}


def test_unauthorized_exception_becomes_bodyless_unauthorized() -> None:
    context = _run(UnauthorizedException("Foo"))

    assert context.result is not None
    assert context.result.status_code == 401
    assert context.result.body == b""


def test_custom_mapper_response_is_used() -> None:
    calls: list[tuple[DomainException, ErrorResponse]] = []
    mapped = Response(status_code=200)

    def mapper(exception: DomainException, error_response: ErrorResponse) -> Response:
        calls.append((exception, error_response))
        return mapped

    exception = InvoiceLockedException("Invoice is locked")
    context = _run(exception, DomainExceptionFilter(mapper))

    assert context.exception_handled is True
    assert context.result is mapped
    assert calls == [(exception, ErrorResponse(reason="Invoice is locked"))]


def test_custom_mapper_returning_none_falls_back_to_bad_request() -> None:
    context = _run(DomainException("Foo"), DomainExceptionFilter(lambda exception, response: None))

    assert context.result is not None
    assert context.result.status_code == 400
    assert json.loads(context.result.body) == {"reason": "Foo"}


def test_custom_mapper_is_not_consulted_for_known_exceptions() -> None:
    def mapper(exception: DomainException, error_response: ErrorResponse) -> Response:
        raise AssertionError("mapper should not run")

    exception_filter = DomainExceptionFilter(mapper)

    assert _run(UnauthorizedException("Foo"), exception_filter).result.status_code == 401
    assert _run(EntityNotFoundException("Gone"), exception_filter).result.status_code == 404

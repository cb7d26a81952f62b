"""Success/failure sum type returned by domain operations."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic
from typing import TypeVar

from domain_http.domain.errors import Error

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class Unit:
    """Marker payload for operations that produce no data."""


UNIT = Unit()


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome holding the produced value."""

    value: T

    @staticmethod
    def unit() -> Success[Unit]:
        return Success(UNIT)

    def match(self, on_success: Callable[[T], R], on_failure: Callable[[Error], R]) -> R:
        return on_success(self.value)


@dataclass(frozen=True)
class Failure(Generic[T]):
    """Failed outcome holding the error that caused it."""

    error: Error

    def match(self, on_success: Callable[[T], R], on_failure: Callable[[Error], R]) -> R:
        return on_failure(self.error)


Result = Success[T] | Failure[T]

"""Outcomes: the success-or-failure value every service returns.

Invariants:
    - A service returns exactly one Success or Failure, never None
    - Failure carries a kind and a client-safe message
    - unwrap() is the only place an Outcome turns into an exception

Design Decisions:
    - Frozen dataclasses over exceptions inside services: the orchestration reads
      as a state machine (validate -> query -> map) without try/except at each step
    - Routes unwrap; error handlers translate. Business logic never sees HTTP.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from nc_news.core.domain_types import ErrorKind
from nc_news.core.errors import (
    BAD_REQUEST_MESSAGE, INTERNAL_ERROR_MESSAGE, INVALID_ID_MESSAGE, error_for,
)

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    payload: T


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str


Outcome = Union[Success[T], Failure]


def invalid_id() -> Failure:
    return Failure(ErrorKind.INVALID_INPUT, INVALID_ID_MESSAGE)


def bad_request() -> Failure:
    return Failure(ErrorKind.BAD_REQUEST, BAD_REQUEST_MESSAGE)


def not_found(entity: str) -> Failure:
    return Failure(ErrorKind.NOT_FOUND, f"{entity} not found")


def internal_error() -> Failure:
    return Failure(ErrorKind.INTERNAL, INTERNAL_ERROR_MESSAGE)


def unwrap(outcome: "Outcome[T]") -> T:
    """Return the payload of a Success, raise the matching NcNewsError otherwise."""
    if isinstance(outcome, Failure):
        raise error_for(outcome.kind, outcome.message)
    return outcome.payload

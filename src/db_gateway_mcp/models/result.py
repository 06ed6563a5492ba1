"""Explicit success/failure results used on every internal failure path."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

from sqlalchemy.exc import DBAPIError

T = TypeVar("T")


class FailureKind(Enum):
    """Category of an operation failure."""

    CONNECTION = "connection"
    CATALOG_QUERY = "catalog_query"
    QUERY_EXECUTION = "query_execution"
    ENCODING = "encoding"


@dataclass(frozen=True)
class Failure:
    """A failure carried as data: its kind and the underlying message text."""

    kind: FailureKind
    message: str

    @classmethod
    def from_exception(cls, kind: FailureKind, exc: BaseException) -> "Failure":
        """
        Build a failure from a raised exception.

        SQLAlchemy wraps driver exceptions in DBAPIError and decorates the
        text with the SQL and a documentation link. The driver's own message
        is what callers see, so the wrapped exception is used when present.
        """
        return cls(kind=kind, message=error_message(exc))


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result holding a value."""

    value: T


@dataclass(frozen=True)
class Err:
    """Failed result holding a Failure."""

    failure: Failure

    @property
    def message(self) -> str:
        return self.failure.message


Result = Union[Ok[T], Err]


def error_message(exc: BaseException) -> str:
    """Return the driver-level message for an exception."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        message = str(exc.orig).strip()
        if message:
            return message
    return str(exc)

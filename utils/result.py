"""
utils/result.py
---------------
Result values returned by every repository call.

A repository never returns ``None`` for a failed query: callers receive
exactly one of ``Success``, ``NotFound`` or ``Failure`` and branch on it.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class RepositoryError(Exception):
    """Raised (or wrapped in a Failure) when a store operation fails."""


class RecordNotFoundError(RepositoryError):
    """Raised by ``NotFound.unwrap()``."""


@dataclass(frozen=True)
class Success(Generic[T]):
    """The statement ran and produced ``value`` (possibly an empty list)."""
    value: T

    ok = True
    is_not_found = False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True)
class NotFound:
    """A single-row lookup matched nothing."""
    what: str = "record"

    ok = False
    is_not_found = True

    def unwrap(self):
        raise RecordNotFoundError(f"{self.what} not found")

    def unwrap_or(self, default: Any) -> Any:
        return default


@dataclass(frozen=True)
class Failure:
    """
    The store rejected the statement.

    Attributes:
        error: A RepositoryError; its ``__cause__`` holds the driver exception.
    """
    error: RepositoryError

    ok = False
    is_not_found = False

    def unwrap(self):
        raise self.error

    def unwrap_or(self, default: Any) -> Any:
        return default


Result = Union[Success[T], NotFound, Failure]


def failure_from(message: str, exc: Exception) -> Failure:
    """Wrap a driver exception in a Failure, keeping it as the cause."""
    error = RepositoryError(f"{message}: {exc}")
    error.__cause__ = exc
    return Failure(error)

"""
Error taxonomy and the tagged result returned by the service layer.

Services never let one of the three error kinds escape as an
exception.  Each operation returns a :class:`Result` that carries
either the produced value or a :class:`ServiceError` describing why the
call was rejected.  Callers that prefer exceptions can call
:meth:`Result.unwrap`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ServiceError(Exception):
    """Base class for failures reported by the service layer."""

    kind = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """A payload is missing a required field or carries an invalid value."""

    kind = "validation_error"


class NotFoundError(ServiceError):
    """The requested identifier is empty or not present in the store."""

    kind = "not_found"


class StorageError(ServiceError):
    """The underlying store failed to read or persist a record."""

    kind = "storage_error"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Success value or typed failure of a service call."""

    value: Optional[T] = None
    error: Optional[ServiceError] = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def err(cls, error: ServiceError) -> "Result[T]":
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

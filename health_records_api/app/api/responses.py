"""
Translation of service results into HTTP responses.

Handlers pass the ``Result`` returned by a service to
:func:`unwrap_or_raise`, which returns the value or raises an
``HTTPException`` whose status code reflects the error kind.
"""

from typing import Dict, Type, TypeVar

from fastapi import HTTPException, status

from ..core.errors import NotFoundError, Result, ServiceError, StorageError, ValidationError

T = TypeVar("T")

STATUS_BY_ERROR: Dict[Type[ServiceError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def unwrap_or_raise(result: Result[T]) -> T:
    if result.is_ok:
        return result.value  # type: ignore[return-value]
    error = result.error
    status_code = STATUS_BY_ERROR.get(type(error), status.HTTP_500_INTERNAL_SERVER_ERROR)
    raise HTTPException(status_code=status_code, detail=error.message)

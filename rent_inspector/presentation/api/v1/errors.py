"""Translate store results and validation errors into HTTP errors."""

from typing import TypeVar

from fastapi import HTTPException, status

from rent_inspector.domain.exceptions import (
    EntityNotFoundError,
    FieldValidationError,
    InvalidDataError,
    NoRecordsToDeleteError,
    StoreError,
    StoreInitializationError,
)
from rent_inspector.domain.results import StoreResult

T = TypeVar("T")


def status_for(error: StoreError) -> int:
    if isinstance(error, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(error, InvalidDataError):
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    if isinstance(error, NoRecordsToDeleteError):
        return status.HTTP_409_CONFLICT
    if isinstance(error, StoreInitializationError):
        return status.HTTP_503_SERVICE_UNAVAILABLE
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def unwrap_or_raise(result: StoreResult[T]) -> T:
    """Return the result value or raise the matching HTTPException."""
    if result.error is not None:
        raise HTTPException(status_code=status_for(result.error), detail=str(result.error))
    return result.value


def validation_error(exc: FieldValidationError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail={"field": exc.field, "code": exc.code, "message": exc.message},
    )

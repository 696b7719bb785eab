"""Explicit success/failure values returned by the inspection store."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from rent_inspector.domain.exceptions import StoreError

T = TypeVar("T")


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    """Outcome of a store operation.

    The store never raises across its public boundary; callers inspect
    ``ok`` and either ``value`` or ``error`` instead.
    """

    value: T | None = None
    error: StoreError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> "StoreResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: StoreError) -> "StoreResult[T]":
        return cls(error=error)

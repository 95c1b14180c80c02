"""Explicit outcomes returned by the service layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class FailureKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    STORAGE = "storage"


@dataclass(frozen=True)
class ServiceFailure:
    kind: FailureKind
    message: str


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """Either a value or a failure, never both."""

    value: Optional[T] = None
    failure: Optional[ServiceFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: T) -> "ServiceResult[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, kind: FailureKind, message: str) -> "ServiceResult[T]":
        return cls(failure=ServiceFailure(kind=kind, message=message))


__all__ = ["FailureKind", "ServiceFailure", "ServiceResult"]

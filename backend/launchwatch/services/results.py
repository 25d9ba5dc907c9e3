"""
Explicit success/failure values returned by mutation handlers.

Handlers never raise for authorization outcomes; callers inspect
``result.ok`` (or ``result.error``) and decide how to surface the failure.
"""

import enum
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, enum.Enum):
    UNAUTHENTICATED = "unauthenticated"  # caller required but absent
    FORBIDDEN = "forbidden"  # caller known but not allowed to touch the row
    NOT_FOUND = "not_found"  # target row does not exist


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind) -> "Result[T]":
        return cls(error=error)

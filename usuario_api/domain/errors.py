"""
Expected failure kinds and the Result wrapper that carries them.

Services return these instead of raising them; the HTTP layer decides the
status code. Anything else (database down, bugs) still propagates as an
exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ServiceError(Exception):
    """Base class for expected, terminal service outcomes."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConflictError(ServiceError):
    """A uniqueness rule (email, phone number) would be violated."""


class NotFoundError(ServiceError):
    """Lookup by email or id found nothing."""


class AuthError(ServiceError):
    """Bearer token missing, malformed, badly signed or expired; or bad credentials."""


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[ServiceError] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ServiceError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

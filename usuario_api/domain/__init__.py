"""Domain records and the error kinds returned by the services."""

from .errors import AuthError, ConflictError, NotFoundError, Result, ServiceError
from .records import (
    Account,
    AccountPatch,
    AccountProfile,
    Address,
    AddressPatch,
    Phone,
    PhonePatch,
)

__all__ = [
    "Account",
    "AccountPatch",
    "AccountProfile",
    "Address",
    "AddressPatch",
    "Phone",
    "PhonePatch",
    "AuthError",
    "ConflictError",
    "NotFoundError",
    "Result",
    "ServiceError",
]

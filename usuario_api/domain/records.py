"""Plain records exchanged between services and repositories.

``*Patch`` records are partial updates: a ``None`` field means "leave
unchanged", never "clear".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Account:
    id: Optional[int] = None
    email: Optional[str] = None
    password_hash: Optional[str] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class AccountPatch:
    name: Optional[str] = None
    email: Optional[str] = None
    # plaintext; the merger hashes it into Account.password_hash
    password: Optional[str] = None


@dataclass(frozen=True)
class Address:
    id: Optional[int] = None
    street: Optional[str] = None
    number: Optional[str] = None
    complement: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    state: Optional[str] = None
    owner_id: Optional[int] = None


@dataclass(frozen=True)
class AddressPatch:
    street: Optional[str] = None
    number: Optional[str] = None
    complement: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    state: Optional[str] = None


@dataclass(frozen=True)
class Phone:
    id: Optional[int] = None
    number: Optional[str] = None
    area_code: Optional[str] = None
    type: Optional[str] = None
    owner_id: Optional[int] = None


@dataclass(frozen=True)
class PhonePatch:
    number: Optional[str] = None
    area_code: Optional[str] = None
    type: Optional[str] = None


@dataclass(frozen=True)
class AccountProfile:
    """An account together with the sub-resources that point at it."""

    account: Account
    addresses: list[Address] = field(default_factory=list)
    phones: list[Phone] = field(default_factory=list)

"""The collaborators every service is constructed from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from usuario_api.core.config import Settings, get_settings
from usuario_api.core.security import CredentialHasher
from usuario_api.core.tokens import TokenCodec
from usuario_api.repositories import AccountRepository, AddressRepository, PhoneRepository


@dataclass
class ServiceContext:
    accounts: Any
    addresses: Any
    phones: Any
    hasher: CredentialHasher
    tokens: TokenCodec


def build_sql_context(
    settings: Optional[Settings] = None,
    *,
    hasher: Optional[CredentialHasher] = None,
) -> ServiceContext:
    """Wire the SQLAlchemy repositories with the configured hasher and token codec."""
    settings = settings or get_settings()
    return ServiceContext(
        accounts=AccountRepository(),
        addresses=AddressRepository(),
        phones=PhoneRepository(),
        hasher=hasher or CredentialHasher(),
        tokens=TokenCodec.from_settings(settings),
    )

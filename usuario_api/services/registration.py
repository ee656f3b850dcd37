"""Account registration with email uniqueness."""

from __future__ import annotations

import logging

from usuario_api.core.security import CredentialHasher
from usuario_api.domain.errors import ConflictError, Result
from usuario_api.domain.records import Account
from usuario_api.repositories.errors import DuplicateKeyError

logger = logging.getLogger(__name__)


class RegistrationService:
    def __init__(self, accounts, hasher: CredentialHasher) -> None:
        self._accounts = accounts
        self._hasher = hasher

    def register(self, email: str, password: str, *, name: str | None = None) -> Result[Account]:
        """Create an account, hashing ``password`` before anything is stored.

        The existence check only gives a quick, friendly conflict. Two
        concurrent registrations can both pass it; the unique constraint on
        the email column then rejects the second insert, which is reported as
        the same ConflictError.
        """
        if self._accounts.exists_by_email(email):
            logger.info("registration refused, email already in use: %s", email)
            return Result.failure(ConflictError(f"Email ja cadastrado: {email}"))
        account = Account(email=email, password_hash=self._hasher.hash(password), name=name)
        try:
            saved = self._accounts.add(account)
        except DuplicateKeyError:
            logger.info("registration lost race for email: %s", email)
            return Result.failure(ConflictError(f"Email ja cadastrado: {email}"))
        logger.info("account registered id=%s email=%s", saved.id, saved.email)
        return Result.success(saved)

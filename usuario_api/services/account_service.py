"""
Account use cases: registration, login, lookup, deletion and token-scoped updates.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from usuario_api.core.tokens import BEARER_PREFIX
from usuario_api.domain.errors import AuthError, ConflictError, NotFoundError, Result
from usuario_api.domain.records import Account, AccountPatch, AccountProfile
from usuario_api.repositories.errors import DuplicateKeyError, RecordNotFoundError

from .context import ServiceContext
from .identity import IdentityResolver
from .merger import UpdateMerger
from .registration import RegistrationService

logger = logging.getLogger(__name__)


class AccountService:
    """Orchestrates the account lifecycle: Unregistered -> Registered -> Deleted."""

    def __init__(self, context: ServiceContext) -> None:
        self.context = context
        self.registration = RegistrationService(context.accounts, context.hasher)
        self.resolver = IdentityResolver(context.accounts, context.tokens)
        self.merger = UpdateMerger(context.hasher)

    # -------------------------------------- registro --------------------------------------
    def register(self, email: str, password: str, *, name: str | None = None) -> Result[Account]:
        return self.registration.register(email, password, name=name)

    def email_exists(self, email: str) -> bool:
        return self.context.accounts.exists_by_email(email)

    # -------------------------------------- login --------------------------------------
    def login(self, email: str, password: str) -> Result[str]:
        """Check the credentials and return an ``Authorization`` value (``"Bearer <jwt>"``)."""
        accounts = self.context.accounts
        hasher = self.context.hasher
        account = accounts.find_by_email(email)
        if account is None or not hasher.verify(password, account.password_hash):
            logger.info("login failed for email=%s", email)
            return Result.failure(AuthError("Credenciais invalidas"))
        if hasher.needs_rehash(account.password_hash):
            try:
                accounts.save(replace(account, password_hash=hasher.hash(password)))
            except RecordNotFoundError:
                return Result.failure(AuthError("Credenciais invalidas"))
        logger.info("login ok for account id=%s", account.id)
        return Result.success(BEARER_PREFIX + self.context.tokens.issue(account.email))

    # -------------------------------------- consulta --------------------------------------
    def find_by_email(self, email: str) -> Result[Account]:
        account = self.context.accounts.find_by_email(email)
        if account is None:
            return Result.failure(NotFoundError(f"Email nao encontrado: {email}"))
        return Result.success(account)

    def profile(self, email: str) -> Result[AccountProfile]:
        """The account plus the addresses and phones whose owner-id points at it."""
        found = self.find_by_email(email)
        if not found.ok:
            return Result.failure(found.error)
        account = found.value
        return Result.success(
            AccountProfile(
                account=account,
                addresses=self.context.addresses.list_by_owner(account.id),
                phones=self.context.phones.list_by_owner(account.id),
            )
        )

    # -------------------------------------- atualizacao --------------------------------------
    def update_as_caller(self, authorization: str | None, partial: AccountPatch) -> Result[Account]:
        resolved = self.resolver.resolve(authorization)
        if not resolved.ok:
            return Result.failure(resolved.error)
        merged = self.merger.merge(resolved.value, partial)
        try:
            saved = self.context.accounts.save(merged)
        except DuplicateKeyError:
            return Result.failure(ConflictError(f"Email ja cadastrado: {merged.email}"))
        except RecordNotFoundError:
            # deleted between the token lookup and the write
            return Result.failure(NotFoundError(f"Email nao localizado: {resolved.value.email}"))
        return Result.success(saved)

    # -------------------------------------- remocao --------------------------------------
    def delete_by_email(self, email: str) -> Result[None]:
        """Delete the account and everything it owns; an unknown email is a no-op."""
        account = self.context.accounts.find_by_email(email)
        if account is not None:
            self.context.addresses.delete_by_owner(account.id)
            self.context.phones.delete_by_owner(account.id)
            logger.info("deleting account id=%s", account.id)
        self.context.accounts.delete_by_email(email)
        return Result.success(None)

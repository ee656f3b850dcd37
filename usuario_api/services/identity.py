"""Bearer token -> stored account resolution."""

from __future__ import annotations

import logging

import jwt

from usuario_api.core.tokens import BEARER_PREFIX, TokenCodec
from usuario_api.domain.errors import AuthError, NotFoundError, Result
from usuario_api.domain.records import Account

logger = logging.getLogger(__name__)


class IdentityResolver:
    """Turns an ``Authorization`` header value into the caller's account.

    AuthError means the token itself is unusable; NotFoundError means the token
    is valid but its email no longer has an account.
    """

    def __init__(self, accounts, tokens: TokenCodec) -> None:
        self._accounts = accounts
        self._tokens = tokens

    def resolve(self, authorization: str | None) -> Result[Account]:
        raw = authorization or ""
        if len(raw) < len(BEARER_PREFIX) or not raw.startswith(BEARER_PREFIX):
            logger.info("authorization rejected: missing bearer prefix")
            return Result.failure(AuthError("Token invalido"))
        try:
            email = self._tokens.extract_email(raw[len(BEARER_PREFIX):])
        except jwt.PyJWTError as exc:
            logger.info("authorization rejected: %s", exc)
            return Result.failure(AuthError("Token invalido ou expirado"))
        account = self._accounts.find_by_email(email)
        if account is None:
            return Result.failure(NotFoundError(f"Email nao localizado: {email}"))
        return Result.success(account)

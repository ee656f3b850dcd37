"""Utilities for issuing and validating access JWTs."""

from __future__ import annotations

import time
from typing import Any

import jwt

from .config import Settings

BEARER_PREFIX = "Bearer "


class TokenCodec:
    """Signs and verifies HS256 access tokens whose ``sub`` claim is the account email."""

    def __init__(self, secret: str, *, algorithm: str = "HS256", ttl_seconds: int = 3600) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._ttl_seconds = ttl_seconds

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenCodec":
        return cls(
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            ttl_seconds=settings.jwt_ttl_seconds,
        )

    def issue(self, email: str) -> str:
        """Create a signed JWT for ``email``.

        The raw token is returned; callers that hand it to clients prepend
        :data:`BEARER_PREFIX` themselves.
        """
        now = int(time.time())
        payload: dict[str, Any] = {
            "sub": email,
            "iat": now,
            "exp": now + self._ttl_seconds,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def extract_email(self, token: str) -> str:
        """Verify ``token`` and return its subject.

        Raises
        ------
        jwt.PyJWTError
            When the signature, expiry or subject claim is invalid.
        """
        payload = jwt.decode(
            token,
            self._secret,
            algorithms=[self._algorithm],
            options={"require": ["sub", "exp"]},
        )
        email = payload.get("sub")
        if not isinstance(email, str) or not email:
            raise jwt.InvalidTokenError("token sem email")
        return email

"""Security helpers (hashing and verification)."""

from __future__ import annotations

from argon2 import PasswordHasher, exceptions as argon_exc


class CredentialHasher:
    """One-way Argon2 transform for account passwords."""

    def __init__(self, **params) -> None:
        # params go straight to argon2.PasswordHasher (time_cost, memory_cost, ...)
        self._ph = PasswordHasher(**params)

    def hash(self, password: str) -> str:
        return self._ph.hash(password)

    def verify(self, password: str, stored_hash: str | None) -> bool:
        if not stored_hash:
            return False
        try:
            return self._ph.verify(stored_hash, password)
        except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
            return False

    def needs_rehash(self, stored_hash: str) -> bool:
        """True when ``stored_hash`` was produced with other Argon2 parameters."""
        try:
            return self._ph.check_needs_rehash(stored_hash)
        except argon_exc.InvalidHashError:
            return True

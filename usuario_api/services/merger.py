"""Partial-update merge shared by accounts, addresses and phones."""

from __future__ import annotations

from dataclasses import fields, replace
from typing import TypeVar

from usuario_api.core.security import CredentialHasher

R = TypeVar("R")

# patch field -> record field that stores its hash
SECRET_FIELDS = {"password": "password_hash"}
PROTECTED_FIELDS = frozenset({"id", "owner_id"})


class UpdateMerger:
    """Applies a ``*Patch`` onto a record without clobbering unset fields.

    A patch field that is not ``None`` replaces the record's value; ``None``
    keeps it. There is deliberately no way to clear a field. Secrets are
    hashed on the way in, and ``id``/``owner_id`` are never copied from a
    patch. The merge is pure: a new record is returned and nothing is saved.
    """

    def __init__(self, hasher: CredentialHasher) -> None:
        self._hasher = hasher

    def merge(self, existing: R, partial) -> R:
        known = {f.name for f in fields(existing)}
        changes = {}
        for item in fields(partial):
            value = getattr(partial, item.name)
            if value is None or item.name in PROTECTED_FIELDS:
                continue
            target = SECRET_FIELDS.get(item.name, item.name)
            if target not in known:
                raise TypeError(
                    f"{type(partial).__name__}.{item.name} does not apply to {type(existing).__name__}"
                )
            changes[target] = self._hasher.hash(value) if item.name in SECRET_FIELDS else value
        return replace(existing, **changes)

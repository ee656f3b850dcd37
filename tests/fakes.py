"""In-memory stand-ins for the SQL repositories."""
from __future__ import annotations

import itertools
from dataclasses import replace

from usuario_api.repositories.errors import DuplicateKeyError, RecordNotFoundError

TEST_SECRET = "test-secret"


class InMemoryStore:
    """Keyed by id; optional single unique field, like telefone.numero."""

    def __init__(self, unique_field: str | None = None) -> None:
        self.rows: dict[int, object] = {}
        self._ids = itertools.count(1)
        self._unique_field = unique_field

    def _check_unique(self, record) -> None:
        if not self._unique_field:
            return
        value = getattr(record, self._unique_field)
        if value is None:
            return
        for other in self.rows.values():
            if other.id != record.id and getattr(other, self._unique_field) == value:
                raise DuplicateKeyError(f"{self._unique_field}={value}")

    def get(self, record_id: int):
        return self.rows.get(record_id)

    def list_by_owner(self, owner_id: int) -> list:
        return [row for row in self.rows.values() if row.owner_id == owner_id]

    def add(self, record):
        self._check_unique(record)
        saved = replace(record, id=next(self._ids))
        self.rows[saved.id] = saved
        return saved

    def save(self, record):
        if record.id not in self.rows:
            raise RecordNotFoundError(record.id)
        self._check_unique(record)
        self.rows[record.id] = record
        return record

    def delete_by_owner(self, owner_id: int) -> None:
        for key in [key for key, row in self.rows.items() if row.owner_id == owner_id]:
            del self.rows[key]


class InMemoryAccounts(InMemoryStore):
    def __init__(self) -> None:
        super().__init__(unique_field="email")
        self.lookups = 0

    def exists_by_email(self, email: str) -> bool:
        self.lookups += 1
        return any(row.email == email for row in self.rows.values())

    def find_by_email(self, email: str):
        self.lookups += 1
        for row in self.rows.values():
            if row.email == email:
                return row
        return None

    def delete_by_email(self, email: str) -> None:
        for key in [key for key, row in self.rows.items() if row.email == email]:
            del self.rows[key]

"""
Smoke tests for the SQL repositories against a temporary SQLite database.
"""
from __future__ import annotations

import pytest
from sqlalchemy import inspect

from usuario_api.db import get_engine
from usuario_api.db.create_tables import create_all
from usuario_api.domain.records import Account, Address, Phone
from usuario_api.repositories import (
    AccountRepository,
    AddressRepository,
    DuplicateKeyError,
    PhoneRepository,
    RecordNotFoundError,
)


def test_account_add_find_and_delete(db_env):
    repo = AccountRepository()
    saved = repo.add(Account(email="alice@example.com", password_hash="hash", name="Alice"))

    assert saved.id == 1
    assert repo.exists_by_email("alice@example.com")
    assert repo.find_by_email("alice@example.com") == saved
    assert repo.find_by_email("ALICE@example.com") is None

    repo.delete_by_email("alice@example.com")
    assert not repo.exists_by_email("alice@example.com")
    repo.delete_by_email("alice@example.com")  # apagar de novo nao falha


def test_account_email_unique_constraint(db_env):
    repo = AccountRepository()
    repo.add(Account(email="dup@example.com", password_hash="h1"))

    with pytest.raises(DuplicateKeyError):
        repo.add(Account(email="dup@example.com", password_hash="h2"))

    assert repo.find_by_email("dup@example.com").password_hash == "h1"


def test_account_save_updates_row(db_env):
    repo = AccountRepository()
    saved = repo.add(Account(email="bob@example.com", password_hash="hash"))

    updated = repo.save(Account(id=saved.id, email="bob@example.com", password_hash="hash", name="Bob"))

    assert updated.name == "Bob"
    assert repo.find_by_email("bob@example.com").name == "Bob"


def test_address_roundtrip_and_owner_listing(db_env):
    repo = AddressRepository()
    first = repo.add(Address(street="Rua A", number="10", city="Recife", state="PE", postal_code="50000-000", owner_id=7))
    repo.add(Address(street="Rua B", owner_id=8))

    assert repo.get(first.id) == first
    assert [a.id for a in repo.list_by_owner(7)] == [first.id]

    repo.delete_by_owner(7)
    assert repo.get(first.id) is None
    assert len(repo.list_by_owner(8)) == 1


def test_phone_number_is_unique(db_env):
    repo = PhoneRepository()
    repo.add(Phone(number="999990000", area_code="81", type="celular", owner_id=1))

    with pytest.raises(DuplicateKeyError):
        repo.add(Phone(number="999990000", area_code="11", type="fixo", owner_id=2))

    assert len(repo.list_by_owner(2)) == 0


def test_create_all_is_repeatable_and_declares_unique_columns(db_env):
    assert create_all() == ["endereco", "telefone", "usuario"]

    inspector = inspect(get_engine())
    unique_usuario = {tuple(c["column_names"]) for c in inspector.get_unique_constraints("usuario")}
    unique_telefone = {tuple(c["column_names"]) for c in inspector.get_unique_constraints("telefone")}
    assert ("email",) in unique_usuario
    assert ("numero",) in unique_telefone


def test_save_of_missing_row_raises_record_not_found(db_env):
    with pytest.raises(RecordNotFoundError):
        AccountRepository().save(Account(id=99, email="ghost@example.com", password_hash="h"))
    with pytest.raises(RecordNotFoundError):
        AddressRepository().save(Address(id=99, city="Recife", owner_id=1))
    with pytest.raises(RecordNotFoundError):
        PhoneRepository().save(Phone(id=99, number="1", owner_id=1))

from __future__ import annotations

import pytest

from usuario_api.domain.records import Account, AccountPatch, Address, AddressPatch
from usuario_api.services.merger import UpdateMerger


@pytest.fixture()
def merger(hasher):
    return UpdateMerger(hasher)


def test_unset_fields_are_left_untouched(merger):
    existing = Address(id=3, street="Rua A", number="10", city="Olinda", state="PE", owner_id=1)

    merged = merger.merge(existing, AddressPatch(city="Recife"))

    assert merged == Address(id=3, street="Rua A", number="10", city="Recife", state="PE", owner_id=1)
    assert existing.city == "Olinda"


def test_empty_string_is_a_value_not_a_clear(merger):
    existing = Address(id=1, complement="Apto 1")

    assert merger.merge(existing, AddressPatch(complement="")).complement == ""
    assert merger.merge(existing, AddressPatch()).complement == "Apto 1"


def test_absent_password_keeps_hash(merger, hasher):
    existing = Account(id=1, email="a@x.com", password_hash=hasher.hash("old"))

    merged = merger.merge(existing, AccountPatch(name="Ana", password=None))

    assert merged.password_hash == existing.password_hash
    assert merged.name == "Ana"


def test_new_password_is_rehashed(merger, hasher):
    existing = Account(id=1, email="a@x.com", password_hash=hasher.hash("old"))

    merged = merger.merge(existing, AccountPatch(password="new"))

    assert merged.password_hash not in (existing.password_hash, "new")
    assert hasher.verify("new", merged.password_hash)


def test_fields_of_another_record_type_are_rejected(merger):
    with pytest.raises(TypeError):
        merger.merge(Account(id=1, email="a@x.com"), AddressPatch(city="Recife"))

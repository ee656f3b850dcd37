from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote usuario_api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from usuario_api.core import config as core_config  # noqa: E402
from usuario_api.core.security import CredentialHasher  # noqa: E402
from usuario_api.core.tokens import TokenCodec  # noqa: E402
from usuario_api.db.create_tables import create_all  # noqa: E402
from usuario_api.db.session import reset_engine  # noqa: E402
from usuario_api.services.context import ServiceContext, build_sql_context  # noqa: E402

from fakes import TEST_SECRET, InMemoryAccounts, InMemoryStore  # noqa: E402



@pytest.fixture()
def hasher():
    # parametros minimos do argon2 para manter os testes rapidos
    return CredentialHasher(time_cost=1, memory_cost=8, parallelism=1)


@pytest.fixture()
def tokens():
    return TokenCodec(TEST_SECRET, ttl_seconds=3600)


@pytest.fixture()
def memory_context(hasher, tokens):
    return ServiceContext(
        accounts=InMemoryAccounts(),
        addresses=InMemoryStore(),
        phones=InMemoryStore(unique_field="number"),
        hasher=hasher,
        tokens=tokens,
    )


@pytest.fixture()
def db_env(tmp_path, monkeypatch):
    """Configura um SQLite temporário e reseta caches de settings/engine."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.setenv("JWT_SECRET", TEST_SECRET)
    core_config.get_settings.cache_clear()
    reset_engine()
    create_all(drop_first=True)

    yield db_file

    reset_engine()
    core_config.get_settings.cache_clear()


@pytest.fixture()
def sql_context(db_env, hasher):
    return build_sql_context(hasher=hasher)

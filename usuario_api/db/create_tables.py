"""Create (or recreate) the usuario/endereco/telefone schema."""
from __future__ import annotations

import argparse
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # ensure models are imported for metadata


def create_all(engine: Optional[Engine] = None, *, drop_first: bool = False) -> list[str]:
    """Create missing tables and return the names of every managed table."""
    engine = engine or get_engine()
    if drop_first:
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    return sorted(Base.metadata.tables)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Cria as tabelas do banco configurado em DATABASE_URL.")
    parser.add_argument("--drop", action="store_true", help="apaga as tabelas antes de recriar")
    args = parser.parse_args(argv)
    try:
        tables = create_all(drop_first=args.drop)
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
    print(f"Tabelas prontas: {', '.join(tables)}")


if __name__ == "__main__":
    main()

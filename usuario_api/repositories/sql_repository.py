"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

import logging
from contextlib import AbstractContextManager
from typing import Callable, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from usuario_api.db.models import EnderecoRow, TelefoneRow, UsuarioRow
from usuario_api.db.session import get_session
from usuario_api.domain.records import Account, Address, Phone

from .errors import DuplicateKeyError, RecordNotFoundError

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], AbstractContextManager[Session]]


class _SQLRepository:
    def __init__(self, session_factory: Optional[SessionFactory] = None) -> None:
        self._session = session_factory or get_session

    def _commit(self, session: Session, what: str) -> None:
        try:
            session.commit()
        except IntegrityError as exc:
            session.rollback()
            logger.info("unique constraint rejected %s", what)
            raise DuplicateKeyError(what) from exc


# -------------------------- usuario --------------------------
def _to_account(row: UsuarioRow) -> Account:
    return Account(id=row.id, email=row.email, password_hash=row.senha, name=row.nome)


class AccountRepository(_SQLRepository):
    def exists_by_email(self, email: str) -> bool:
        with self._session() as session:
            stmt = select(UsuarioRow.id).where(UsuarioRow.email == email).limit(1)
            return session.execute(stmt).first() is not None

    def find_by_email(self, email: str) -> Optional[Account]:
        with self._session() as session:
            stmt = select(UsuarioRow).where(UsuarioRow.email == email)
            row = session.execute(stmt).scalar_one_or_none()
            return _to_account(row) if row else None

    def add(self, account: Account) -> Account:
        row = UsuarioRow(email=account.email, senha=account.password_hash, nome=account.name)
        with self._session() as session:
            session.add(row)
            self._commit(session, f"usuario email={account.email}")
            session.refresh(row)
            return _to_account(row)

    def save(self, account: Account) -> Account:
        with self._session() as session:
            row = session.get(UsuarioRow, account.id)
            if row is None:
                raise RecordNotFoundError(f"usuario {account.id} nao existe")
            row.email = account.email
            row.senha = account.password_hash
            row.nome = account.name
            self._commit(session, f"usuario email={account.email}")
            session.refresh(row)
            return _to_account(row)

    def delete_by_email(self, email: str) -> None:
        with self._session() as session:
            session.execute(delete(UsuarioRow).where(UsuarioRow.email == email))
            session.commit()


# -------------------------- endereco --------------------------
def _to_address(row: EnderecoRow) -> Address:
    return Address(
        id=row.id,
        street=row.rua,
        number=row.numero,
        complement=row.complemento,
        city=row.cidade,
        postal_code=row.cep,
        state=row.estado,
        owner_id=row.usuario_id,
    )


def _fill_endereco(row: EnderecoRow, address: Address) -> EnderecoRow:
    row.rua = address.street
    row.numero = address.number
    row.complemento = address.complement
    row.cidade = address.city
    row.cep = address.postal_code
    row.estado = address.state
    row.usuario_id = address.owner_id
    return row


class AddressRepository(_SQLRepository):
    def get(self, address_id: int) -> Optional[Address]:
        with self._session() as session:
            row = session.get(EnderecoRow, address_id)
            return _to_address(row) if row else None

    def list_by_owner(self, owner_id: int) -> list[Address]:
        with self._session() as session:
            stmt = select(EnderecoRow).where(EnderecoRow.usuario_id == owner_id).order_by(EnderecoRow.id)
            return [_to_address(row) for row in session.execute(stmt).scalars().all()]

    def add(self, address: Address) -> Address:
        row = _fill_endereco(EnderecoRow(), address)
        with self._session() as session:
            session.add(row)
            self._commit(session, "endereco")
            session.refresh(row)
            return _to_address(row)

    def save(self, address: Address) -> Address:
        with self._session() as session:
            row = session.get(EnderecoRow, address.id)
            if row is None:
                raise RecordNotFoundError(f"endereco {address.id} nao existe")
            _fill_endereco(row, address)
            self._commit(session, "endereco")
            session.refresh(row)
            return _to_address(row)

    def delete_by_owner(self, owner_id: int) -> None:
        with self._session() as session:
            session.execute(delete(EnderecoRow).where(EnderecoRow.usuario_id == owner_id))
            session.commit()


# -------------------------- telefone --------------------------
def _to_phone(row: TelefoneRow) -> Phone:
    return Phone(
        id=row.id,
        number=row.numero,
        area_code=row.ddd,
        type=row.tipo,
        owner_id=row.usuario_id,
    )


def _fill_telefone(row: TelefoneRow, phone: Phone) -> TelefoneRow:
    row.numero = phone.number
    row.ddd = phone.area_code
    row.tipo = phone.type
    row.usuario_id = phone.owner_id
    return row


class PhoneRepository(_SQLRepository):
    def get(self, phone_id: int) -> Optional[Phone]:
        with self._session() as session:
            row = session.get(TelefoneRow, phone_id)
            return _to_phone(row) if row else None

    def list_by_owner(self, owner_id: int) -> list[Phone]:
        with self._session() as session:
            stmt = select(TelefoneRow).where(TelefoneRow.usuario_id == owner_id).order_by(TelefoneRow.id)
            return [_to_phone(row) for row in session.execute(stmt).scalars().all()]

    def add(self, phone: Phone) -> Phone:
        row = _fill_telefone(TelefoneRow(), phone)
        with self._session() as session:
            session.add(row)
            self._commit(session, f"telefone numero={phone.number}")
            session.refresh(row)
            return _to_phone(row)

    def save(self, phone: Phone) -> Phone:
        with self._session() as session:
            row = session.get(TelefoneRow, phone.id)
            if row is None:
                raise RecordNotFoundError(f"telefone {phone.id} nao existe")
            _fill_telefone(row, phone)
            self._commit(session, f"telefone numero={phone.number}")
            session.refresh(row)
            return _to_phone(row)

    def delete_by_owner(self, owner_id: int) -> None:
        with self._session() as session:
            session.execute(delete(TelefoneRow).where(TelefoneRow.usuario_id == owner_id))
            session.commit()

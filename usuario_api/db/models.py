"""SQLAlchemy tables for accounts and their owned addresses/phones."""
from __future__ import annotations

from sqlalchemy import Column, Integer, String, Text

from .session import Base


class UsuarioRow(Base):
    __tablename__ = "usuario"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(String(100), nullable=True)
    email = Column(String(255), unique=True, nullable=False)
    senha = Column(Text, nullable=False)


# usuario_id is a plain column: ownership is stamped by the services, not enforced here.
class EnderecoRow(Base):
    __tablename__ = "endereco"

    id = Column(Integer, primary_key=True, autoincrement=True)
    rua = Column(String(255), nullable=True)
    numero = Column(String(20), nullable=True)
    complemento = Column(String(100), nullable=True)
    cidade = Column(String(100), nullable=True)
    cep = Column(String(9), nullable=True)
    estado = Column(String(2), nullable=True)
    usuario_id = Column(Integer, index=True, nullable=True)


class TelefoneRow(Base):
    __tablename__ = "telefone"

    id = Column(Integer, primary_key=True, autoincrement=True)
    numero = Column(String(10), unique=True, nullable=True)
    ddd = Column(String(3), nullable=True)
    tipo = Column(String(10), nullable=True)
    usuario_id = Column(Integer, index=True, nullable=True)

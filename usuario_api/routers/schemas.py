"""Wire models for the /usuario endpoints (field names follow the table columns)."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class LoginRequest(BaseModel):
    email: str
    senha: str


class UsuarioCadastro(BaseModel):
    """Body of ``POST /usuario``."""

    nome: Optional[str] = None
    email: str
    senha: str


class UsuarioPatch(BaseModel):
    """Body of ``PUT /usuario``; omitted or null fields are left unchanged."""

    nome: Optional[str] = None
    email: Optional[str] = None
    senha: Optional[str] = None


class EnderecoPayload(BaseModel):
    rua: Optional[str] = None
    numero: Optional[str] = None
    complemento: Optional[str] = None
    cidade: Optional[str] = None
    cep: Optional[str] = None
    estado: Optional[str] = None


class TelefonePayload(BaseModel):
    numero: Optional[str] = None
    ddd: Optional[str] = None
    tipo: Optional[str] = None


class EnderecoResponse(EnderecoPayload):
    id: int
    usuario_id: Optional[int] = None


class TelefoneResponse(TelefonePayload):
    id: int
    usuario_id: Optional[int] = None


class UsuarioResponse(BaseModel):
    id: int
    nome: Optional[str] = None
    email: str
    enderecos: list[EnderecoResponse] = []
    telefones: list[TelefoneResponse] = []

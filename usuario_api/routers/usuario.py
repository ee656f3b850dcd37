from __future__ import annotations

from fastapi import APIRouter, Header, HTTPException, Request, Response
from fastapi.responses import PlainTextResponse

from usuario_api.domain.errors import AuthError, ConflictError, NotFoundError, Result
from usuario_api.services import AccountService, AddressService, PhoneService

from . import converters
from .schemas import (
    EnderecoPayload,
    EnderecoResponse,
    LoginRequest,
    TelefonePayload,
    TelefoneResponse,
    UsuarioCadastro,
    UsuarioPatch,
    UsuarioResponse,
)

router = APIRouter(prefix="/usuario", tags=["usuario"])

_STATUS_BY_ERROR = {
    ConflictError: 409,
    NotFoundError: 404,
    AuthError: 401,
}


def _service(request: Request, name: str):
    svc = getattr(getattr(request.app, "state", None), name, None)
    if not svc:
        raise RuntimeError(f"{name} nao configurado")
    return svc


def _accounts(request: Request) -> AccountService:
    return _service(request, "account_service")


def _addresses(request: Request) -> AddressService:
    return _service(request, "address_service")


def _phones(request: Request) -> PhoneService:
    return _service(request, "phone_service")


def _unwrap(result: Result):
    if result.error is not None:
        raise HTTPException(_STATUS_BY_ERROR.get(type(result.error), 400), result.error.message)
    return result.value


@router.post("/login", response_class=PlainTextResponse)
def login(payload: LoginRequest, request: Request):
    return _unwrap(_accounts(request).login(payload.email, payload.senha))


@router.get("", response_model=UsuarioResponse)
def busca_usuario_por_email(email: str, request: Request):
    return converters.from_profile(_unwrap(_accounts(request).profile(email)))


@router.delete("/{email}")
def deleta_usuario_por_email(email: str, request: Request):
    _unwrap(_accounts(request).delete_by_email(email))
    return Response(status_code=200)


@router.post("", response_model=UsuarioResponse)
def salva_usuario(payload: UsuarioCadastro, request: Request):
    result = _accounts(request).register(payload.email, payload.senha, name=payload.nome)
    return converters.from_account(_unwrap(result))


@router.put("", response_model=UsuarioResponse)
def atualiza_dados_usuario(
    payload: UsuarioPatch,
    request: Request,
    authorization: str | None = Header(default=None),
):
    result = _accounts(request).update_as_caller(authorization, converters.to_account_patch(payload))
    return converters.from_account(_unwrap(result))


@router.post("/endereco", response_model=EnderecoResponse)
def cadastra_endereco(
    payload: EnderecoPayload,
    request: Request,
    authorization: str | None = Header(default=None),
):
    result = _addresses(request).create_for_caller(authorization, converters.to_address_patch(payload))
    return converters.from_address(_unwrap(result))


@router.put("/endereco", response_model=EnderecoResponse)
def atualiza_endereco(id: int, payload: EnderecoPayload, request: Request):
    result = _addresses(request).update_by_id(id, converters.to_address_patch(payload))
    return converters.from_address(_unwrap(result))


@router.post("/telefone", response_model=TelefoneResponse)
def cadastra_telefone(
    payload: TelefonePayload,
    request: Request,
    authorization: str | None = Header(default=None),
):
    result = _phones(request).create_for_caller(authorization, converters.to_phone_patch(payload))
    return converters.from_phone(_unwrap(result))


@router.put("/telefone", response_model=TelefoneResponse)
def atualiza_telefone(id: int, payload: TelefonePayload, request: Request):
    result = _phones(request).update_by_id(id, converters.to_phone_patch(payload))
    return converters.from_phone(_unwrap(result))

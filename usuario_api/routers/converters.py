"""
Explicit conversions between wire models and domain records.

Each function names every field it copies; nothing is bound by reflection.
"""

from __future__ import annotations

from usuario_api.domain.records import (
    Account,
    AccountPatch,
    AccountProfile,
    Address,
    AddressPatch,
    Phone,
    PhonePatch,
)

from .schemas import (
    EnderecoPayload,
    EnderecoResponse,
    TelefonePayload,
    TelefoneResponse,
    UsuarioPatch,
    UsuarioResponse,
)


def to_account_patch(payload: UsuarioPatch) -> AccountPatch:
    return AccountPatch(name=payload.nome, email=payload.email, password=payload.senha)


def to_address_patch(payload: EnderecoPayload) -> AddressPatch:
    return AddressPatch(
        street=payload.rua,
        number=payload.numero,
        complement=payload.complemento,
        city=payload.cidade,
        postal_code=payload.cep,
        state=payload.estado,
    )


def to_phone_patch(payload: TelefonePayload) -> PhonePatch:
    return PhonePatch(number=payload.numero, area_code=payload.ddd, type=payload.tipo)


def from_address(address: Address) -> EnderecoResponse:
    return EnderecoResponse(
        id=address.id,
        rua=address.street,
        numero=address.number,
        complemento=address.complement,
        cidade=address.city,
        cep=address.postal_code,
        estado=address.state,
        usuario_id=address.owner_id,
    )


def from_phone(phone: Phone) -> TelefoneResponse:
    return TelefoneResponse(
        id=phone.id,
        numero=phone.number,
        ddd=phone.area_code,
        tipo=phone.type,
        usuario_id=phone.owner_id,
    )


def from_account(account: Account) -> UsuarioResponse:
    # password_hash never leaves the service
    return UsuarioResponse(id=account.id, nome=account.name, email=account.email)


def from_profile(profile: AccountProfile) -> UsuarioResponse:
    account = profile.account
    return UsuarioResponse(
        id=account.id,
        nome=account.name,
        email=account.email,
        enderecos=[from_address(item) for item in profile.addresses],
        telefones=[from_phone(item) for item in profile.phones],
    )

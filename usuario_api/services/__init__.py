"""
Use cases for the usuario API.

Every service is built from a ServiceContext and returns Result values;
routers call these services instead of touching repositories directly.
"""

from .account_service import AccountService
from .context import ServiceContext, build_sql_context
from .identity import IdentityResolver
from .merger import UpdateMerger
from .registration import RegistrationService
from .sub_resources import AddressService, PhoneService, SubResourceService

__all__ = [
    "AccountService",
    "AddressService",
    "IdentityResolver",
    "PhoneService",
    "RegistrationService",
    "ServiceContext",
    "SubResourceService",
    "UpdateMerger",
    "build_sql_context",
]

"""FastAPI application wiring for the usuario API."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from usuario_api.core.config import get_settings
from usuario_api.core.logging import configure_logging
from usuario_api.db.create_tables import create_all
from usuario_api.routers import usuario as usuario_router
from usuario_api.services import (
    AccountService,
    AddressService,
    PhoneService,
    ServiceContext,
    build_sql_context,
)


def create_app(context: Optional[ServiceContext] = None) -> FastAPI:
    """Build the app around ``context``, or around the SQL backend when omitted."""
    settings = get_settings()
    configure_logging(settings.log_level)
    use_sql = context is None
    context = context or build_sql_context(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if use_sql:
            create_all()
        yield

    app = FastAPI(title="Usuario API", lifespan=lifespan)
    app.state.account_service = AccountService(context)
    app.state.address_service = AddressService(context)
    app.state.phone_service = PhoneService(context)

    @app.get("/healthz", tags=["health"])
    def healthz() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(usuario_router.router)
    return app

"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from idverify.api.routes import admin, health, validation
from idverify.core.config import AppSettings
from idverify.core.logging import configure_logging
from idverify.services import IdValidationService, create_service


def create_app(
    settings: AppSettings | None = None,
    service: IdValidationService | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    ``service`` overrides the one built from settings, for tests.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize and tear down application resources."""
        app_settings = settings if settings is not None else AppSettings()
        configure_logging(app_settings.log_level)
        app.state.settings = app_settings
        app.state.service = service if service is not None else create_service(app_settings)
        yield

    app = FastAPI(
        title="South African ID Validation Service",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(health.router)
    app.include_router(validation.router)
    app.include_router(admin.router, prefix="/admin")
    return app

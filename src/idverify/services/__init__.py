"""Service wiring: Home Affairs client selection and the validation service."""

from __future__ import annotations

from idverify.core.config import AppSettings
from idverify.core.exceptions import ConfigurationError
from idverify.core.protocols import IHomeAffairsClient
from idverify.services.home_affairs import HomeAffairsClient
from idverify.services.id_validation import IdValidationService
from idverify.services.mock_home_affairs import MockHomeAffairsClient
from idverify.telemetry import create_telemetry


def create_home_affairs_client(settings: AppSettings | None = None) -> IHomeAffairsClient:
    if settings is None:
        settings = AppSettings()

    config = settings.home_affairs
    if config.provider == "mock":
        return MockHomeAffairsClient(latency=config.mock_latency)
    if config.provider == "http":
        return HomeAffairsClient(
            api_url=config.api_url,
            api_key=config.api_key,
            timeout=config.timeout,
        )
    raise ConfigurationError(f"Unknown Home Affairs provider: {config.provider!r}")


def create_service(settings: AppSettings | None = None) -> IdValidationService:
    """Create a fully wired IdValidationService from application settings."""
    if settings is None:
        settings = AppSettings()

    return IdValidationService(
        home_affairs=create_home_affairs_client(settings),
        telemetry=create_telemetry(settings),
    )


__all__ = [
    "HomeAffairsClient",
    "IdValidationService",
    "MockHomeAffairsClient",
    "create_home_affairs_client",
    "create_service",
]

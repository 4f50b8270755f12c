"""Telemetry recorder and its pluggable stores."""

from __future__ import annotations

from idverify.core.config import AppSettings
from idverify.core.exceptions import ConfigurationError
from idverify.telemetry.memory_backend import MemoryTelemetryStore
from idverify.telemetry.recorder import TelemetryRecorder
from idverify.telemetry.redis_backend import RedisTelemetryStore


def create_telemetry(settings: AppSettings | None = None) -> TelemetryRecorder:
    """Create a recorder backed by the store named in the settings."""
    if settings is None:
        settings = AppSettings()

    backend = settings.telemetry.backend
    if backend == "memory":
        store = MemoryTelemetryStore(
            max_errors=settings.telemetry.max_errors,
            max_samples=settings.telemetry.max_samples,
        )
    elif backend == "redis":
        store = RedisTelemetryStore(
            host=settings.redis.host,
            port=settings.redis.port,
            db=settings.redis.db,
            prefix=settings.telemetry.key_prefix,
            max_errors=settings.telemetry.max_errors,
            max_samples=settings.telemetry.max_samples,
        )
    else:
        raise ConfigurationError(f"Unknown telemetry backend: {backend!r}")

    return TelemetryRecorder(
        store,
        slow_factor=settings.telemetry.slow_factor,
        recent_errors=settings.telemetry.recent_errors,
    )


__all__ = ["MemoryTelemetryStore", "RedisTelemetryStore", "TelemetryRecorder", "create_telemetry"]

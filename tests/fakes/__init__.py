"""Shared test doubles: re-export the in-memory store and mock client."""

from __future__ import annotations

from idverify.core.exceptions import TelemetryError
from idverify.services.mock_home_affairs import MockHomeAffairsClient
from idverify.telemetry.memory_backend import MemoryTelemetryStore


class FailingTelemetryStore(MemoryTelemetryStore):
    """Store whose writes fail the way an unreachable Redis does."""

    def append_error(self, record):
        raise TelemetryError("Redis RPUSH failed for errors: connection refused")

    def add_measurement(self, operation, duration_ms):
        raise TelemetryError(f"Redis measurement write failed for operation={operation!r}")

    def increment_feature(self, name, used_at):
        raise TelemetryError(f"Redis feature update failed for feature={name!r}")


__all__ = ["FailingTelemetryStore", "MemoryTelemetryStore", "MockHomeAffairsClient"]

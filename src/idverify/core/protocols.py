"""Protocol interfaces for the collaborators around the validator.

Structural typing, no inheritance required, easy to test with isinstance().
The validator itself is a set of plain functions and has no protocol.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from idverify.models.home_affairs import HomeAffairsResponse
    from idverify.models.telemetry import ErrorRecord, FeatureUsage


# ---------------------------------------------------------------------------
# Home Affairs
# ---------------------------------------------------------------------------

@runtime_checkable
class IHomeAffairsClient(Protocol):
    """Remote identity verification (mock or HTTP)."""

    async def verify_id_number(self, id_number: str) -> HomeAffairsResponse: ...

    async def get_person_details(self, id_number: str) -> HomeAffairsResponse: ...


# ---------------------------------------------------------------------------
# Telemetry Store
# ---------------------------------------------------------------------------

@runtime_checkable
class ITelemetryStore(Protocol):
    """Storage for tracked errors, latency measurements and feature usage.

    Stores keep at most a bounded number of recent errors and samples per
    operation. The totals behind ``operation_totals`` cover every measurement.
    """

    def append_error(self, record: ErrorRecord) -> None: ...

    def list_errors(self) -> list[ErrorRecord]: ...

    def add_measurement(self, operation: str, duration_ms: float) -> None: ...

    def measurements(self) -> dict[str, list[float]]: ...

    def operation_totals(self, operation: str) -> tuple[float, int]: ...

    def performance_totals(self) -> dict[str, tuple[float, int]]: ...

    def increment_feature(self, name: str, used_at: datetime) -> None: ...

    def feature_usage(self) -> dict[str, FeatureUsage]: ...

"""Usage, error and latency tracking.

The recorder is constructed explicitly and handed to whatever needs it. It
never reaches into the validator; callers wrap calls with ``timed`` instead.
"""

from __future__ import annotations

import logging
import time
from collections import Counter
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator

from idverify.core.exceptions import TelemetryError
from idverify.core.protocols import ITelemetryStore
from idverify.core.types import FeatureName, JsonDict, OperationName
from idverify.models.telemetry import (
    ErrorPattern,
    ErrorRecord,
    ErrorsSummary,
    FeatureSummary,
    OperationSummary,
    RecentError,
    RetrospectiveReport,
)

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class TelemetryRecorder:
    """Records errors, feature usage and operation latency into a store.

    The write methods never raise: a failing store is logged and the sample
    dropped, so tracking cannot break the operation being tracked.
    """

    def __init__(
        self,
        store: ITelemetryStore,
        *,
        slow_factor: float = 1.5,
        recent_errors: int = 5,
    ) -> None:
        self._store = store
        self._slow_factor = slow_factor
        self._recent_errors = recent_errors

    def track_error(self, message: str, context: JsonDict | None = None) -> None:
        record = ErrorRecord(message=message, context=context or {}, timestamp=_now())
        logger.error("Error tracked: %s %s", message, record.context)
        try:
            self._store.append_error(record)
        except TelemetryError as exc:
            logger.warning("Telemetry store unavailable, error not recorded: %s", exc)

    def track_feature_usage(self, name: FeatureName) -> None:
        try:
            self._store.increment_feature(name, _now())
        except TelemetryError as exc:
            logger.warning("Telemetry store unavailable, usage of %s not recorded: %s", name, exc)

    def measure_performance(self, operation: OperationName, duration_ms: float) -> None:
        """Store a measurement and warn when it is well above the running average."""
        try:
            self._store.add_measurement(operation, duration_ms)
            total, count = self._store.operation_totals(operation)
        except TelemetryError as exc:
            logger.warning("Telemetry store unavailable, %s timing not recorded: %s", operation, exc)
            return
        average = total / count if count else duration_ms
        if duration_ms > average * self._slow_factor:
            logger.warning(
                "Slow operation detected: %s took %.2fms (avg: %.2fms)",
                operation, duration_ms, average,
            )

    @contextmanager
    def timed(self, operation: OperationName) -> Iterator[None]:
        """Measure the wall time of the ``with`` body, even if it raises."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self.measure_performance(operation, (time.perf_counter() - start) * 1000)

    def analyze_error_patterns(self) -> list[ErrorPattern]:
        """Group tracked errors by the text before their first colon."""
        groups = Counter(record.message.split(":")[0] for record in self._store.list_errors())
        return [
            ErrorPattern(pattern=pattern, count=count)
            for pattern, count in groups.most_common()
        ]

    def generate_retrospective_data(self) -> RetrospectiveReport:
        errors = self._store.list_errors()
        recent = errors[-self._recent_errors:] if self._recent_errors > 0 else []

        performance = [
            OperationSummary(
                operation=operation,
                average_ms=round(total / count, 2),
                measurements=count,
            )
            for operation, (total, count) in self._store.performance_totals().items()
            if count
        ]

        usage = sorted(
            self._store.feature_usage().items(),
            key=lambda item: item[1].count,
            reverse=True,
        )

        return RetrospectiveReport(
            errors_summary=ErrorsSummary(
                count=len(errors),
                most_recent_errors=[
                    RecentError(message=r.message, timestamp=r.timestamp) for r in recent
                ],
                error_patterns=self.analyze_error_patterns(),
            ),
            performance_summary=performance,
            feature_usage_summary=[
                FeatureSummary(feature=name, usage_count=u.count, last_used=u.last_used)
                for name, u in usage
            ],
        )

"""In-memory ITelemetryStore, the default for a single process."""

from __future__ import annotations

import threading
from collections import deque
from datetime import datetime

from idverify.models.telemetry import ErrorRecord, FeatureUsage

DEFAULT_MAX_ERRORS = 1000
DEFAULT_MAX_SAMPLES = 1000


class MemoryTelemetryStore:
    """Dict-backed ITelemetryStore keeping the most recent errors and samples."""

    def __init__(
        self,
        max_errors: int = DEFAULT_MAX_ERRORS,
        max_samples: int = DEFAULT_MAX_SAMPLES,
    ) -> None:
        self._lock = threading.Lock()
        self._max_samples = max_samples
        self._errors: deque[ErrorRecord] = deque(maxlen=max_errors)
        self._measurements: dict[str, deque[float]] = {}
        self._totals: dict[str, tuple[float, int]] = {}
        self._features: dict[str, FeatureUsage] = {}

    def append_error(self, record: ErrorRecord) -> None:
        with self._lock:
            self._errors.append(record)

    def list_errors(self) -> list[ErrorRecord]:
        with self._lock:
            return list(self._errors)

    def add_measurement(self, operation: str, duration_ms: float) -> None:
        with self._lock:
            samples = self._measurements.get(operation)
            if samples is None:
                samples = self._measurements[operation] = deque(maxlen=self._max_samples)
            samples.append(duration_ms)
            total, count = self._totals.get(operation, (0.0, 0))
            self._totals[operation] = (total + duration_ms, count + 1)

    def measurements(self) -> dict[str, list[float]]:
        with self._lock:
            return {op: list(samples) for op, samples in self._measurements.items()}

    def operation_totals(self, operation: str) -> tuple[float, int]:
        with self._lock:
            return self._totals.get(operation, (0.0, 0))

    def performance_totals(self) -> dict[str, tuple[float, int]]:
        with self._lock:
            return dict(self._totals)

    def increment_feature(self, name: str, used_at: datetime) -> None:
        with self._lock:
            usage = self._features.get(name)
            count = usage.count + 1 if usage else 1
            self._features[name] = FeatureUsage(count=count, last_used=used_at)

    def feature_usage(self) -> dict[str, FeatureUsage]:
        with self._lock:
            return dict(self._features)

"""Redis ITelemetryStore, shared between API workers."""

from __future__ import annotations

from datetime import datetime

import redis

from idverify.core.exceptions import TelemetryError
from idverify.models.telemetry import ErrorRecord, FeatureUsage

DEFAULT_MAX_ERRORS = 1000
DEFAULT_MAX_SAMPLES = 1000


class RedisTelemetryStore:
    """ITelemetryStore backed by Redis lists and hashes.

    Keys, under ``prefix``:
        errors              list of ErrorRecord JSON, newest ``max_errors`` kept
        operations          set of measured operation names
        perf:<operation>    list of durations in ms, newest ``max_samples`` kept
        totals:sum          hash operation -> summed duration in ms
        totals:count        hash operation -> number of measurements
        features:count      hash feature -> count
        features:last_used  hash feature -> ISO timestamp
    """

    def __init__(
        self,
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
        prefix: str = "idverify:telemetry",
        max_errors: int = DEFAULT_MAX_ERRORS,
        max_samples: int = DEFAULT_MAX_SAMPLES,
    ) -> None:
        self._prefix = prefix
        self._max_errors = max_errors
        self._max_samples = max_samples
        self._client = redis.Redis(host=host, port=port, db=db, decode_responses=True)

    def _key(self, *parts: str) -> str:
        return ":".join((self._prefix, *parts))

    def append_error(self, record: ErrorRecord) -> None:
        key = self._key("errors")
        try:
            pipe = self._client.pipeline()
            pipe.rpush(key, record.model_dump_json())
            pipe.ltrim(key, -self._max_errors, -1)
            pipe.execute()
        except Exception as exc:
            raise TelemetryError(f"Redis RPUSH failed for errors: {exc}") from exc

    def list_errors(self) -> list[ErrorRecord]:
        try:
            raw = self._client.lrange(self._key("errors"), 0, -1)
        except Exception as exc:
            raise TelemetryError(f"Redis LRANGE failed for errors: {exc}") from exc
        return [ErrorRecord.model_validate_json(item) for item in raw]

    def add_measurement(self, operation: str, duration_ms: float) -> None:
        samples_key = self._key("perf", operation)
        try:
            pipe = self._client.pipeline()
            pipe.sadd(self._key("operations"), operation)
            pipe.rpush(samples_key, repr(float(duration_ms)))
            pipe.ltrim(samples_key, -self._max_samples, -1)
            pipe.hincrbyfloat(self._key("totals", "sum"), operation, float(duration_ms))
            pipe.hincrby(self._key("totals", "count"), operation, 1)
            pipe.execute()
        except Exception as exc:
            raise TelemetryError(
                f"Redis measurement write failed for operation={operation!r}: {exc}"
            ) from exc

    def measurements(self) -> dict[str, list[float]]:
        try:
            operations = self._client.smembers(self._key("operations"))
            return {
                op: [float(v) for v in self._client.lrange(self._key("perf", op), 0, -1)]
                for op in sorted(operations)
            }
        except Exception as exc:
            raise TelemetryError(f"Redis measurement read failed: {exc}") from exc

    def operation_totals(self, operation: str) -> tuple[float, int]:
        try:
            pipe = self._client.pipeline()
            pipe.hget(self._key("totals", "sum"), operation)
            pipe.hget(self._key("totals", "count"), operation)
            total, count = pipe.execute()
        except Exception as exc:
            raise TelemetryError(
                f"Redis totals read failed for operation={operation!r}: {exc}"
            ) from exc
        return float(total or 0.0), int(count or 0)

    def performance_totals(self) -> dict[str, tuple[float, int]]:
        try:
            totals = self._client.hgetall(self._key("totals", "sum"))
            counts = self._client.hgetall(self._key("totals", "count"))
        except Exception as exc:
            raise TelemetryError(f"Redis totals read failed: {exc}") from exc
        return {
            op: (float(totals[op]), int(counts[op]))
            for op in sorted(counts)
            if op in totals
        }

    def increment_feature(self, name: str, used_at: datetime) -> None:
        try:
            pipe = self._client.pipeline()
            pipe.hincrby(self._key("features", "count"), name, 1)
            pipe.hset(self._key("features", "last_used"), name, used_at.isoformat())
            pipe.execute()
        except Exception as exc:
            raise TelemetryError(f"Redis feature update failed for feature={name!r}: {exc}") from exc

    def feature_usage(self) -> dict[str, FeatureUsage]:
        try:
            counts = self._client.hgetall(self._key("features", "count"))
            last_used = self._client.hgetall(self._key("features", "last_used"))
        except Exception as exc:
            raise TelemetryError(f"Redis feature read failed: {exc}") from exc
        return {
            name: FeatureUsage(
                count=int(count),
                last_used=datetime.fromisoformat(last_used[name]),
            )
            for name, count in counts.items()
            if name in last_used
        }

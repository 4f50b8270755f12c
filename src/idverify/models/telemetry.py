"""Telemetry records and the retrospective report."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class ErrorRecord(BaseModel):
    """A tracked error with the context it was raised in."""

    message: str
    context: dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime


class FeatureUsage(BaseModel):
    count: int = 0
    last_used: datetime


class ErrorPattern(BaseModel):
    pattern: str
    count: int


class RecentError(BaseModel):
    message: str
    timestamp: datetime


class ErrorsSummary(BaseModel):
    count: int = 0
    most_recent_errors: list[RecentError] = Field(default_factory=list)
    error_patterns: list[ErrorPattern] = Field(default_factory=list)


class OperationSummary(BaseModel):
    operation: str
    average_ms: float
    measurements: int


class FeatureSummary(BaseModel):
    feature: str
    usage_count: int
    last_used: datetime


class RetrospectiveReport(BaseModel):
    """Snapshot of errors, latency and feature usage for review."""

    errors_summary: ErrorsSummary = Field(default_factory=ErrorsSummary)
    performance_summary: list[OperationSummary] = Field(default_factory=list)
    feature_usage_summary: list[FeatureSummary] = Field(default_factory=list)

"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class HomeAffairsConfig(BaseSettings):
    """Remote Home Affairs verification API configuration."""

    model_config = {"env_prefix": "IDVERIFY_HOME_AFFAIRS_"}

    provider: Literal["mock", "http"] = "mock"
    api_url: str = "https://api.homeaffairs.gov.za/v1"
    api_key: str = "development_key"
    timeout: float = 10.0
    mock_latency: float = 0.0  # seconds of simulated network delay


class RedisConfig(BaseSettings):
    """Redis configuration for the telemetry store."""

    model_config = {"env_prefix": "IDVERIFY_REDIS_"}

    host: str = "localhost"
    port: int = 6379
    db: int = 0


class TelemetryConfig(BaseSettings):
    """Usage, error and latency tracking configuration."""

    model_config = {"env_prefix": "IDVERIFY_TELEMETRY_"}

    backend: Literal["memory", "redis"] = "memory"
    slow_factor: float = 1.5
    recent_errors: int = 5
    key_prefix: str = "idverify:telemetry"
    max_errors: int = 1000  # newest tracked errors kept
    max_samples: int = 1000  # newest latency samples kept per operation


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "IDVERIFY_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    home_affairs: HomeAffairsConfig = HomeAffairsConfig()
    telemetry: TelemetryConfig = TelemetryConfig()
    redis: RedisConfig = RedisConfig()

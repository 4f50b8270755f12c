"""idverify exception hierarchy.

ID validation failures are never raised; they are reported as issues on
``ValidationResult``. These exceptions cover the collaborators around it.
"""

from __future__ import annotations


class IdVerifyError(Exception):
    """Base exception for all idverify errors."""


class ConfigurationError(IdVerifyError):
    """Settings name a provider or backend that does not exist."""


class HomeAffairsError(IdVerifyError):
    """Home Affairs API call failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class TelemetryError(IdVerifyError):
    """Telemetry store operation failed."""

"""South African ID number validation and verification."""

from __future__ import annotations

from idverify.models.identity import CitizenshipStatus, Gender, ValidationResult
from idverify.validator import format_sa_id, strip_id_formatting, validate_sa_id

__all__ = [
    "CitizenshipStatus",
    "Gender",
    "ValidationResult",
    "format_sa_id",
    "strip_id_formatting",
    "validate_sa_id",
]

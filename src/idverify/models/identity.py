"""Identity models: the parsed ID fields and the validation result.

A South African ID number is laid out as ``YYMMDD SSSS C A Z``:

- ``YYMMDD``: date of birth
- ``SSSS``: sequence number (Female: 0000-4999, Male: 5000-9999)
- ``C``: citizenship (0: citizen, 1: permanent resident)
- ``A``: legacy classification digit, no longer meaningful (usually 8)
- ``Z``: check digit
"""

from __future__ import annotations

from datetime import date
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, Field, computed_field, model_validator

CENTURY_PIVOT = 50  # two-digit years below this are 20xx


class Gender(StrEnum):
    MALE = "Male"
    FEMALE = "Female"


class CitizenshipStatus(StrEnum):
    CITIZEN = "Citizen"
    PERMANENT_RESIDENT = "Permanent Resident"


class ErrorCode(StrEnum):
    FORMAT_MISSING = "FORMAT_MISSING"
    FORMAT_LENGTH = "FORMAT_LENGTH"
    FORMAT_CHARSET = "FORMAT_CHARSET"
    DATE = "DATE"
    CITIZENSHIP = "CITIZENSHIP"
    CHECKSUM = "CHECKSUM"

    @property
    def is_terminal(self) -> bool:
        """Format errors stop validation; the others accumulate."""
        return self.name.startswith("FORMAT_")


class ValidationIssue(BaseModel):
    """One failed check."""

    code: ErrorCode
    message: str

    model_config = {"frozen": True}


class ParsedFields(BaseModel):
    """Fixed-width fields of a 13-digit ID number."""

    year2: int
    month: int
    day: int
    sequence: int
    citizenship_digit: int
    legacy_digit: int
    check_digit: int

    model_config = {"frozen": True}

    @property
    def full_year(self) -> int:
        if self.year2 < CENTURY_PIVOT:
            return 2000 + self.year2
        return 1900 + self.year2


class ValidationResult(BaseModel):
    """Outcome of validating one ID number.

    ``birth_date``, ``gender`` and ``citizenship_status`` are only ever set
    on a valid result.
    """

    is_valid: bool
    issues: list[ValidationIssue] = Field(default_factory=list)
    birth_date: Optional[date] = None
    gender: Optional[Gender] = None
    citizenship_status: Optional[CitizenshipStatus] = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def errors(self) -> list[str]:
        return [issue.message for issue in self.issues]

    @property
    def error_codes(self) -> list[ErrorCode]:
        return [issue.code for issue in self.issues]

    @model_validator(mode="after")
    def _derived_fields_only_when_valid(self) -> ValidationResult:
        if self.is_valid == bool(self.issues):
            raise ValueError("is_valid must be true exactly when there are no issues")
        derived = (self.birth_date, self.gender, self.citizenship_status)
        if self.is_valid and any(value is None for value in derived):
            raise ValueError("a valid result must carry all derived fields")
        if not self.is_valid and any(value is not None for value in derived):
            raise ValueError("an invalid result must not carry derived fields")
        return self

    @classmethod
    def failed(cls, issues: list[ValidationIssue]) -> ValidationResult:
        return cls(is_valid=False, issues=issues)

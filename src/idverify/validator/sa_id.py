"""South African ID number validation entry point."""

from __future__ import annotations

from typing import Any

from idverify.models.identity import (
    CitizenshipStatus,
    Gender,
    ValidationIssue,
    ValidationResult,
)
from idverify.validator.checksum import check_checksum
from idverify.validator.fields import (
    check_citizenship,
    date_issue,
    extract_fields,
    reconstruct_birth_date,
)
from idverify.validator.format_parser import check_format

MALE_SEQUENCE_START = 5000


def validate_sa_id(id_number: Any) -> ValidationResult:
    """Validate an ID number and derive birth date, gender and citizenship.

    Never raises. A format problem (not a string, wrong length, non-digits)
    is reported alone; otherwise the date, citizenship and checksum checks
    all run and every failure is reported, in that order.
    """
    format_issue = check_format(id_number)
    if format_issue is not None:
        return ValidationResult.failed([format_issue])

    fields = extract_fields(id_number)
    issues: list[ValidationIssue] = []

    birth_date = reconstruct_birth_date(fields)
    if birth_date is None:
        issues.append(date_issue())

    citizenship_issue = check_citizenship(fields)
    if citizenship_issue is not None:
        issues.append(citizenship_issue)

    checksum_issue = check_checksum(id_number)
    if checksum_issue is not None:
        issues.append(checksum_issue)

    if issues:
        return ValidationResult.failed(issues)

    return ValidationResult(
        is_valid=True,
        birth_date=birth_date,
        gender=Gender.MALE if fields.sequence >= MALE_SEQUENCE_START else Gender.FEMALE,
        citizenship_status=(
            CitizenshipStatus.CITIZEN
            if fields.citizenship_digit == 0
            else CitizenshipStatus.PERMANENT_RESIDENT
        ),
    )

"""Field extraction, birth date reconstruction and the citizenship check."""

from __future__ import annotations

from datetime import date
from typing import Optional

from idverify.models.identity import ErrorCode, ParsedFields, ValidationIssue

DATE_MESSAGE = "Invalid date of birth in ID number"
CITIZENSHIP_MESSAGE = "Citizenship digit must be 0 or 1"


def extract_fields(digits: str) -> ParsedFields:
    """Slice a 13-digit string into its fixed-width fields.

    The caller must have run ``check_format`` first.
    """
    return ParsedFields(
        year2=int(digits[0:2]),
        month=int(digits[2:4]),
        day=int(digits[4:6]),
        sequence=int(digits[6:10]),
        citizenship_digit=int(digits[10]),
        legacy_digit=int(digits[11]),
        check_digit=int(digits[12]),
    )


def reconstruct_birth_date(fields: ParsedFields) -> Optional[date]:
    """Build the birth date, or return None if it is not a real calendar day.

    Nothing is normalised: 31 April or month 13 are rejected rather than
    rolled over into the next month or year.
    """
    if not 1 <= fields.month <= 12 or not 1 <= fields.day <= 31:
        return None
    try:
        birth_date = date(fields.full_year, fields.month, fields.day)
    except ValueError:
        return None
    if (birth_date.year, birth_date.month, birth_date.day) != (
        fields.full_year, fields.month, fields.day,
    ):
        return None
    return birth_date


def check_citizenship(fields: ParsedFields) -> Optional[ValidationIssue]:
    if fields.citizenship_digit not in (0, 1):
        return ValidationIssue(code=ErrorCode.CITIZENSHIP, message=CITIZENSHIP_MESSAGE)
    return None


def date_issue() -> ValidationIssue:
    return ValidationIssue(code=ErrorCode.DATE, message=DATE_MESSAGE)

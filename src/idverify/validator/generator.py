"""Build valid ID numbers for a given birth date and sequence.

Used to produce sample and test data; real IDs are issued by Home Affairs.
"""

from __future__ import annotations

from datetime import date

from idverify.models.identity import CENTURY_PIVOT
from idverify.validator.checksum import compute_check_digit

EARLIEST_BIRTH_YEAR = 1900 + CENTURY_PIVOT
LATEST_BIRTH_YEAR = 2000 + CENTURY_PIVOT - 1


def build_sa_id(
    birth_date: date,
    sequence: int,
    citizenship_digit: int = 0,
    legacy_digit: int = 8,
) -> str:
    """Compose a 13-digit ID number with a correct check digit.

    Raises:
        ValueError: the birth year cannot be encoded with two digits under
            the century rule, or a field is out of range.
    """
    if not EARLIEST_BIRTH_YEAR <= birth_date.year <= LATEST_BIRTH_YEAR:
        raise ValueError(
            f"birth year {birth_date.year} outside {EARLIEST_BIRTH_YEAR}-{LATEST_BIRTH_YEAR}"
        )
    if not 0 <= sequence <= 9999:
        raise ValueError(f"sequence {sequence} outside 0000-9999")
    if citizenship_digit not in (0, 1):
        raise ValueError(f"citizenship digit must be 0 or 1, got {citizenship_digit}")
    if not 0 <= legacy_digit <= 9:
        raise ValueError(f"legacy digit must be a single digit, got {legacy_digit}")

    stem = f"{birth_date:%y%m%d}{sequence:04d}{citizenship_digit}{legacy_digit}"
    return f"{stem}{compute_check_digit(stem)}"

"""Luhn check digit for 13-digit ID numbers."""

from __future__ import annotations

from typing import Optional

from idverify.models.identity import ErrorCode, ValidationIssue

CHECKSUM_MESSAGE = "ID number has an invalid checksum"


def compute_check_digit(stem: str) -> int:
    """Compute the check digit for the first 12 digits of an ID number.

    Digits are processed right to left; the rightmost digit of the stem and
    every second one after it are doubled, with 9 subtracted when the double
    exceeds 9. The check digit brings the total up to a multiple of 10.
    """
    total = 0
    double = True
    for char in reversed(stem):
        digit = int(char)
        if double:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
        double = not double
    return (10 - total % 10) % 10


def check_checksum(digits: str) -> Optional[ValidationIssue]:
    if compute_check_digit(digits[:12]) != int(digits[12]):
        return ValidationIssue(code=ErrorCode.CHECKSUM, message=CHECKSUM_MESSAGE)
    return None

"""Structural checks that must pass before any field can be sliced."""

from __future__ import annotations

import re
from typing import Any, Optional

from idverify.models.identity import ErrorCode, ValidationIssue

ID_LENGTH = 13

MISSING_MESSAGE = "ID number must be a non-empty string"
LENGTH_MESSAGE = "ID number must be exactly 13 digits"
CHARSET_MESSAGE = "ID number must contain only digits"

# ASCII only: str.isdigit() would also accept e.g. Arabic-Indic digits.
_ASCII_DIGITS = re.compile(r"[0-9]+")

_WHITESPACE = re.compile(r"\s+")


def check_format(id_number: Any) -> Optional[ValidationIssue]:
    """Return the first structural issue, or None if all 13 digits are usable."""
    if not isinstance(id_number, str):
        return ValidationIssue(code=ErrorCode.FORMAT_MISSING, message=MISSING_MESSAGE)
    if len(id_number) != ID_LENGTH:
        return ValidationIssue(code=ErrorCode.FORMAT_LENGTH, message=LENGTH_MESSAGE)
    if not _ASCII_DIGITS.fullmatch(id_number):
        return ValidationIssue(code=ErrorCode.FORMAT_CHARSET, message=CHARSET_MESSAGE)
    return None


def strip_id_formatting(id_number: str) -> str:
    """Remove all whitespace, e.g. from a display-formatted ID."""
    return _WHITESPACE.sub("", id_number)

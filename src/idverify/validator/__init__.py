"""Pure validation and formatting functions for South African ID numbers."""

from __future__ import annotations

from idverify.validator.checksum import compute_check_digit
from idverify.validator.format_parser import strip_id_formatting
from idverify.validator.formatter import format_sa_id
from idverify.validator.generator import build_sa_id
from idverify.validator.sa_id import validate_sa_id

__all__ = [
    "build_sa_id",
    "compute_check_digit",
    "format_sa_id",
    "strip_id_formatting",
    "validate_sa_id",
]

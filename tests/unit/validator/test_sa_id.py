"""Tests for validate_sa_id: short-circuiting, accumulation and derived fields."""

from __future__ import annotations

from datetime import date

import pytest

from idverify import CitizenshipStatus, Gender, validate_sa_id
from idverify.models.identity import ErrorCode
from idverify.validator.checksum import compute_check_digit

LENGTH_ERROR = "ID number must be exactly 13 digits"
CHARSET_ERROR = "ID number must contain only digits"
DATE_ERROR = "Invalid date of birth in ID number"
CITIZENSHIP_ERROR = "Citizenship digit must be 0 or 1"
CHECKSUM_ERROR = "ID number has an invalid checksum"


def _with_check_digit(stem: str) -> str:
    return f"{stem}{compute_check_digit(stem)}"


def _assert_no_derived_fields(result):
    assert result.birth_date is None
    assert result.gender is None
    assert result.citizenship_status is None


class TestValidIds:
    def test_male_citizen(self):
        result = validate_sa_id("9001085012085")
        assert result.is_valid is True
        assert result.errors == []
        assert result.gender == Gender.MALE
        assert result.gender == "Male"
        assert result.citizenship_status == "Citizen"
        assert result.birth_date == date(1990, 1, 8)

    def test_female_below_sequence_5000(self):
        result = validate_sa_id("9001084800084")
        assert result.is_valid is True
        assert result.gender == Gender.FEMALE

    def test_sequence_boundary(self):
        assert validate_sa_id(_with_check_digit("900108499908")).gender == Gender.FEMALE
        assert validate_sa_id(_with_check_digit("900108500008")).gender == Gender.MALE

    def test_permanent_resident(self):
        result = validate_sa_id("9001085012184")
        assert result.is_valid is True
        assert result.citizenship_status == CitizenshipStatus.PERMANENT_RESIDENT
        assert result.citizenship_status == "Permanent Resident"

    def test_published_sample_id(self):
        result = validate_sa_id("8001015009087")
        assert result.is_valid is True
        assert result.birth_date == date(1980, 1, 1)

    def test_twenty_first_century_birth(self):
        result = validate_sa_id(_with_check_digit("120229012308"))
        assert result.is_valid is True
        assert result.birth_date == date(2012, 2, 29)

    def test_legacy_digit_is_not_validated(self):
        assert validate_sa_id(_with_check_digit("900108501203")).is_valid is True


class TestFormatShortCircuit:
    @pytest.mark.parametrize("length", [n for n in range(0, 20) if n != 13])
    def test_any_wrong_length_gives_exactly_one_error(self, length):
        result = validate_sa_id("9" * length)
        assert result.is_valid is False
        assert result.errors == [LENGTH_ERROR]
        _assert_no_derived_fields(result)

    def test_non_digit_gives_exactly_one_error(self):
        # Month 13 and a bad checksum would also fail, but are never checked.
        result = validate_sa_id("9013085012X83")
        assert result.errors == [CHARSET_ERROR]
        assert result.error_codes == [ErrorCode.FORMAT_CHARSET]
        _assert_no_derived_fields(result)

    def test_display_formatted_id_is_rejected(self):
        assert validate_sa_id("900108 5012 085").errors == [LENGTH_ERROR]

    def test_none_is_reported_not_raised(self):
        result = validate_sa_id(None)
        assert result.is_valid is False
        assert result.error_codes == [ErrorCode.FORMAT_MISSING]


class TestAccumulatedErrors:
    def test_invalid_month(self):
        result = validate_sa_id("9013085012083")
        assert result.is_valid is False
        assert DATE_ERROR in result.errors
        _assert_no_derived_fields(result)

    def test_date_and_checksum_errors_together(self):
        assert validate_sa_id("9013085012083").errors == [DATE_ERROR, CHECKSUM_ERROR]

    def test_date_error_alone(self):
        result = validate_sa_id(_with_check_digit("900431501208"))
        assert result.errors == [DATE_ERROR]

    def test_citizenship_error_alone(self):
        result = validate_sa_id("9001085012283")
        assert result.errors == [CITIZENSHIP_ERROR]
        _assert_no_derived_fields(result)

    def test_all_three_in_order(self):
        result = validate_sa_id("9013085012580")
        assert result.error_codes == [ErrorCode.DATE, ErrorCode.CITIZENSHIP, ErrorCode.CHECKSUM]


class TestTampering:
    @pytest.mark.parametrize("valid", ["9001085012085", "9001084800084", "8001015009087"])
    def test_changed_check_digit_gives_only_checksum_error(self, valid):
        for digit in "0123456789":
            if digit == valid[-1]:
                continue
            result = validate_sa_id(valid[:12] + digit)
            assert result.is_valid is False
            assert result.errors == [CHECKSUM_ERROR]
            _assert_no_derived_fields(result)

    def test_widely_quoted_sample_fails_checksum(self):
        assert validate_sa_id("9001085012088").errors == [CHECKSUM_ERROR]


def test_result_serializes_errors():
    data = validate_sa_id("9001085012088").model_dump(mode="json")
    assert data["is_valid"] is False
    assert data["errors"] == [CHECKSUM_ERROR]
    assert data["issues"] == [{"code": "CHECKSUM", "message": CHECKSUM_ERROR}]
    assert data["gender"] is None

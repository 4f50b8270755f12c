"""Tests for build_sa_id."""

from __future__ import annotations

from datetime import date

import pytest

from idverify import validate_sa_id
from idverify.models.identity import CitizenshipStatus, Gender
from idverify.validator.generator import build_sa_id


def test_builds_known_id():
    assert build_sa_id(date(1990, 1, 8), 5012) == "9001085012085"
    assert build_sa_id(date(1980, 1, 1), 5009) == "8001015009087"


def test_built_id_validates_with_requested_attributes():
    result = validate_sa_id(build_sa_id(date(2003, 7, 31), 42, citizenship_digit=1))
    assert result.is_valid is True
    assert result.birth_date == date(2003, 7, 31)
    assert result.gender == Gender.FEMALE
    assert result.citizenship_status == CitizenshipStatus.PERMANENT_RESIDENT


@pytest.mark.parametrize("birth_date", [date(1949, 12, 31), date(2050, 1, 1)])
def test_rejects_years_outside_century_window(birth_date):
    with pytest.raises(ValueError):
        build_sa_id(birth_date, 5000)


@pytest.mark.parametrize(
    "kwargs",
    [{"sequence": -1}, {"sequence": 10000}, {"sequence": 1, "citizenship_digit": 2},
     {"sequence": 1, "legacy_digit": 10}],
)
def test_rejects_out_of_range_fields(kwargs):
    with pytest.raises(ValueError):
        build_sa_id(date(1990, 1, 1), **kwargs)

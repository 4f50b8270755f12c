"""Tests for the Luhn check digit."""

from __future__ import annotations

from idverify.models.identity import ErrorCode
from idverify.validator.checksum import check_checksum, compute_check_digit


class TestComputeCheckDigit:
    def test_published_sample_id(self):
        assert compute_check_digit("800101500908") == 7

    def test_doubles_the_digit_next_to_the_check_digit(self):
        # 8 (doubled) -> 16 -> 7; everything else zero.
        assert compute_check_digit("000000000008") == 3

    def test_does_not_double_the_second_digit_from_the_right(self):
        assert compute_check_digit("000000000080") == 2

    def test_zero_sum_gives_zero(self):
        assert compute_check_digit("000000000000") == 0

    def test_known_stems(self):
        assert compute_check_digit("900108501208") == 5
        assert compute_check_digit("900108480008") == 4
        assert compute_check_digit("900108501218") == 4


class TestCheckChecksum:
    def test_matching_check_digit(self):
        assert check_checksum("8001015009087") is None

    def test_mismatching_check_digit(self):
        issue = check_checksum("8001015009086")
        assert issue.code == ErrorCode.CHECKSUM
        assert issue.message == "ID number has an invalid checksum"

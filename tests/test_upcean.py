"""
Tests for the shared UPC/EAN row-reading primitives.
"""

import math

import pytest

from upce_decoder.barcode.errors import GuardNotFoundError, PatternNotFoundError
from upce_decoder.barcode.patterns import L_AND_G_PATTERNS, L_PATTERNS, MIDDLE_END_PATTERN
from upce_decoder.barcode.row import BitRow
from upce_decoder.barcode.upcean import (
    MAX_INDIVIDUAL_VARIANCE,
    calculate_upca_checksum,
    decode_digit,
    find_guard_pattern,
    find_start_guard_pattern,
    pattern_match_variance,
    record_pattern,
    validate_upca_checksum,
)


class TestRecordPattern:
    """Tests for recording run widths."""

    def test_records_runs(self):
        counters = [0, 0, 0, 0]
        record_pattern(BitRow.from_string("0001101 0"), 0, counters)
        assert counters == [3, 2, 1, 1]

    def test_last_run_may_reach_row_end(self):
        counters = [0, 0, 0, 0]
        record_pattern(BitRow.from_string("0001101"), 0, counters)
        assert counters == [3, 2, 1, 1]

    def test_resets_counters(self):
        counters = [9, 9, 9, 9]
        record_pattern(BitRow.from_string("1101000"), 0, counters)
        assert counters == [2, 1, 1, 3]

    def test_starts_mid_row(self):
        counters = [0, 0, 0, 0]
        record_pattern(BitRow.from_string("111 0100111"), 3, counters)
        assert counters == [1, 1, 2, 3]

    def test_row_too_short(self):
        with pytest.raises(PatternNotFoundError):
            record_pattern(BitRow.from_string("00011"), 0, [0, 0, 0, 0])

    def test_offset_past_end(self):
        with pytest.raises(PatternNotFoundError):
            record_pattern(BitRow.from_string("0101"), 4, [0, 0, 0, 0])


class TestPatternMatchVariance:
    """Tests for pattern scoring."""

    def test_exact_match(self):
        assert pattern_match_variance([3, 2, 1, 1], (3, 2, 1, 1), MAX_INDIVIDUAL_VARIANCE) == 0.0

    def test_scaled_match(self):
        assert pattern_match_variance([6, 4, 2, 2], (3, 2, 1, 1), MAX_INDIVIDUAL_VARIANCE) == 0.0

    def test_narrower_than_pattern(self):
        assert math.isinf(pattern_match_variance([1, 1, 1, 1], (3, 2, 1, 1), 0.7))

    def test_individual_element_too_far(self):
        assert math.isinf(pattern_match_variance([1, 1, 1, 4], (3, 2, 1, 1), 0.7))

    def test_small_deviation(self):
        variance = pattern_match_variance([4, 1, 1], (1, 1, 1), 0.7)
        assert math.isinf(variance)
        variance = pattern_match_variance([5, 4, 4], (1, 1, 1), 0.7)
        assert 0.0 < variance < 0.48


class TestDecodeDigit:
    """Tests for matching a single digit."""

    @pytest.mark.parametrize("digit", range(10))
    def test_l_patterns(self, digit):
        row = BitRow.from_widths([*L_PATTERNS[digit], 1])
        counters = [0, 0, 0, 0]
        assert decode_digit(row, counters, 0, L_AND_G_PATTERNS) == digit
        assert sum(counters) == 7

    def test_g_pattern_of_zero(self):
        row = BitRow.from_string("0100111")
        assert decode_digit(row, [0, 0, 0, 0], 0, L_AND_G_PATTERNS) == 10

    def test_l_pattern_of_six(self):
        row = BitRow.from_string("0101111")
        assert decode_digit(row, [0, 0, 0, 0], 0, L_AND_G_PATTERNS) == 6

    def test_no_match(self):
        row = BitRow.from_widths([8, 1, 8, 1, 2])
        with pytest.raises(PatternNotFoundError):
            decode_digit(row, [0, 0, 0, 0], 0, L_AND_G_PATTERNS)


class TestFindGuardPattern:
    """Tests for locating guard patterns."""

    def test_finds_start_guard(self):
        row = BitRow.from_string("000 101 000")
        assert find_guard_pattern(row, 0, False, (1, 1, 1)) == (3, 6)

    def test_slides_past_wide_bar(self):
        row = BitRow.from_widths([3, 4, 1, 1, 1, 1, 5])
        assert find_guard_pattern(row, 0, False, (1, 1, 1)) == (8, 11)

    def test_white_first(self):
        row = BitRow.from_string("1 010101 000")
        assert find_guard_pattern(row, 1, True, MIDDLE_END_PATTERN) == (1, 7)

    def test_not_found(self):
        row = BitRow.from_string("0000111100000")
        with pytest.raises(GuardNotFoundError):
            find_guard_pattern(row, 0, False, (1, 1, 1))


class TestFindStartGuardPattern:
    """Tests for the start guard with quiet zone."""

    def test_with_quiet_zone(self):
        row = BitRow.from_widths([5, 1, 1, 1, 5])
        assert find_start_guard_pattern(row) == (5, 8)

    def test_skips_candidate_without_quiet_zone(self):
        row = BitRow.from_widths([1, 1, 1, 4, 1, 1, 1, 4], start_with_bar=True)
        assert find_start_guard_pattern(row) == (7, 10)

    def test_no_quiet_zone(self):
        row = BitRow.from_widths([1, 1, 1, 1, 1, 10], start_with_bar=True)
        with pytest.raises(GuardNotFoundError):
            find_start_guard_pattern(row)


class TestUPCAChecksum:
    """Tests for UPC-A checksum validation."""

    def test_calculate_upca_checksum(self):
        assert calculate_upca_checksum("03600029145") == 2
        assert calculate_upca_checksum("01234567890") == 5
        assert calculate_upca_checksum("04210000526") == 4

    def test_calculate_rejects_bad_input(self):
        with pytest.raises(ValueError):
            calculate_upca_checksum("0360002914")
        with pytest.raises(ValueError):
            calculate_upca_checksum("0360002914A")

    def test_validate_upc_valid(self):
        """Test validation of valid UPC-A codes."""
        valid_codes = [
            "012345678905",
            "036000291452",
            "123456789012",
            "042100005264",
        ]
        for code in valid_codes:
            assert validate_upca_checksum(code), f"Expected {code} to be valid"

    def test_validate_upc_invalid(self):
        """Test validation of invalid UPC-A codes."""
        invalid_codes = [
            "036000291453",  # Wrong checksum
            "012345678900",  # Wrong checksum
            "1234567890",  # Too short
            "1234567890123",  # Too long
            "03600029145A",  # Non-numeric
        ]
        for code in invalid_codes:
            assert not validate_upca_checksum(code), f"Expected {code} to be invalid"

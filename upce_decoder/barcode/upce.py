"""
UPC-E row decoding.

A UPC-E symbol carries six digits between a ``101`` start guard and a
``010101`` end guard. There is no explicit number system or check digit: both
are implied by which of the six digits use G (even) parity rather than L (odd)
parity. The decoded value is validated by expanding it to the UPC-A code it
zero-suppresses.

Reference: http://www.barcodeisland.com/upce.phtml
"""

from enum import Enum

import structlog

from upce_decoder.barcode.errors import (
    ChecksumError,
    GuardNotFoundError,
    PatternNotFoundError,
    UnresolvableParityError,
)
from upce_decoder.barcode.patterns import (
    L_AND_G_PATTERNS,
    MIDDLE_END_PATTERN,
    PARITY_LOOKUP,
)
from upce_decoder.barcode.row import BitRow
from upce_decoder.barcode.upcean import (
    decode_digit,
    find_guard_pattern,
    find_start_guard_pattern,
    validate_upca_checksum,
)
from upce_decoder.config import get_settings
from upce_decoder.models.symbol import UPCESymbol

logger = structlog.get_logger(__name__)


class ExpansionRule(Enum):
    """How a UPC-E payload expands, keyed on its sixth digit."""

    # 0, 1, 2: the digit is the third manufacturer digit
    MANUFACTURER_DIGIT = "012"
    # 3: five-digit manufacturer code padding, two-digit product code
    PRODUCT_TWO_DIGITS = "3"
    # 4: four-digit manufacturer code, one-digit product code
    PRODUCT_ONE_DIGIT = "4"
    # 5-9: the digit is the product code
    PRODUCT_LAST_DIGIT = "56789"

    @classmethod
    def for_digit(cls, digit: str) -> "ExpansionRule":
        """Return the rule for the sixth payload digit."""
        for rule in cls:
            if len(digit) == 1 and digit in rule.value:
                return rule
        raise ValueError(f"Invalid UPC-E payload digit: {digit!r}")


def determine_num_sys_and_check_digit(lg_pattern_found: int) -> tuple[int, int]:
    """
    Resolve the number system and check digit implied by a parity mask.

    Args:
        lg_pattern_found: 6-bit mask, bit ``5 - x`` set when digit ``x`` used G parity

    Returns:
        ``(number_system, check_digit)``

    Raises:
        UnresolvableParityError: If the mask matches neither number system
    """
    try:
        return PARITY_LOOKUP[lg_pattern_found]
    except KeyError:
        raise UnresolvableParityError(
            "Unable to determine number system and check digit"
        ) from None


def convert_upce_to_upca(upce: str) -> str:
    """
    Expand a UPC-E value back into its full, equivalent UPC-A code value.

    Args:
        upce: 8-digit UPC-E code (number system, six digits, check digit)

    Returns:
        Equivalent 12-digit UPC-A code
    """
    if len(upce) != 8 or not upce.isdigit():
        raise ValueError(f"UPC-E code must be 8 digits: {upce!r}")

    number_system = upce[0]
    payload = upce[1:7]
    check_digit = upce[7]
    last_digit = payload[5]

    rule = ExpansionRule.for_digit(last_digit)
    if rule is ExpansionRule.MANUFACTURER_DIGIT:
        manufacturer = payload[0:2] + last_digit + "00"
        product = "00" + payload[2:5]
    elif rule is ExpansionRule.PRODUCT_TWO_DIGITS:
        manufacturer = payload[0:3] + "00"
        product = "000" + payload[3:5]
    elif rule is ExpansionRule.PRODUCT_ONE_DIGIT:
        manufacturer = payload[0:4] + "0"
        product = "0000" + payload[4]
    else:
        # PRODUCT_LAST_DIGIT
        manufacturer = payload[0:5]
        product = "0000" + last_digit

    return number_system + manufacturer + product + check_digit


class UPCEReader:
    """
    Decodes a UPC-E symbol from a single bit row.

    Supports number systems 0 and 1. Tolerances default to the configured
    settings.
    """

    def __init__(
        self,
        max_avg_variance: float | None = None,
        max_individual_variance: float | None = None,
    ):
        """
        Initialize reader.

        Args:
            max_avg_variance: Max average variance for a pattern match
            max_individual_variance: Max variance of a single bar or space
        """
        settings = get_settings()
        self.max_avg_variance = (
            max_avg_variance if max_avg_variance is not None else settings.max_avg_variance
        )
        self.max_individual_variance = (
            max_individual_variance
            if max_individual_variance is not None
            else settings.max_individual_variance
        )

    def decode_row(self, row: BitRow) -> UPCESymbol:
        """
        Decode the UPC-E symbol in ``row``.

        Raises:
            DecodeError: Any failure; the row holds no readable UPC-E symbol
        """
        start_range = find_start_guard_pattern(
            row,
            max_avg_variance=self.max_avg_variance,
            max_individual_variance=self.max_individual_variance,
        )
        code, end_start = self.decode_middle(row, start_range)
        end_range = self.decode_end(row, end_start)

        # The end guard must be followed by a quiet zone as wide as itself
        end = end_range[1]
        quiet_end = end + (end - end_range[0])
        if quiet_end >= row.size or not row.is_range(end, quiet_end, False):
            raise GuardNotFoundError(f"No quiet zone after end guard at offset {end}")

        if not self.check_checksum(code):
            raise ChecksumError(f"Checksum failed for UPC-E {code}")

        logger.debug("Decoded UPC-E row", code=code, start=start_range, end=end_range)
        return UPCESymbol(code=code, start_range=start_range, end_range=end_range)

    def decode_middle(self, row: BitRow, start_range: tuple[int, int]) -> tuple[str, int]:
        """
        Decode the six payload digits following the start guard.

        Returns:
            ``(code, offset)``: the 8-digit UPC-E string and the offset just
            past the last digit
        """
        counters = [0, 0, 0, 0]
        end = row.size
        row_offset = start_range[1]

        digits: list[str] = []
        lg_pattern_found = 0

        x = 0
        while x < 6 and row_offset < end:
            best_match = decode_digit(
                row,
                counters,
                row_offset,
                L_AND_G_PATTERNS,
                max_avg_variance=self.max_avg_variance,
                max_individual_variance=self.max_individual_variance,
            )
            digits.append(str(best_match % 10))
            row_offset += sum(counters)
            if best_match >= 10:
                lg_pattern_found |= 1 << (5 - x)
            x += 1

        if len(digits) < 6:
            raise PatternNotFoundError(f"Row ended after {len(digits)} of 6 UPC-E digits")

        number_system, check_digit = determine_num_sys_and_check_digit(lg_pattern_found)
        code = "".join([str(number_system), *digits, str(check_digit)])
        return code, row_offset

    def decode_end(self, row: BitRow, end_start: int) -> tuple[int, int]:
        """Locate the end guard starting at ``end_start``."""
        return find_guard_pattern(
            row,
            end_start,
            True,
            MIDDLE_END_PATTERN,
            max_avg_variance=self.max_avg_variance,
            max_individual_variance=self.max_individual_variance,
        )

    def check_checksum(self, code: str) -> bool:
        """Validate an 8-digit UPC-E string through its UPC-A expansion."""
        return validate_upca_checksum(convert_upce_to_upca(code))

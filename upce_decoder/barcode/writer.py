"""
UPC-E encoding: zero-suppression of UPC-A codes and rendering to a bit row.
"""

from upce_decoder.barcode.patterns import (
    L_AND_G_PATTERNS,
    MIDDLE_END_PATTERN,
    NUMSYS_AND_CHECK_DIGIT_PATTERNS,
    START_END_PATTERN,
)
from upce_decoder.barcode.row import BitRow
from upce_decoder.models.symbol import UPCESymbol


def convert_upca_to_upce(upca: str) -> str | None:
    """
    Zero-suppress a UPC-A code into its 8-digit UPC-E form.

    Args:
        upca: 12-digit UPC-A code

    Returns:
        UPC-E code, or None if the code has no UPC-E equivalent
    """
    if len(upca) != 12 or not upca.isdigit():
        raise ValueError(f"UPC-A code must be 12 digits: {upca!r}")

    number_system = upca[0]
    manufacturer = upca[1:6]
    product = upca[6:11]
    check_digit = upca[11]

    if number_system not in "01":
        return None

    if manufacturer[2] in "012" and manufacturer[3:5] == "00" and product[0:2] == "00":
        payload = manufacturer[0:2] + product[2:5] + manufacturer[2]
    elif manufacturer[3:5] == "00" and product[0:3] == "000":
        payload = manufacturer[0:3] + product[3:5] + "3"
    elif manufacturer[4] == "0" and product[0:4] == "0000":
        payload = manufacturer[0:4] + product[4] + "4"
    elif product[0:4] == "0000" and product[4] in "56789":
        payload = manufacturer + product[4]
    else:
        return None

    return number_system + payload + check_digit


def encode_upce_widths(upce: str) -> list[int]:
    """
    Compute the run widths of a UPC-E symbol, without quiet zones.

    The first run is the start guard's leading bar. Parity of each digit is
    chosen from the number system and check digit.
    """
    symbol = UPCESymbol(code=upce)
    parity = NUMSYS_AND_CHECK_DIGIT_PATTERNS[symbol.number_system][symbol.check_digit]

    widths = list(START_END_PATTERN)
    for x, digit in enumerate(symbol.payload):
        index = int(digit)
        if parity & (1 << (5 - x)):
            index += 10
        widths.extend(L_AND_G_PATTERNS[index])
    widths.extend(MIDDLE_END_PATTERN)
    return widths


def encode_upce_row(upce: str, quiet_zone: int = 9, module_width: int = 1) -> BitRow:
    """
    Render a UPC-E code as a bit row.

    Args:
        upce: 8-digit UPC-E code (number system 0 or 1)
        quiet_zone: Blank modules on each side of the symbol
        module_width: Row positions per module

    Returns:
        Bit row holding the symbol between two quiet zones
    """
    if module_width < 1:
        raise ValueError(f"Module width must be positive: {module_width}")
    if quiet_zone < 0:
        raise ValueError(f"Quiet zone must not be negative: {quiet_zone}")

    widths = [quiet_zone, *encode_upce_widths(upce), quiet_zone]
    return BitRow.from_widths([w * module_width for w in widths], start_with_bar=False)

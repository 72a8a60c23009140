"""
Barcode validation utilities for UPC-A and UPC-E codes.
"""

from upce_decoder.barcode.upce import convert_upce_to_upca
from upce_decoder.barcode.upcean import calculate_upca_checksum, validate_upca_checksum
from upce_decoder.models.symbol import BarcodeSymbology


def complete_upce(code: str) -> str:
    """
    Complete a bare 6-digit UPC-E payload to the 8-digit form.

    The payload carries no number system or check digit; number system 0 is
    assumed and the check digit is computed on the UPC-A expansion.

    Args:
        code: 6-digit payload, or an 8-digit code (returned unchanged)

    Returns:
        8-digit UPC-E code
    """
    if len(code) == 8:
        return code
    if len(code) != 6 or not code.isdigit():
        raise ValueError(f"UPC-E payload must be 6 digits: {code!r}")

    upca = convert_upce_to_upca("0" + code + "0")
    return "0" + code + str(calculate_upca_checksum(upca))


def validate_upce_checksum(code: str) -> bool:
    """
    Validate a UPC-E checksum via its UPC-A expansion.

    A bare 6-digit payload has no check digit of its own and is accepted.

    Args:
        code: 8-digit UPC-E code or 6-digit payload

    Returns:
        True if checksum is valid
    """
    if len(code) not in (6, 8):
        return False
    if not code.isdigit():
        return False
    if len(code) == 8 and code[0] not in "01":
        return False

    return validate_upca_checksum(convert_upce_to_upca(complete_upce(code)))


def detect_symbology(code: str) -> BarcodeSymbology:
    """
    Detect barcode symbology from code.

    Args:
        code: Barcode string

    Returns:
        Detected symbology
    """
    if not code.isdigit():
        return BarcodeSymbology.UNKNOWN

    length = len(code)

    if length == 12:
        return BarcodeSymbology.UPC_A
    elif length == 8 and code[0] in "01":
        return BarcodeSymbology.UPC_E
    elif length == 6:
        return BarcodeSymbology.UPC_E
    else:
        return BarcodeSymbology.UNKNOWN


def is_valid_barcode(code: str) -> tuple[bool, BarcodeSymbology, str]:
    """
    Validate a barcode completely.

    Args:
        code: Barcode string

    Returns:
        Tuple of (is_valid, symbology, error_message)
    """
    if not code.isdigit():
        return False, BarcodeSymbology.UNKNOWN, "Code contains non-numeric characters"

    symbology = detect_symbology(code)

    if symbology == BarcodeSymbology.UNKNOWN:
        if len(code) == 8:
            return False, symbology, f"Unsupported UPC-E number system: {code[0]}"
        return False, symbology, f"Unsupported code length: {len(code)}"

    if symbology == BarcodeSymbology.UPC_A:
        if validate_upca_checksum(code):
            return True, symbology, ""
        return False, symbology, "Invalid UPC-A checksum"

    if validate_upce_checksum(code):
        return True, symbology, ""
    return False, symbology, "Invalid UPC-E checksum"


def normalize_barcode(code: str, symbology: BarcodeSymbology) -> str:
    """
    Normalize barcode to EAN-13 format.

    - UPC-E: Complete a bare payload, expand to UPC-A, then add leading 0
    - UPC-A: Add leading 0
    - Others: Return as-is

    Args:
        code: Barcode string
        symbology: Detected symbology

    Returns:
        Normalized barcode
    """
    if symbology == BarcodeSymbology.UPC_E and len(code) in (6, 8):
        return "0" + convert_upce_to_upca(complete_upce(code))
    if symbology == BarcodeSymbology.UPC_A and len(code) == 12:
        return "0" + code
    return code

"""
UPC-E row decoding utilities.
"""

from upce_decoder.barcode.decoder import BarcodeDecoder, BarcodeResult, decode_row
from upce_decoder.barcode.errors import (
    ChecksumError,
    DecodeError,
    GuardNotFoundError,
    PatternNotFoundError,
    UnresolvableParityError,
)
from upce_decoder.barcode.row import BitRow
from upce_decoder.barcode.upce import (
    ExpansionRule,
    UPCEReader,
    convert_upce_to_upca,
    determine_num_sys_and_check_digit,
)
from upce_decoder.barcode.validator import (
    complete_upce,
    is_valid_barcode,
    normalize_barcode,
    validate_upce_checksum,
)
from upce_decoder.barcode.upcean import validate_upca_checksum
from upce_decoder.barcode.writer import convert_upca_to_upce, encode_upce_row

__all__ = [
    "BarcodeDecoder",
    "BarcodeResult",
    "decode_row",
    "BitRow",
    "UPCEReader",
    "ExpansionRule",
    "convert_upce_to_upca",
    "convert_upca_to_upce",
    "determine_num_sys_and_check_digit",
    "encode_upce_row",
    "validate_upca_checksum",
    "validate_upce_checksum",
    "complete_upce",
    "is_valid_barcode",
    "normalize_barcode",
    "DecodeError",
    "PatternNotFoundError",
    "GuardNotFoundError",
    "UnresolvableParityError",
    "ChecksumError",
]

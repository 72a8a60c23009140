"""
High-level UPC-E decoder for scan rows.
"""

from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np
import structlog

from upce_decoder.barcode.errors import DecodeError
from upce_decoder.barcode.row import BitRow
from upce_decoder.barcode.upce import UPCEReader, convert_upce_to_upca
from upce_decoder.barcode.validator import is_valid_barcode, normalize_barcode
from upce_decoder.config import get_settings
from upce_decoder.models.symbol import BarcodeSymbology, UPCESymbol

logger = structlog.get_logger(__name__)


@dataclass
class BarcodeResult:
    """Result of decoding one row."""

    code: str
    symbology: BarcodeSymbology
    upca: str
    normalized_code: str
    is_valid: bool
    checksum_valid: bool
    rotation: int
    start_range: tuple[int, int] | None = None
    end_range: tuple[int, int] | None = None
    error: str | None = None


class BarcodeDecoder:
    """
    UPC-E decoder for rows of module values.

    A row is read left-to-right (rotation 0) and, optionally, right-to-left
    (rotation 180) for symbols scanned upside down.
    """

    def __init__(
        self,
        try_reversed: bool | None = None,
        reader: UPCEReader | None = None,
    ):
        """
        Initialize decoder.

        Args:
            try_reversed: Whether to also decode the reversed row (default: settings)
            reader: Row reader to use (default: reader with configured tolerances)
        """
        if try_reversed is None:
            try_reversed = get_settings().try_reversed
        self.try_reversed = try_reversed
        self.reader = reader or UPCEReader()

    def decode(
        self,
        row: BitRow | np.ndarray | Iterable[bool] | str,
    ) -> list[BarcodeResult]:
        """
        Decode a UPC-E symbol from a row.

        Args:
            row: BitRow, boolean array, iterable of module values, or ``0``/``1`` string

        Returns:
            One result per distinct code found. If nothing decodes, a single
            invalid result carrying the last error.
        """
        bit_row = self._to_bit_row(row)

        orientations = [(0, bit_row)]
        if self.try_reversed:
            orientations.append((180, bit_row.reversed()))

        all_results: list[BarcodeResult] = []
        seen_codes: set[str] = set()
        last_error: DecodeError | None = None
        last_error_rotation = 0

        for rotation, oriented in orientations:
            try:
                symbol = self.reader.decode_row(oriented)
            except DecodeError as e:
                logger.debug(
                    "No UPC-E symbol in row",
                    rotation=rotation,
                    error_type=type(e).__name__,
                    error=str(e),
                )
                last_error = e
                last_error_rotation = rotation
                continue

            if symbol.code not in seen_codes:
                seen_codes.add(symbol.code)
                all_results.append(self._process_decoded(symbol, rotation))

        if not all_results and last_error is not None:
            all_results.append(
                BarcodeResult(
                    code="",
                    symbology=BarcodeSymbology.UNKNOWN,
                    upca="",
                    normalized_code="",
                    is_valid=False,
                    checksum_valid=False,
                    rotation=last_error_rotation,
                    error=str(last_error),
                )
            )

        return all_results

    def _to_bit_row(self, row: BitRow | np.ndarray | Iterable[bool] | str) -> BitRow:
        """Convert various row formats to a BitRow."""
        if isinstance(row, BitRow):
            return row
        elif isinstance(row, str):
            return BitRow.from_string(row)
        elif isinstance(row, np.ndarray):
            return BitRow(row)
        elif isinstance(row, Iterable):
            return BitRow(row)
        else:
            raise TypeError(f"Unsupported row type: {type(row)}")

    def _process_decoded(self, symbol: UPCESymbol, rotation: int) -> BarcodeResult:
        """Build a result from a decoded symbol."""
        is_valid, symbology, error = is_valid_barcode(symbol.code)

        logger.info(
            "Decoded UPC-E symbol",
            code=symbol.code,
            rotation=rotation,
            checksum_valid=is_valid,
        )

        return BarcodeResult(
            code=symbol.code,
            symbology=symbology,
            upca=convert_upce_to_upca(symbol.code),
            normalized_code=normalize_barcode(symbol.code, symbology),
            is_valid=is_valid,
            checksum_valid=is_valid,
            rotation=rotation,
            start_range=symbol.start_range,
            end_range=symbol.end_range,
            error=error or None,
        )


def decode_row(
    row: BitRow | np.ndarray | Iterable[bool] | str,
    try_reversed: bool | None = None,
) -> list[BarcodeResult]:
    """
    Convenience function to decode a UPC-E symbol from a row.

    Args:
        row: Row data
        try_reversed: Whether to try the reversed row (default: settings)

    Returns:
        List of barcode results
    """
    decoder = BarcodeDecoder(try_reversed=try_reversed)
    return decoder.decode(row)

"""
Tests for the high-level row decoder.
"""

import numpy as np
import pytest

from upce_decoder.barcode.decoder import BarcodeDecoder, decode_row
from upce_decoder.barcode.row import BitRow
from upce_decoder.barcode.upce import UPCEReader
from upce_decoder.barcode.writer import encode_upce_row
from upce_decoder.models.symbol import BarcodeSymbology


class TestBarcodeDecoder:
    """Tests for BarcodeDecoder."""

    def test_decode_forward(self):
        results = BarcodeDecoder(try_reversed=False).decode(encode_upce_row("04252614"))

        assert len(results) == 1
        result = results[0]
        assert result.code == "04252614"
        assert result.symbology == BarcodeSymbology.UPC_E
        assert result.upca == "042100005264"
        assert result.normalized_code == "0042100005264"
        assert result.is_valid
        assert result.checksum_valid
        assert result.rotation == 0
        assert result.start_range == (9, 12)
        assert result.end_range == (54, 60)
        assert result.error is None

    def test_decode_reversed_row(self):
        row = encode_upce_row("16543223").reversed()
        results = BarcodeDecoder(try_reversed=True).decode(row)

        assert any(r.rotation == 180 and r.code == "16543223" for r in results)

    def test_no_duplicate_codes(self):
        results = BarcodeDecoder(try_reversed=True).decode(encode_upce_row("01234565"))
        codes = [r.code for r in results]
        assert codes.count("01234565") == 1

    def test_blank_row_gives_error_result(self):
        results = BarcodeDecoder().decode(BitRow([False] * 80))

        assert len(results) == 1
        assert results[0].code == ""
        assert results[0].symbology == BarcodeSymbology.UNKNOWN
        assert not results[0].is_valid
        assert "Guard pattern" in results[0].error
        assert results[0].rotation == 180

    def test_error_result_rotation_without_reversal(self):
        results = BarcodeDecoder(try_reversed=False).decode(BitRow([False] * 80))

        assert len(results) == 1
        assert results[0].rotation == 0

    def test_checksum_failure_gives_error_result(self):
        results = BarcodeDecoder(try_reversed=False).decode(encode_upce_row("04252615"))

        assert len(results) == 1
        assert not results[0].is_valid
        assert "Checksum failed" in results[0].error

    def test_accepts_string_and_array(self):
        row = encode_upce_row("01234531")
        decoder = BarcodeDecoder(try_reversed=False)

        assert decoder.decode(row.to_string())[0].code == "01234531"
        assert decoder.decode(np.array(row.bits, dtype=np.uint8))[0].code == "01234531"
        assert decoder.decode(list(row.bits))[0].code == "01234531"

    def test_rejects_unsupported_type(self):
        with pytest.raises(TypeError, match="Unsupported row type"):
            BarcodeDecoder().decode(42)

    def test_try_reversed_from_settings(self, monkeypatch):
        monkeypatch.setenv("UPCE_TRY_REVERSED", "false")
        assert BarcodeDecoder().try_reversed is False

    def test_custom_reader(self):
        reader = UPCEReader(max_avg_variance=0.2)
        decoder = BarcodeDecoder(reader=reader)
        assert decoder.reader is reader
        assert decoder.decode(encode_upce_row("01234543"))[0].code == "01234543"


def test_decode_row_convenience():
    results = decode_row(encode_upce_row("01234543", module_width=2))
    assert results[0].code == "01234543"
    assert results[0].upca == "012340000053"


def test_decode_row_uses_reversal_setting(monkeypatch):
    monkeypatch.setenv("UPCE_TRY_REVERSED", "false")
    results = decode_row(BitRow([False] * 80))
    assert results[0].rotation == 0

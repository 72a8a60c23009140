"""
Pydantic models for decoded symbols.
"""

from upce_decoder.models.symbol import BarcodeSymbology, UPCESymbol

__all__ = [
    "BarcodeSymbology",
    "UPCESymbol",
]

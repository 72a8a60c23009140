"""
UPC-E barcode row decoder.
"""

__version__ = "0.1.0"

"""
Errors raised while decoding a barcode row.

All of them are terminal for the row being decoded; retrying only makes sense
with a different row or frame.
"""


class DecodeError(Exception):
    """Base class for row decoding failures."""


class PatternNotFoundError(DecodeError):
    """No digit pattern matched at the cursor, or the row ran out."""


class GuardNotFoundError(DecodeError):
    """A guard pattern could not be located in the row."""


class UnresolvableParityError(DecodeError):
    """The L/G parity pattern matches no number system and check digit."""


class ChecksumError(DecodeError):
    """The decoded symbol failed checksum validation."""

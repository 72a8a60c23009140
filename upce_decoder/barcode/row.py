"""
Bit row representation of a single scan line.
"""

from collections.abc import Iterable, Sequence

import numpy as np


class BitRow:
    """
    Immutable row of module values for one scan line.

    ``True`` is a bar (dark module), ``False`` a space. The backing numpy
    array is made read-only so a row can be shared between decode attempts.
    """

    __slots__ = ("_bits",)

    def __init__(self, bits: Iterable[bool] | np.ndarray):
        array = np.array(bits if isinstance(bits, np.ndarray) else list(bits), dtype=bool)
        if array.ndim != 1:
            raise ValueError(f"Bit row must be one-dimensional, got shape {array.shape}")
        array.setflags(write=False)
        self._bits = array

    @classmethod
    def from_string(cls, pattern: str) -> "BitRow":
        """
        Build a row from a string of ``1`` (bar) and ``0`` (space) characters.

        Whitespace is ignored so long rows can be grouped for readability.
        """
        cleaned = "".join(pattern.split())
        if any(ch not in "01" for ch in cleaned):
            raise ValueError(f"Invalid bit row string: {pattern!r}")
        return cls(ch == "1" for ch in cleaned)

    @classmethod
    def from_widths(cls, widths: Sequence[int], start_with_bar: bool = False) -> "BitRow":
        """
        Build a row from alternating run widths.

        Args:
            widths: Module count of each run, left to right
            start_with_bar: Whether the first run is a bar
        """
        bits: list[bool] = []
        is_bar = start_with_bar
        for width in widths:
            if width < 0:
                raise ValueError(f"Run width must not be negative: {width}")
            bits.extend([is_bar] * width)
            is_bar = not is_bar
        return cls(bits)

    @property
    def size(self) -> int:
        """Number of modules in the row."""
        return int(self._bits.size)

    @property
    def bits(self) -> np.ndarray:
        """Read-only view of the underlying boolean array."""
        return self._bits

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, index: int) -> bool:
        return bool(self._bits[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitRow):
            return NotImplemented
        return bool(np.array_equal(self._bits, other._bits))

    def __hash__(self) -> int:
        return hash(self._bits.tobytes())

    def __repr__(self) -> str:
        return f"BitRow({self.to_string()!r})"

    def is_range(self, start: int, end: int, value: bool) -> bool:
        """Check that every module in ``[start, end)`` equals ``value``."""
        if start < 0 or end > self.size or start > end:
            raise ValueError(f"Invalid range [{start}, {end}) for row of size {self.size}")
        return bool(np.all(self._bits[start:end] == value))

    def reversed(self) -> "BitRow":
        """Return the row read right-to-left."""
        return BitRow(self._bits[::-1])

    def to_string(self) -> str:
        """Render the row as ``1``/``0`` characters."""
        return "".join("1" if bit else "0" for bit in self._bits)

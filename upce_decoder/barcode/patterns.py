"""
Fixed module-width tables for UPC/EAN style symbols.

Each pattern lists alternating element widths in modules, starting with the
first element the pattern is read from (a bar for guards, a space for digits).
"""

from types import MappingProxyType

# Start guard: bar, space, bar
START_END_PATTERN: tuple[int, ...] = (1, 1, 1)

# UPC-E has no second half; the end guard is space, bar, space, bar, space, bar
MIDDLE_END_PATTERN: tuple[int, ...] = (1, 1, 1, 1, 1, 1)

# "Odd" (L) parity encodings of the digits 0-9, as space, bar, space, bar widths
L_PATTERNS: tuple[tuple[int, int, int, int], ...] = (
    (3, 2, 1, 1),  # 0
    (2, 2, 2, 1),  # 1
    (2, 1, 2, 2),  # 2
    (1, 4, 1, 1),  # 3
    (1, 1, 3, 2),  # 4
    (1, 2, 3, 1),  # 5
    (1, 1, 1, 4),  # 6
    (1, 3, 1, 2),  # 7
    (1, 2, 1, 3),  # 8
    (3, 1, 1, 2),  # 9
)

# L patterns followed by the "even" (G) patterns, which are the L widths reversed.
# Index i >= 10 therefore means digit i - 10 in G parity.
L_AND_G_PATTERNS: tuple[tuple[int, int, int, int], ...] = L_PATTERNS + tuple(
    tuple(reversed(pattern)) for pattern in L_PATTERNS
)

# Parity masks implying number system 0 or 1 and the check digit (by index).
# Bit (5 - x) is set when digit x of the payload uses G parity.
NUMSYS_AND_CHECK_DIGIT_PATTERNS: tuple[tuple[int, ...], tuple[int, ...]] = (
    (0x38, 0x34, 0x32, 0x31, 0x2C, 0x26, 0x23, 0x2A, 0x29, 0x25),
    (0x07, 0x0B, 0x0D, 0x0E, 0x13, 0x19, 0x1C, 0x15, 0x16, 0x1A),
)


def _build_parity_lookup() -> MappingProxyType:
    lookup: dict[int, tuple[int, int]] = {}
    for num_sys, check_digits in enumerate(NUMSYS_AND_CHECK_DIGIT_PATTERNS):
        for check_digit, mask in enumerate(check_digits):
            # First systematic match wins
            lookup.setdefault(mask, (num_sys, check_digit))
    return MappingProxyType(lookup)


# Parity mask -> (number system, check digit)
PARITY_LOOKUP = _build_parity_lookup()

"""
Shared UPC/EAN row-reading primitives.

These are the pieces every UPC/EAN family reader builds on: recording run
widths, scoring them against reference patterns, matching digits, locating
guard patterns and the standard mod-10 checksum.
"""

from collections.abc import Sequence

import structlog

from upce_decoder.barcode.errors import GuardNotFoundError, PatternNotFoundError
from upce_decoder.barcode.patterns import START_END_PATTERN
from upce_decoder.barcode.row import BitRow

logger = structlog.get_logger(__name__)

MAX_AVG_VARIANCE = 0.48
MAX_INDIVIDUAL_VARIANCE = 0.7


def record_pattern(row: BitRow, start: int, counters: list[int]) -> None:
    """
    Record consecutive run widths starting at ``start`` into ``counters``.

    The first run is whatever colour ``row[start]`` is. The last run may end
    at the end of the row.

    Raises:
        PatternNotFoundError: If the row ends before every counter is filled
    """
    num_counters = len(counters)
    for i in range(num_counters):
        counters[i] = 0

    end = row.size
    if start >= end:
        raise PatternNotFoundError(f"Offset {start} is past the end of the row")

    is_white = not row[start]
    counter_position = 0
    i = start
    while i < end:
        if row[i] != is_white:
            counters[counter_position] += 1
        else:
            counter_position += 1
            if counter_position == num_counters:
                break
            counters[counter_position] = 1
            is_white = not is_white
        i += 1

    # Either all counters were filled, or the final run reached the row end
    if not (
        counter_position == num_counters
        or (counter_position == num_counters - 1 and i == end)
    ):
        raise PatternNotFoundError(f"Row ended while recording pattern at offset {start}")


def pattern_match_variance(
    counters: Sequence[int],
    pattern: Sequence[int],
    max_individual_variance: float,
) -> float:
    """
    Score how far observed run widths are from a reference pattern.

    Widths are scaled so the pattern's total matches the observed total; the
    result is the summed absolute variance divided by the observed total.

    Returns:
        Average variance, or ``inf`` when the counters are narrower than the
        pattern or any single element exceeds ``max_individual_variance``
    """
    total = sum(counters)
    pattern_length = sum(pattern)
    if total < pattern_length:
        # Less than one pixel per module; can't be reliably matched
        return float("inf")

    unit_bar_width = total / pattern_length
    max_individual = max_individual_variance * unit_bar_width

    total_variance = 0.0
    for counter, scaled in zip(counters, pattern):
        variance = abs(counter - scaled * unit_bar_width)
        if variance > max_individual:
            return float("inf")
        total_variance += variance
    return total_variance / total


def decode_digit(
    row: BitRow,
    counters: list[int],
    row_offset: int,
    patterns: Sequence[Sequence[int]],
    max_avg_variance: float = MAX_AVG_VARIANCE,
    max_individual_variance: float = MAX_INDIVIDUAL_VARIANCE,
) -> int:
    """
    Match the digit encoded at ``row_offset`` against ``patterns``.

    ``counters`` is filled with the four run widths consumed, so callers can
    advance their cursor by ``sum(counters)``.

    Returns:
        Index of the best matching pattern

    Raises:
        PatternNotFoundError: If no pattern is within tolerance
    """
    record_pattern(row, row_offset, counters)

    best_variance = max_avg_variance
    best_match = -1
    for index, pattern in enumerate(patterns):
        variance = pattern_match_variance(counters, pattern, max_individual_variance)
        if variance < best_variance:
            best_variance = variance
            best_match = index

    if best_match < 0:
        raise PatternNotFoundError(
            f"No digit pattern matches run widths {list(counters)} at offset {row_offset}"
        )
    return best_match


def find_guard_pattern(
    row: BitRow,
    row_offset: int,
    white_first: bool,
    pattern: Sequence[int],
    max_avg_variance: float = MAX_AVG_VARIANCE,
    max_individual_variance: float = MAX_INDIVIDUAL_VARIANCE,
) -> tuple[int, int]:
    """
    Locate ``pattern`` at or after ``row_offset``.

    Args:
        row: Row to search
        row_offset: Where to start searching
        white_first: Whether the pattern begins with a space rather than a bar
        pattern: Guard element widths in modules

    Returns:
        ``(begin, end)`` offsets of the guard, end exclusive

    Raises:
        GuardNotFoundError: If the pattern does not occur in the rest of the row
    """
    pattern_length = len(pattern)
    counters = [0] * pattern_length
    width = row.size

    # Skip to the first module of the expected colour
    is_white = False
    while row_offset < width:
        is_white = not row[row_offset]
        if white_first == is_white:
            break
        row_offset += 1

    counter_position = 0
    pattern_start = row_offset
    for x in range(row_offset, width):
        if row[x] != is_white:
            counters[counter_position] += 1
        else:
            if counter_position == pattern_length - 1:
                variance = pattern_match_variance(counters, pattern, max_individual_variance)
                if variance < max_avg_variance:
                    return pattern_start, x
                # Slide the window forward by one bar/space pair
                pattern_start += counters[0] + counters[1]
                counters[:-2] = counters[2:]
                counters[-2] = 0
                counters[-1] = 0
                counter_position -= 1
            else:
                counter_position += 1
            counters[counter_position] = 1
            is_white = not is_white

    raise GuardNotFoundError(f"Guard pattern {tuple(pattern)} not found after offset {row_offset}")


def find_start_guard_pattern(
    row: BitRow,
    max_avg_variance: float = MAX_AVG_VARIANCE,
    max_individual_variance: float = MAX_INDIVIDUAL_VARIANCE,
) -> tuple[int, int]:
    """
    Locate the ``1,1,1`` start guard preceded by a quiet zone.

    The quiet zone must be at least as wide as the guard itself.

    Raises:
        GuardNotFoundError: If no start guard with a quiet zone is present
    """
    next_start = 0
    while True:
        start, end = find_guard_pattern(
            row,
            next_start,
            False,
            START_END_PATTERN,
            max_avg_variance=max_avg_variance,
            max_individual_variance=max_individual_variance,
        )
        quiet_start = start - (end - start)
        if quiet_start >= 0 and row.is_range(quiet_start, start, False):
            return start, end
        logger.debug("Start guard candidate without quiet zone", begin=start, end=end)
        next_start = end


def calculate_upca_checksum(code: str) -> int:
    """
    Calculate the UPC-A check digit from the first 11 digits.

    Algorithm:
    1. Multiply digits at odd positions (1, 3, 5, ...) by 3
    2. Multiply digits at even positions (2, 4, 6, ...) by 1
    3. Sum all results
    4. Checksum = (10 - (sum mod 10)) mod 10
    """
    if len(code) < 11:
        raise ValueError("Code must have at least 11 digits for UPC-A")

    total = 0
    for i, digit in enumerate(code[:11]):
        if not digit.isdigit():
            raise ValueError(f"Invalid character in code: {digit}")
        weight = 3 if i % 2 == 0 else 1
        total += int(digit) * weight

    return (10 - (total % 10)) % 10


def validate_upca_checksum(code: str) -> bool:
    """
    Validate a UPC-A checksum.

    Args:
        code: 12-digit UPC-A code

    Returns:
        True if checksum is valid
    """
    if len(code) != 12:
        return False
    if not code.isdigit():
        return False

    return calculate_upca_checksum(code) == int(code[-1])

"""Byte ranges and identifier-range planning.

Tag identifiers live either near the start of a file (ID3v2 header) or near
its end (ID3v1 trailer). Fetching each identifier separately is expensive
for slow byte sources, so the identifier ranges are grouped by the side of
the file they sit on and each group is loaded with a single covering range.
"""

import logging
from typing import Iterable, List, NamedTuple, Optional, Tuple

logger = logging.getLogger(__name__)


class ByteRange(NamedTuple):
    """A run of bytes. A negative offset counts back from the end of the file."""

    offset: int
    length: int

    def resolve(self, file_size: int) -> "ByteRange":
        """Return the same range with an absolute offset."""
        if self.offset >= 0:
            return self
        return ByteRange(file_size + self.offset, self.length)

    @property
    def end(self) -> int:
        """Offset of the last byte in the range (inclusive)."""
        return self.offset + self.length - 1


def is_range_valid(byte_range: ByteRange, file_size: int) -> bool:
    """Check that a range lies entirely inside a file of ``file_size`` bytes."""
    offset, length = byte_range
    if length < 0:
        return False
    if offset >= 0:
        return offset + length <= file_size
    return -offset <= file_size and offset + length <= 0


def is_start_side(byte_range: ByteRange, file_size: int) -> bool:
    """True when the range starts in the first half of the file."""
    offset = byte_range.offset
    if offset >= 0:
        return offset < file_size / 2
    return offset < -file_size / 2


def split_by_side(
    ranges: Iterable[ByteRange], file_size: int
) -> Tuple[List[ByteRange], List[ByteRange]]:
    """Drop invalid ranges and partition the rest into start and end sides."""
    start_side: List[ByteRange] = []
    end_side: List[ByteRange] = []

    for byte_range in ranges:
        if not is_range_valid(byte_range, file_size):
            logger.debug(f"Ignoring range {byte_range} outside file of {file_size} bytes")
            continue
        if is_start_side(byte_range, file_size):
            start_side.append(byte_range)
        else:
            end_side.append(byte_range)

    return start_side, end_side


def covering_range(ranges: Iterable[ByteRange], file_size: int) -> Optional[ByteRange]:
    """Smallest absolute range that contains every range given, or None."""
    start = None
    end = None
    for byte_range in ranges:
        resolved = byte_range.resolve(file_size)
        start = resolved.offset if start is None else min(start, resolved.offset)
        end = resolved.end if end is None else max(end, resolved.end)

    if start is None or end is None:
        return None
    return ByteRange(start, end - start + 1)


def plan_ranges(ranges: Iterable[ByteRange], file_size: int) -> List[ByteRange]:
    """Plan the loads needed to read every valid range: at most one per side.

    Args:
        ranges: Candidate identifier ranges, possibly with negative offsets
        file_size: Size of the file in bytes

    Returns:
        Zero, one or two absolute ranges, start side first.
    """
    plan = []
    for side in split_by_side(ranges, file_size):
        merged = covering_range(side, file_size)
        if merged is not None:
            plan.append(merged)
    return plan

"""Tests for byte range validity and identifier range planning."""

import pytest

from mediatags.ranges import (
    ByteRange,
    covering_range,
    is_range_valid,
    is_start_side,
    plan_ranges,
    split_by_side,
)


class TestRangeValidity:
    """Test is_range_valid at and around the file boundaries."""

    @pytest.mark.parametrize(
        "offset,length,file_size,expected",
        [
            (0, 10, 100, True),
            (90, 10, 100, True),  # ends exactly at end of file
            (91, 10, 100, False),
            (0, 101, 100, False),
            (-128, 3, 1000, True),
            (-100, 100, 100, True),  # starts exactly at start of file
            (-101, 3, 100, False),
            (-3, 4, 100, False),  # runs past end of file
            (-3, 3, 100, True),
        ],
    )
    def test_validity(self, offset, length, file_size, expected):
        assert is_range_valid(ByteRange(offset, length), file_size) is expected

    def test_negative_length_is_invalid(self):
        assert not is_range_valid(ByteRange(0, -1), 100)

    def test_resolve_negative_offset(self):
        """Negative offsets count back from the end of the file."""
        assert ByteRange(-128, 3).resolve(1000) == ByteRange(872, 3)
        assert ByteRange(5, 3).resolve(1000) == ByteRange(5, 3)


class TestSides:
    """Test the start/end side classification."""

    def test_positive_offsets(self):
        assert is_start_side(ByteRange(0, 10), 100)
        assert is_start_side(ByteRange(49, 1), 100)
        assert not is_start_side(ByteRange(50, 1), 100)

    def test_negative_offsets(self):
        """A negative offset further back than half the file is on the start side."""
        assert not is_start_side(ByteRange(-10, 3), 100)
        assert not is_start_side(ByteRange(-50, 3), 100)
        assert is_start_side(ByteRange(-60, 3), 100)

    def test_split_drops_invalid_ranges(self):
        start, end = split_by_side(
            [ByteRange(0, 10), ByteRange(-128, 3), ByteRange(-3, 3)], 100
        )
        assert start == [ByteRange(0, 10)]
        assert end == [ByteRange(-3, 3)]


class TestPlanning:
    """Test that planned loads are minimal and side-partitioned."""

    def test_overlapping_start_ranges_merge(self):
        plan = plan_ranges([ByteRange(0, 10), ByteRange(5, 15)], 1000)
        assert plan == [ByteRange(0, 20)]

    def test_start_and_end_never_merge(self):
        plan = plan_ranges([ByteRange(0, 10), ByteRange(-128, 3)], 1000)
        assert plan == [ByteRange(0, 10), ByteRange(872, 3)]

    def test_end_side_only(self):
        plan = plan_ranges([ByteRange(-128, 3), ByteRange(-10, 4)], 1000)
        assert plan == [ByteRange(872, 122)]

    def test_no_valid_ranges(self):
        assert plan_ranges([ByteRange(0, 10)], 5) == []
        assert plan_ranges([], 100) == []

    def test_disjoint_ranges_on_one_side_are_covered(self):
        assert covering_range([ByteRange(2, 2), ByteRange(10, 2)], 100) == ByteRange(2, 10)

    def test_covering_range_of_nothing(self):
        assert covering_range([], 100) is None

"""Cache of the byte ranges a backend has already loaded."""

import bisect
from typing import List, Tuple

from ..errors import FileReaderError


class ChunkedFileData:
    """Sorted, non-overlapping chunks of file data keyed by their offset.

    Adjacent and overlapping chunks are merged on insertion so that any
    loaded range can be served from a single chunk.
    """

    def __init__(self):
        self._offsets: List[int] = []
        self._chunks: List[bytes] = []

    def __len__(self):
        return len(self._chunks)

    @property
    def chunks(self) -> List[Tuple[int, bytes]]:
        return list(zip(self._offsets, self._chunks))

    def add_data(self, offset: int, data: bytes) -> None:
        if not data:
            return
        start = offset
        end = offset + len(data)

        # First chunk that ends at or after the new start.
        first = bisect.bisect_left(self._offsets, start)
        if first > 0 and self._offsets[first - 1] + len(self._chunks[first - 1]) >= start:
            first -= 1

        last = first
        while last < len(self._offsets) and self._offsets[last] <= end:
            last += 1

        if first == last:
            self._offsets.insert(first, start)
            self._chunks.insert(first, bytes(data))
            return

        merged_start = min(start, self._offsets[first])
        merged_end = max(end, self._offsets[last - 1] + len(self._chunks[last - 1]))
        merged = bytearray(merged_end - merged_start)
        for chunk_offset, chunk in zip(self._offsets[first:last], self._chunks[first:last]):
            merged[chunk_offset - merged_start:chunk_offset - merged_start + len(chunk)] = chunk
        merged[start - merged_start:end - merged_start] = data

        self._offsets[first:last] = [merged_start]
        self._chunks[first:last] = [bytes(merged)]

    def _find_chunk(self, offset: int) -> int:
        index = bisect.bisect_right(self._offsets, offset) - 1
        if index < 0:
            return -1
        if offset >= self._offsets[index] + len(self._chunks[index]):
            return -1
        return index

    def has_data_range(self, offset: int, length: int) -> bool:
        """True when every byte of ``[offset, offset + length)`` is loaded."""
        if length <= 0:
            return True
        index = self._find_chunk(offset)
        if index < 0:
            return False
        return offset + length <= self._offsets[index] + len(self._chunks[index])

    def get_bytes_at(self, offset: int, length: int) -> bytes:
        if length <= 0:
            return b""
        index = self._find_chunk(offset)
        if index < 0 or not self.has_data_range(offset, length):
            raise FileReaderError(
                f"Bytes {offset}-{offset + length - 1} have not been loaded yet"
            )
        relative = offset - self._offsets[index]
        return self._chunks[index][relative:relative + length]

    def get_byte_at(self, offset: int) -> int:
        return self.get_bytes_at(offset, 1)[0]

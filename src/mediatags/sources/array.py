"""In-memory byte source."""

from typing import Any

from ..callbacks import Callbacks
from ..errors import FileReaderError
from ..ranges import ByteRange
from .base import MediaFileReader


class BytesFileReader(MediaFileReader):
    """Serves a ``bytes``-like object that is already fully in memory."""

    def __init__(self, location: Any):
        super().__init__(location)
        self._data = bytes(location)

    @classmethod
    def can_read_file(cls, location: Any) -> bool:
        return isinstance(location, (bytes, bytearray, memoryview))

    def _init(self, callbacks: Callbacks) -> None:
        self._size = len(self._data)
        callbacks.on_success()

    def load_range(self, byte_range: ByteRange, callbacks: Callbacks) -> None:
        callbacks.on_success()

    def get_size(self) -> int:
        return len(self._data)

    def get_bytes_at(self, offset: int, length: int) -> bytes:
        if offset < 0 or length < 0 or offset + length > len(self._data):
            raise FileReaderError(
                f"Bytes {offset}-{offset + length - 1} are outside of the "
                f"{len(self._data)} byte buffer"
            )
        return self._data[offset:offset + length]

"""Byte-source contract shared by every backend."""

import logging
import struct
from typing import Any, Optional

from ..callbacks import Callbacks
from ..errors import FileReaderError
from ..ranges import ByteRange
from ..strings import DecodedString, TextEncoding, decode_string

logger = logging.getLogger(__name__)


class MediaFileReader:
    """Random access to the bytes of a media file.

    Backends implement ``can_read_file``, ``_init`` and ``load_range`` and
    serve loaded bytes through ``get_bytes_at``. Everything else is built
    on top of that. Loads report completion through a ``Callbacks`` pair
    and may do so synchronously or later.
    """

    def __init__(self, location: Any):
        self.location = location
        self._is_initialized = False
        self._size = 0

    @classmethod
    def can_read_file(cls, location: Any) -> bool:
        raise NotImplementedError

    def init(self, callbacks: Callbacks) -> None:
        """Prepare the source (e.g. find its size). Only done once."""
        if self._is_initialized:
            callbacks.on_success()
            return

        def on_success(*args):
            self._is_initialized = True
            callbacks.on_success()

        self._init(Callbacks(on_success, callbacks.on_error))

    def _init(self, callbacks: Callbacks) -> None:
        raise NotImplementedError

    def load_range(self, byte_range: ByteRange, callbacks: Callbacks) -> None:
        """Make the bytes of an absolute range available to the getters."""
        raise NotImplementedError

    def get_size(self) -> int:
        if not self._is_initialized:
            raise FileReaderError(f"{type(self).__name__} has not been initialized")
        return self._size

    def get_bytes_at(self, offset: int, length: int) -> bytes:
        raise NotImplementedError

    def get_byte_at(self, offset: int) -> int:
        return self.get_bytes_at(offset, 1)[0]

    def get_sbyte_at(self, offset: int) -> int:
        byte = self.get_byte_at(offset)
        return byte - 256 if byte > 127 else byte

    def is_bit_set_at(self, offset: int, bit: int) -> bool:
        return (self.get_byte_at(offset) & (1 << bit)) != 0

    def _unpack(self, fmt: str, offset: int, big_endian: bool) -> int:
        fmt = (">" if big_endian else "<") + fmt
        return struct.unpack(fmt, self.get_bytes_at(offset, struct.calcsize(fmt)))[0]

    def get_short_at(self, offset: int, big_endian: bool) -> int:
        return self._unpack("H", offset, big_endian)

    def get_long_at(self, offset: int, big_endian: bool) -> int:
        return self._unpack("I", offset, big_endian)

    def get_integer_24_at(self, offset: int, big_endian: bool) -> int:
        raw = self.get_bytes_at(offset, 3)
        return int.from_bytes(raw, "big" if big_endian else "little")

    def get_synchsafe_integer_32_at(self, offset: int) -> int:
        """Read a 28-bit integer stored in the low 7 bits of four bytes."""
        b0, b1, b2, b3 = self.get_bytes_at(offset, 4)
        return (b0 & 0x7F) << 21 | (b1 & 0x7F) << 14 | (b2 & 0x7F) << 7 | (b3 & 0x7F)

    def get_string_at(self, offset: int, length: int) -> str:
        """Fixed-length latin-1 string; every byte maps to one character."""
        return self.get_bytes_at(offset, length).decode("latin-1")

    def get_string_with_charset_at(
        self, offset: int, length: int, encoding: Optional[TextEncoding] = None
    ) -> DecodedString:
        """Terminated string of at most ``length`` bytes; see ``decode_string``."""
        raw = self.get_bytes_at(offset, max(length, 0))
        return decode_string(raw, 0, len(raw), encoding)

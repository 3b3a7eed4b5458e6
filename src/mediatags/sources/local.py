"""Local filesystem byte source."""

import logging
import os
import re
from typing import Any

from ..callbacks import Callbacks
from ..errors import FileReaderError
from ..ranges import ByteRange
from .base import MediaFileReader
from .chunks import ChunkedFileData

logger = logging.getLogger(__name__)

_URL_SCHEME = re.compile(r"^[a-z][a-z0-9+.-]*://", re.IGNORECASE)


class LocalFileReader(MediaFileReader):
    """Reads ranges of a local file on demand and caches what was read."""

    def __init__(self, location: Any):
        super().__init__(location)
        self.path = os.fspath(location)
        self._file_data = ChunkedFileData()

    @classmethod
    def can_read_file(cls, location: Any) -> bool:
        if isinstance(location, os.PathLike):
            return True
        return isinstance(location, str) and not _URL_SCHEME.match(location)

    def _init(self, callbacks: Callbacks) -> None:
        try:
            self._size = os.stat(self.path).st_size
        except OSError as e:
            callbacks.on_error(FileReaderError(f"Cannot stat {self.path}: {e}"))
            return
        callbacks.on_success()

    def load_range(self, byte_range: ByteRange, callbacks: Callbacks) -> None:
        offset, length = byte_range.resolve(self._size)
        # Never read past the end of the file.
        length = max(0, min(length, self._size - offset))

        if self._file_data.has_data_range(offset, length):
            callbacks.on_success()
            return

        logger.debug(f"Loading bytes {offset}-{offset + length - 1} of {self.path}")
        try:
            with open(self.path, "rb") as f:
                f.seek(offset)
                data = f.read(length)
        except OSError as e:
            callbacks.on_error(FileReaderError(f"Cannot read {self.path}: {e}"))
            return

        if len(data) < length:
            callbacks.on_error(
                FileReaderError(
                    f"Short read from {self.path}: expected {length} bytes, got {len(data)}"
                )
            )
            return

        self._file_data.add_data(offset, data)
        callbacks.on_success()

    def get_bytes_at(self, offset: int, length: int) -> bytes:
        return self._file_data.get_bytes_at(offset, length)

"""Top-level read operation.

A ``Registry`` holds the ordered backends and tag readers, ``Reader`` ties
a location to them and runs backend selection, format detection and the
tag read as one operation with a single outcome.
"""

import logging
from typing import Any, Iterable, List, Optional, Type

from .callbacks import Callbacks, ResultCollector
from .config import Config
from .detector import FormatDetector
from .errors import FileReaderError, TagReadError
from .sources.array import BytesFileReader
from .sources.base import MediaFileReader
from .sources.local import LocalFileReader
from .tagging.base import MediaTagReader, TagMetadata
from .tagging.id3v1 import ID3v1TagReader
from .tagging.id3v2 import ID3v2TagReader

logger = logging.getLogger(__name__)

TAG_READERS = {
    "id3v2": ID3v2TagReader,
    "id3v1": ID3v1TagReader,
}


class Registry:
    """Ordered byte-source backends and tag readers; order is priority."""

    def __init__(self):
        self.file_readers: List[Type[MediaFileReader]] = []
        self.tag_readers: List[Type[MediaTagReader]] = []

    @classmethod
    def default(cls) -> "Registry":
        return (
            cls()
            .add_file_reader(BytesFileReader)
            .add_file_reader(LocalFileReader)
            .add_tag_reader(ID3v2TagReader)
            .add_tag_reader(ID3v1TagReader)
        )

    @classmethod
    def from_config(cls, config: Config) -> "Registry":
        registry = cls().add_file_reader(BytesFileReader).add_file_reader(LocalFileReader)
        for name in config.get_tag_readers():
            registry.add_tag_reader(TAG_READERS[name])
        return registry

    def add_file_reader(self, file_reader: Type[MediaFileReader]) -> "Registry":
        self.file_readers.append(file_reader)
        return self

    def add_tag_reader(self, tag_reader: Type[MediaTagReader]) -> "Registry":
        self.tag_readers.append(tag_reader)
        return self

    def remove_tag_reader(self, tag_reader: Type[MediaTagReader]) -> "Registry":
        if tag_reader in self.tag_readers:
            self.tag_readers.remove(tag_reader)
        return self

    def find_file_reader(self, location: Any) -> Type[MediaFileReader]:
        for file_reader in self.file_readers:
            if file_reader.can_read_file(location):
                return file_reader
        raise FileReaderError(f"No suitable file reader found for {location!r}")


class Reader:
    def __init__(self, location: Any, registry: Optional[Registry] = None):
        self._location = location
        self._registry = registry if registry is not None else Registry.default()
        self._tags_to_read: Optional[List[str]] = None
        self._file_reader: Optional[Type[MediaFileReader]] = None
        self._tag_reader: Optional[Type[MediaTagReader]] = None

    def set_tags_to_read(self, tags_to_read: Optional[Iterable[str]]) -> "Reader":
        self._tags_to_read = list(tags_to_read) if tags_to_read is not None else None
        return self

    def set_file_reader(self, file_reader: Type[MediaFileReader]) -> "Reader":
        """Use this backend instead of searching the registry."""
        self._file_reader = file_reader
        return self

    def set_tag_reader(self, tag_reader: Type[MediaTagReader]) -> "Reader":
        """Skip detection and read with this tag reader."""
        self._tag_reader = tag_reader
        return self

    def _open(self, callbacks: Callbacks) -> Optional[MediaFileReader]:
        try:
            file_reader_cls = self._file_reader or self._registry.find_file_reader(self._location)
        except TagReadError as e:
            callbacks.on_error(e)
            return None
        logger.debug(f"Reading {self._location!r} with {file_reader_cls.__name__}")
        return file_reader_cls(self._location)

    def read(self, callbacks: Callbacks) -> None:
        file_reader = self._open(callbacks)
        if file_reader is None:
            return

        def on_tag_reader(tag_reader_cls):
            tag_reader = tag_reader_cls(file_reader).set_tags_to_read(self._tags_to_read)
            tag_reader.read(callbacks)

        def on_init(*args):
            detected = Callbacks(on_tag_reader, callbacks.on_error)
            if self._tag_reader is not None:
                on_tag_reader(self._tag_reader)
            else:
                FormatDetector(self._registry.tag_readers).detect(file_reader, detected)

        file_reader.init(Callbacks(on_init, callbacks.on_error))

    def detect(self, callbacks: Callbacks) -> None:
        """Report the file reader instance and matching tag reader class only."""
        file_reader = self._open(callbacks)
        if file_reader is None:
            return

        def on_init(*args):
            FormatDetector(self._registry.tag_readers).detect(
                file_reader,
                Callbacks(lambda tag_reader: callbacks.on_success((file_reader, tag_reader)),
                          callbacks.on_error),
            )

        file_reader.init(Callbacks(on_init, callbacks.on_error))


def read(location: Any, callbacks: Callbacks, registry: Optional[Registry] = None) -> None:
    """Read the tags at ``location``, reporting through ``callbacks``."""
    Reader(location, registry).read(callbacks)


def read_tags(
    location: Any,
    tags: Optional[Iterable[str]] = None,
    registry: Optional[Registry] = None,
) -> TagMetadata:
    """Blocking read for backends that complete synchronously.

    Raises:
        TagReadError: The error the read reported
    """
    collector = ResultCollector()
    Reader(location, registry).set_tags_to_read(tags).read(collector.callbacks)
    return collector.get()

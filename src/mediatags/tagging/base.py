"""Base class for tag container readers and the records they produce."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from ..callbacks import Callbacks
from ..errors import TagReadError
from ..ranges import ByteRange
from ..sources.base import MediaFileReader

logger = logging.getLogger(__name__)


@dataclass
class FrameRecord:
    """One frame of a tag. ``data`` holds raw bytes when it was not decoded."""

    id: str
    size: int
    description: str
    data: Any


@dataclass
class TagMetadata:
    type: str
    version: str
    tags: Dict[str, Any] = field(default_factory=dict)
    major: Optional[int] = None
    revision: Optional[int] = None
    flags: Dict[str, bool] = field(default_factory=dict)
    size: int = 0

    def __getitem__(self, name: str) -> Any:
        return self.tags[name]

    def __contains__(self, name: str) -> bool:
        return name in self.tags

    def get(self, name: str, default: Any = None) -> Any:
        return self.tags.get(name, default)


class MediaTagReader:
    """Reads one kind of tag container from a ``MediaFileReader``.

    Subclasses declare where their identifier lives and how to recognise it
    (both class methods, used before an instance exists), then implement
    ``_load_data`` and ``_parse_data``.
    """

    def __init__(self, media_file_reader: MediaFileReader):
        self._media_file_reader = media_file_reader
        self._tags_to_read: Optional[List[str]] = None

    @classmethod
    def identifier_range(cls) -> ByteRange:
        raise NotImplementedError

    @classmethod
    def can_read_tag_format(cls, identifier: bytes) -> bool:
        raise NotImplementedError

    def set_tags_to_read(self, tags_to_read: Optional[Iterable[str]]) -> "MediaTagReader":
        self._tags_to_read = list(tags_to_read) if tags_to_read is not None else None
        return self

    def read(self, callbacks: Callbacks) -> None:
        def on_loaded(*args):
            try:
                tags = self._parse_data(self._media_file_reader, self._tags_to_read)
            except TagReadError as e:
                logger.debug(f"{type(self).__name__} failed: {e!r}")
                callbacks.on_error(e)
                return
            callbacks.on_success(tags)

        self._load_data(self._media_file_reader, Callbacks(on_loaded, callbacks.on_error))

    def _load_data(self, media_file_reader: MediaFileReader, callbacks: Callbacks) -> None:
        raise NotImplementedError

    def _parse_data(
        self, media_file_reader: MediaFileReader, tags: Optional[List[str]]
    ) -> TagMetadata:
        raise NotImplementedError

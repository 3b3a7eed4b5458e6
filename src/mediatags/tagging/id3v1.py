"""ID3v1 / ID3v1.1 tag reader.

The tag is the last 128 bytes of the file::

    "TAG" title[30] artist[30] album[30] year[4] comment[30] genre[1]

ID3v1.1 steals the last two comment bytes for a zero byte and the track
number.
"""

from typing import List, Optional

from mutagen.id3 import TCON

from ..callbacks import Callbacks
from ..constants import ID3V1_SIZE
from ..errors import TagFormatError
from ..ranges import ByteRange
from ..sources.base import MediaFileReader
from .base import MediaTagReader, TagMetadata


def _clean(value: str) -> str:
    return value.split("\x00", 1)[0].rstrip(" ")


def genre_name(genre_byte: int) -> str:
    """Look up an ID3v1 genre number; unknown numbers give an empty string."""
    if genre_byte < len(TCON.GENRES):
        return TCON.GENRES[genre_byte]
    return ""


class ID3v1TagReader(MediaTagReader):

    @classmethod
    def identifier_range(cls) -> ByteRange:
        return ByteRange(-ID3V1_SIZE, 3)

    @classmethod
    def can_read_tag_format(cls, identifier: bytes) -> bool:
        return bytes(identifier[:3]) == b"TAG"

    def _load_data(self, media_file_reader: MediaFileReader, callbacks: Callbacks) -> None:
        file_size = media_file_reader.get_size()
        start = max(file_size - ID3V1_SIZE, 0)
        media_file_reader.load_range(ByteRange(start, file_size - start), callbacks)

    def _parse_data(
        self, media_file_reader: MediaFileReader, tags: Optional[List[str]]
    ) -> TagMetadata:
        data = media_file_reader
        if data.get_size() < ID3V1_SIZE:
            raise TagFormatError(
                f"File of {data.get_size()} bytes is too short for an ID3v1 tag"
            )
        offset = data.get_size() - ID3V1_SIZE
        if not self.can_read_tag_format(data.get_bytes_at(offset, 3)):
            raise TagFormatError("No ID3v1 tag at the end of the file")

        title = _clean(data.get_string_at(offset + 3, 30))
        artist = _clean(data.get_string_at(offset + 33, 30))
        album = _clean(data.get_string_at(offset + 63, 30))
        year = _clean(data.get_string_at(offset + 93, 4))

        track_flag = data.get_byte_at(offset + 97 + 28)
        track = data.get_byte_at(offset + 97 + 29)
        if track_flag == 0 and track != 0:
            version = "1.1"
            comment = _clean(data.get_string_at(offset + 97, 28))
        else:
            version = "1.0"
            track = 0
            comment = _clean(data.get_string_at(offset + 97, 30))

        values = {
            "title": title,
            "artist": artist,
            "album": album,
            "year": year,
            "comment": comment,
            "genre": genre_name(data.get_byte_at(offset + 127)),
        }
        if track:
            values["track"] = track
        if tags is not None:
            values = {name: value for name, value in values.items() if name in tags}

        return TagMetadata(type="ID3", version=version, tags=values, size=ID3V1_SIZE)

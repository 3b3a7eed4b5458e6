"""ID3v2 frame decoding.

Frame ids map to reader functions in three tiers: an exact table entry,
then the text family (ids starting with ``T``), then the link family (ids
starting with ``W``). Anything else has no reader and is kept undecoded by
the container.

Every reader has the signature::

    reader(offset, length, data, flags=None, major_version=3)

where ``offset`` and ``length`` delimit the frame payload inside ``data``,
a ``MediaFileReader``.
"""

import re
import struct
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional

from ..constants import PICTURE_TYPES
from ..errors import MalformedFrameError, TagReadError, UnsupportedVersionError
from ..sources.base import MediaFileReader
from ..strings import get_text_encoding

TEXT_FRAME_SIGIL = "T"
LINK_FRAME_SIGIL = "W"


@dataclass
class FrameFlags:
    tag_alter_preservation: bool = False
    file_alter_preservation: bool = False
    read_only: bool = False
    grouping_identity: bool = False
    compression: bool = False
    encryption: bool = False
    unsynchronisation: bool = False
    data_length_indicator: bool = False


@dataclass
class UserDefinedText:
    description: str
    value: str


@dataclass
class UserDefinedUrl:
    description: str
    value: str


@dataclass
class Picture:
    format: str
    type: str
    description: str
    data: bytes


@dataclass
class Comment:
    language: str
    short_description: str
    text: str


@dataclass
class Lyrics:
    language: str
    descriptor: str
    lyrics: str


class FrameCategory(Enum):
    EXACT = "exact"
    TEXT_FAMILY = "text"
    LINK_FAMILY = "link"
    UNKNOWN = "unknown"


FrameReader = Callable[..., object]

_frame_readers: Dict[str, FrameReader] = {}


def register_frame_reader(*frame_ids: str) -> Callable[[FrameReader], FrameReader]:
    """Decorator registering a reader under one or more exact frame ids."""

    def decorator(func: FrameReader) -> FrameReader:
        for frame_id in frame_ids:
            _frame_readers[frame_id] = func
        return func

    return decorator


def classify_frame(frame_id: str) -> FrameCategory:
    if frame_id in _frame_readers:
        return FrameCategory.EXACT
    if frame_id.startswith(TEXT_FRAME_SIGIL):
        return FrameCategory.TEXT_FAMILY
    if frame_id.startswith(LINK_FRAME_SIGIL):
        return FrameCategory.LINK_FAMILY
    return FrameCategory.UNKNOWN


def get_frame_reader(frame_id: str) -> Optional[FrameReader]:
    """Return the reader for ``frame_id``, or None when it has none."""
    category = classify_frame(frame_id)
    if category is FrameCategory.EXACT:
        return _frame_readers[frame_id]
    if category is FrameCategory.TEXT_FAMILY:
        return read_text_frame
    if category is FrameCategory.LINK_FAMILY:
        return read_url_frame
    return None


def decode_frame(
    frame_id: str,
    offset: int,
    length: int,
    data: MediaFileReader,
    flags: Optional[FrameFlags] = None,
    major_version: int = 3,
) -> object:
    """Run the reader for ``frame_id`` and turn decode failures into MalformedFrameError."""
    reader = get_frame_reader(frame_id)
    if reader is None:
        raise MalformedFrameError(f"No reader for frame {frame_id!r}")
    try:
        return reader(offset, length, data, flags, major_version)
    except (MalformedFrameError, UnsupportedVersionError):
        raise
    except (TagReadError, IndexError, ValueError, struct.error) as e:
        raise MalformedFrameError(f"Cannot decode {frame_id} frame at offset {offset}: {e}")


def _require(length: int, minimum: int, what: str) -> None:
    if length < minimum:
        raise MalformedFrameError(f"{what} frame needs at least {minimum} bytes, got {length}")


def _read_user_defined_fields(offset, length, data, encoding):
    description = data.get_string_with_charset_at(offset + 1, length - 1, encoding)
    # The value is decoded without the frame charset.
    value = data.get_string_with_charset_at(
        offset + 1 + description.bytes_read_count,
        length - 1 - description.bytes_read_count,
    )
    return description.value, value.value


@register_frame_reader("APIC")
def read_picture_frame(offset, length, data, flags=None, major_version=3):
    _require(length, 2, "Picture")
    start = offset
    end = start + length
    encoding = get_text_encoding(data.get_byte_at(offset))

    if major_version == 2:
        image_format = data.get_string_at(offset + 1, 3)
        offset += 4
    elif major_version in (3, 4):
        mime = data.get_string_with_charset_at(offset + 1, length - 1)
        image_format = mime.value
        offset += 1 + mime.bytes_read_count
    else:
        raise UnsupportedVersionError(f"Cannot read pictures of ID3v2.{major_version}")

    if offset >= end:
        raise MalformedFrameError("Picture frame ends before its picture type")
    type_byte = data.get_byte_at(offset)
    if type_byte >= len(PICTURE_TYPES):
        raise MalformedFrameError(f"Unknown picture type {type_byte}")

    description = data.get_string_with_charset_at(offset + 1, end - offset - 1, encoding)
    offset += 1 + description.bytes_read_count

    return Picture(
        format=image_format,
        type=PICTURE_TYPES[type_byte],
        description=description.value,
        data=data.get_bytes_at(offset, end - offset),
    )


# The 3-letter frame family always uses the v2.2 picture layout.
@register_frame_reader("PIC")
def read_v22_picture_frame(offset, length, data, flags=None, major_version=3):
    return read_picture_frame(offset, length, data, flags, 2)


def _read_language_frame(offset, length, data):
    """Shared layout of COMM and USLT: encoding, language, descriptor, text."""
    _require(length, 4, "Language")
    start = offset
    encoding = get_text_encoding(data.get_byte_at(offset))
    language = data.get_string_at(offset + 1, 3)
    descriptor = data.get_string_with_charset_at(offset + 4, length - 4, encoding)

    offset += 4 + descriptor.bytes_read_count
    text = data.get_string_with_charset_at(offset, start + length - offset, encoding)
    return language, descriptor.value, text.value


@register_frame_reader("COMM", "COM")
def read_comments_frame(offset, length, data, flags=None, major_version=3):
    language, short_description, text = _read_language_frame(offset, length, data)
    return Comment(language=language, short_description=short_description, text=text)


@register_frame_reader("USLT", "ULT")
def read_lyrics_frame(offset, length, data, flags=None, major_version=3):
    language, descriptor, lyrics = _read_language_frame(offset, length, data)
    return Lyrics(language=language, descriptor=descriptor, lyrics=lyrics)


@register_frame_reader("PCNT", "CNT")
def read_counter_frame(offset, length, data, flags=None, major_version=3):
    _require(length, 4, "Play counter")
    if length > 8:
        raise MalformedFrameError(f"Play counter of {length} bytes exceeds 64 bits")
    return int.from_bytes(data.get_bytes_at(offset, length), "big")


def read_text_frame(offset, length, data, flags=None, major_version=3):
    _require(length, 1, "Text")
    encoding = get_text_encoding(data.get_byte_at(offset))
    return data.get_string_with_charset_at(offset + 1, length - 1, encoding).value


@register_frame_reader("TXXX", "TXX")
def read_user_text_frame(offset, length, data, flags=None, major_version=3):
    _require(length, 1, "User defined text")
    encoding = get_text_encoding(data.get_byte_at(offset))
    description, value = _read_user_defined_fields(offset, length, data, encoding)
    return UserDefinedText(description=description, value=value)


def read_url_frame(offset, length, data, flags=None, major_version=3):
    # Only user-defined link frames carry an encoding byte; the others are
    # always latin-1 and start straight with the URL.
    _require(length, 1, "URL")
    encoding = get_text_encoding(data.get_byte_at(offset))
    if encoding is not None:
        description, value = _read_user_defined_fields(offset, length, data, encoding)
        return UserDefinedUrl(description=description, value=value)
    return data.get_string_with_charset_at(offset, length).value


_GENRE_CODE = re.compile(r"^\(\d+\)")


@register_frame_reader("TCON", "TCO")
def read_genre_frame(offset, length, data, flags=None, major_version=3):
    text = read_text_frame(offset, length, data, flags, major_version)
    return _GENRE_CODE.sub("", text)


"""ID3v2 tag reader (versions 2.2, 2.3 and 2.4)."""

import logging
from typing import Dict, List, NamedTuple, Optional

from ..callbacks import Callbacks
from ..constants import FRAME_DESCRIPTIONS, HEADER_FLAGS, ID3V2_HEADER_SIZE, SHORTCUTS
from ..errors import MalformedFrameError, UnsupportedVersionError
from ..ranges import ByteRange
from ..sources.array import BytesFileReader
from ..sources.base import MediaFileReader
from .base import FrameRecord, MediaTagReader, TagMetadata
from .frames import FrameFlags, decode_frame, get_frame_reader

logger = logging.getLogger(__name__)

SUPPORTED_MAJOR_VERSIONS = (2, 3, 4)


class FrameHeader(NamedTuple):
    id: str
    size: int
    header_size: int
    flags: FrameFlags


def remove_unsynchronisation(data: bytes) -> bytes:
    """Undo the unsynchronisation scheme: every ``FF 00`` becomes ``FF``."""
    return data.replace(b"\xff\x00", b"\xff")


def read_frame_flags(data: MediaFileReader, offset: int, major: int) -> FrameFlags:
    status, fmt = data.get_bytes_at(offset, 2)
    if major == 3:
        return FrameFlags(
            tag_alter_preservation=bool(status & 0x80),
            file_alter_preservation=bool(status & 0x40),
            read_only=bool(status & 0x20),
            compression=bool(fmt & 0x80),
            encryption=bool(fmt & 0x40),
            grouping_identity=bool(fmt & 0x20),
        )
    return FrameFlags(
        tag_alter_preservation=bool(status & 0x40),
        file_alter_preservation=bool(status & 0x20),
        read_only=bool(status & 0x10),
        grouping_identity=bool(fmt & 0x40),
        compression=bool(fmt & 0x08),
        encryption=bool(fmt & 0x04),
        unsynchronisation=bool(fmt & 0x02),
        data_length_indicator=bool(fmt & 0x01),
    )


def read_frame_header(data: MediaFileReader, offset: int, major: int) -> Optional[FrameHeader]:
    """Read the frame header at ``offset``; None when padding starts there."""
    if data.get_byte_at(offset) == 0:
        return None

    if major == 2:
        frame_id = data.get_string_at(offset, 3)
        size = data.get_integer_24_at(offset + 3, True)
        return FrameHeader(frame_id, size, 6, FrameFlags())

    frame_id = data.get_string_at(offset, 4)
    if major == 3:
        size = data.get_long_at(offset + 4, True)
    else:
        size = data.get_synchsafe_integer_32_at(offset + 4)
    return FrameHeader(frame_id, size, 10, read_frame_flags(data, offset + 8, major))


def get_frame_ids(names: List[str]) -> List[str]:
    """Expand shortcut names (``title``...) into the frame ids they stand for."""
    frame_ids = []
    for name in names:
        frame_ids.extend(SHORTCUTS.get(name, [name]))
    return frame_ids


class ID3v2TagReader(MediaTagReader):

    @classmethod
    def identifier_range(cls) -> ByteRange:
        return ByteRange(0, ID3V2_HEADER_SIZE)

    @classmethod
    def can_read_tag_format(cls, identifier: bytes) -> bool:
        return bytes(identifier[:3]) == b"ID3"

    def _load_data(self, media_file_reader: MediaFileReader, callbacks: Callbacks) -> None:
        def on_size_loaded(*args):
            tag_size = media_file_reader.get_synchsafe_integer_32_at(6)
            total = min(ID3V2_HEADER_SIZE + tag_size, media_file_reader.get_size())
            media_file_reader.load_range(ByteRange(0, total), callbacks)

        media_file_reader.load_range(ByteRange(6, 4), Callbacks(on_size_loaded, callbacks.on_error))

    def _parse_data(
        self, media_file_reader: MediaFileReader, tags: Optional[List[str]]
    ) -> TagMetadata:
        data = media_file_reader
        major = data.get_byte_at(3)
        revision = data.get_byte_at(4)
        if major not in SUPPORTED_MAJOR_VERSIONS:
            raise UnsupportedVersionError(f"ID3v2.{major}.{revision} is not supported")

        flag_byte = data.get_byte_at(5)
        flags = {name: bool(flag_byte & mask) for name, mask in HEADER_FLAGS[major].items()}
        size = data.get_synchsafe_integer_32_at(6)
        if ID3V2_HEADER_SIZE + size > data.get_size():
            raise MalformedFrameError(
                f"Tag claims {size} bytes but the file has only {data.get_size()}"
            )

        end = ID3V2_HEADER_SIZE + size
        if flags["unsynchronisation"] and major < 4:
            # Before v2.4 the whole tag body, frame headers included, is unsynchronised.
            body = remove_unsynchronisation(data.get_bytes_at(ID3V2_HEADER_SIZE, size))
            data = BytesFileReader(data.get_bytes_at(0, ID3V2_HEADER_SIZE) + body)
            end = data.get_size()

        offset = ID3V2_HEADER_SIZE
        if flags.get("extended_header"):
            if major == 3:
                offset += data.get_long_at(offset, True) + 4
            else:
                offset += data.get_synchsafe_integer_32_at(offset)

        frame_ids = get_frame_ids(tags) if tags is not None else None
        frames = self._read_frames(data, offset, end, major, flags, frame_ids)

        metadata = TagMetadata(
            type="ID3",
            version=f"2.{major}.{revision}",
            major=major,
            revision=revision,
            flags=flags,
            size=size,
        )
        metadata.tags.update(frames)
        for name, shortcut_ids in SHORTCUTS.items():
            for frame_id in shortcut_ids:
                if frame_id in frames:
                    record = frames[frame_id]
                    if isinstance(record, list):
                        record = record[0]
                    metadata.tags[name] = record.data
                    break
        return metadata

    def _read_frames(
        self,
        data: MediaFileReader,
        offset: int,
        end: int,
        major: int,
        tag_flags: Dict[str, bool],
        frame_ids: Optional[List[str]],
    ) -> Dict[str, object]:
        frames: Dict[str, object] = {}
        header_size = 6 if major == 2 else 10

        while offset + header_size <= end:
            header = read_frame_header(data, offset, major)
            if header is None:
                break

            payload_offset = offset + header.header_size
            payload_end = payload_offset + header.size
            if payload_end > end:
                raise MalformedFrameError(
                    f"Frame {header.id!r} at offset {offset} runs past the end of the tag"
                )
            offset = payload_end

            if frame_ids is not None and header.id not in frame_ids:
                continue

            record = self._read_frame(data, header, payload_offset, major, tag_flags)
            if header.id in frames:
                existing = frames[header.id]
                if not isinstance(existing, list):
                    existing = frames[header.id] = [existing]
                existing.append(record)
            else:
                frames[header.id] = record

        return frames

    def _read_frame(
        self,
        data: MediaFileReader,
        header: FrameHeader,
        offset: int,
        major: int,
        tag_flags: Dict[str, bool],
    ) -> FrameRecord:
        flags = header.flags
        size = header.size
        if flags.grouping_identity:
            offset += 1
            size -= 1
        if flags.data_length_indicator:
            offset += 4
            size -= 4
        if size < 0:
            raise MalformedFrameError(f"Frame {header.id!r} is smaller than its own flags")

        description = FRAME_DESCRIPTIONS.get(header.id, "Unknown")
        raw_needed = flags.compression or flags.encryption or get_frame_reader(header.id) is None
        if raw_needed:
            logger.debug(f"Keeping frame {header.id} undecoded")
            return FrameRecord(header.id, size, description, data.get_bytes_at(offset, size))

        # Tag-level unsynchronisation applies per frame in v2.4.
        if flags.unsynchronisation or (tag_flags.get("unsynchronisation") and major == 4):
            data = BytesFileReader(remove_unsynchronisation(data.get_bytes_at(offset, size)))
            offset = 0
            size = data.get_size()

        value = decode_frame(header.id, offset, size, data, flags, major)
        return FrameRecord(header.id, size, description, value)

"""Charset-aware string extraction with consumed-byte accounting.

Frame payloads mix fixed-width fields with terminated strings of variable
width, so every decode reports how many bytes it consumed (BOM and
terminator included). Callers advance their cursor by that count.
"""

import codecs
from enum import Enum
from typing import NamedTuple, Optional


class TextEncoding(Enum):
    LATIN_1 = "iso-8859-1"
    UTF_16 = "utf-16"
    UTF_16_BE = "utf-16be"
    UTF_8 = "utf-8"


# ID3v2 encoding byte -> encoding
ENCODING_BYTES = {
    0x00: TextEncoding.LATIN_1,
    0x01: TextEncoding.UTF_16,
    0x02: TextEncoding.UTF_16_BE,
    0x03: TextEncoding.UTF_8,
}


class DecodedString(NamedTuple):
    value: str
    bytes_read_count: int

    def __str__(self):
        return self.value


def get_text_encoding(byte: int) -> Optional[TextEncoding]:
    """Map an encoding byte to its encoding, or None when it is not one."""
    return ENCODING_BYTES.get(byte)


def _decode_single_byte(raw: bytes, codec: str) -> DecodedString:
    end = raw.find(b"\x00")
    if end < 0:
        return DecodedString(raw.decode(codec, errors="replace"), len(raw))
    return DecodedString(raw[:end].decode(codec, errors="replace"), end + 1)


def _decode_utf8(raw: bytes) -> DecodedString:
    skipped = 0
    if raw.startswith(codecs.BOM_UTF8):
        skipped = len(codecs.BOM_UTF8)
    value, count = _decode_single_byte(raw[skipped:], "utf-8")
    return DecodedString(value, count + skipped)


def _decode_utf16(raw: bytes, big_endian: bool) -> DecodedString:
    skipped = 0
    if raw.startswith(codecs.BOM_UTF16_BE):
        big_endian = True
        skipped = 2
    elif raw.startswith(codecs.BOM_UTF16_LE):
        big_endian = False
        skipped = 2

    codec = "utf-16-be" if big_endian else "utf-16-le"
    # Only whole code units count; a trailing odd byte is ignored.
    for i in range(skipped, len(raw) - 1, 2):
        if raw[i] == 0 and raw[i + 1] == 0:
            value = raw[skipped:i].decode(codec, errors="replace")
            return DecodedString(value, i + 2)

    end = skipped + (len(raw) - skipped) // 2 * 2
    return DecodedString(raw[skipped:end].decode(codec, errors="replace"), len(raw))


def decode_string(
    data: bytes,
    offset: int = 0,
    max_length: Optional[int] = None,
    encoding: Optional[TextEncoding] = None,
) -> DecodedString:
    """Decode a terminated string from ``data[offset:offset + max_length]``.

    Args:
        data: Buffer holding the string
        offset: Position of the first byte of the string
        max_length: Upper bound on the bytes the string may occupy
        encoding: Encoding of the string; None decodes as latin-1

    Returns:
        The decoded value and the number of bytes consumed, including any
        byte order mark and terminator.
    """
    if max_length is None:
        max_length = len(data) - offset
    raw = bytes(data[offset:offset + max(max_length, 0)])

    if encoding is TextEncoding.UTF_16:
        return _decode_utf16(raw, big_endian=False)
    if encoding is TextEncoding.UTF_16_BE:
        return _decode_utf16(raw, big_endian=True)
    if encoding is TextEncoding.UTF_8:
        return _decode_utf8(raw)
    return _decode_single_byte(raw, "latin-1")

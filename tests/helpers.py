"""Builders for raw ID3 data used across the tests."""

import codecs


def synchsafe(value):
    return bytes([(value >> 21) & 0x7F, (value >> 14) & 0x7F, (value >> 7) & 0x7F, value & 0x7F])


def encode_text(text, encoding=0, terminate=False):
    """Encode ``text`` the way an ID3v2 frame with encoding byte ``encoding`` does."""
    if encoding == 0:
        raw = text.encode("latin-1")
        return raw + b"\x00" if terminate else raw
    if encoding == 1:
        raw = codecs.BOM_UTF16_LE + text.encode("utf-16-le")
    elif encoding == 2:
        raw = text.encode("utf-16-be")
    else:
        raw = text.encode("utf-8")
        return raw + b"\x00" if terminate else raw
    return raw + b"\x00\x00" if terminate else raw


def text_payload(text, encoding=0):
    return bytes([encoding]) + encode_text(text, encoding)


def frame(frame_id, payload, major=3, flags=b"\x00\x00"):
    """Frame header plus payload for the given ID3v2 major version."""
    if major == 2:
        return frame_id.encode("latin-1") + len(payload).to_bytes(3, "big") + payload
    if major == 3:
        size = len(payload).to_bytes(4, "big")
    else:
        size = synchsafe(len(payload))
    return frame_id.encode("latin-1") + size + flags + payload


def tag(*frames, major=3, revision=0, flags=0, padding=0):
    """Complete ID3v2 tag made of ``frames`` followed by zero padding."""
    body = b"".join(frames) + b"\x00" * padding
    return b"ID3" + bytes([major, revision, flags]) + synchsafe(len(body)) + body


def id3v1(title="", artist="", album="", year="", comment="", track=None, genre=255):
    def field(value, size):
        return value.encode("latin-1")[:size].ljust(size, b"\x00")

    if track is None:
        comment_bytes = field(comment, 30)
    else:
        comment_bytes = field(comment, 28) + b"\x00" + bytes([track])
    return (
        b"TAG"
        + field(title, 30)
        + field(artist, 30)
        + field(album, 30)
        + field(year, 4)
        + comment_bytes
        + bytes([genre])
    )

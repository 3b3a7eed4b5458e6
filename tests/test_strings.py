"""Tests for charset-aware string decoding."""

import codecs

import pytest

from mediatags.strings import DecodedString, TextEncoding, decode_string, get_text_encoding

from helpers import encode_text


class TestEncodingByte:
    """Test the encoding byte table."""

    @pytest.mark.parametrize(
        "byte,encoding",
        [
            (0x00, TextEncoding.LATIN_1),
            (0x01, TextEncoding.UTF_16),
            (0x02, TextEncoding.UTF_16_BE),
            (0x03, TextEncoding.UTF_8),
        ],
    )
    def test_known_bytes(self, byte, encoding):
        assert get_text_encoding(byte) is encoding

    def test_unknown_byte(self):
        """A URL frame starts with 'h', which is not an encoding byte."""
        assert get_text_encoding(ord("h")) is None
        assert get_text_encoding(0x04) is None


class TestDecodeString:
    """Test decode_string and its consumed-byte accounting."""

    @pytest.mark.parametrize("encoding_byte", [0, 1, 2, 3])
    def test_round_trip(self, encoding_byte):
        """The decoded value matches and the count covers BOM and terminator."""
        text = "Café del Mar"
        raw = encode_text(text, encoding_byte, terminate=True)
        decoded = decode_string(raw + b"trailing", 0, len(raw) + 8, get_text_encoding(encoding_byte))
        assert decoded.value == text
        assert decoded.bytes_read_count == len(raw)

    def test_unterminated_uses_whole_length(self):
        decoded = decode_string(b"abcdef", 0, 4, TextEncoding.LATIN_1)
        assert decoded == DecodedString("abcd", 4)

    def test_offset(self):
        decoded = decode_string(b"xxab\x00cd", 2, 5)
        assert decoded == DecodedString("ab", 3)

    def test_none_encoding_is_latin1(self):
        decoded = decode_string(b"\xe9t\xe9\x00", 0, 4, None)
        assert decoded.value == "été"
        assert decoded.bytes_read_count == 4

    def test_utf8_bom_is_skipped_and_counted(self):
        raw = codecs.BOM_UTF8 + b"abc\x00"
        decoded = decode_string(raw, 0, len(raw), TextEncoding.UTF_8)
        assert decoded == DecodedString("abc", len(raw))

    def test_utf16_big_endian_bom(self):
        raw = codecs.BOM_UTF16_BE + "ab".encode("utf-16-be") + b"\x00\x00"
        decoded = decode_string(raw, 0, len(raw), TextEncoding.UTF_16)
        assert decoded == DecodedString("ab", len(raw))

    def test_utf16_without_bom_is_little_endian(self):
        raw = "ab".encode("utf-16-le") + b"\x00\x00"
        assert decode_string(raw, 0, len(raw), TextEncoding.UTF_16).value == "ab"

    def test_utf16_terminator_must_be_aligned(self):
        """A zero pair straddling two code units is not a terminator."""
        raw = "ĀĀ".encode("utf-16-be") + b"\x00\x00"
        decoded = decode_string(raw, 0, len(raw), TextEncoding.UTF_16_BE)
        assert decoded == DecodedString("ĀĀ", len(raw))

    def test_invalid_utf8_is_replaced(self):
        decoded = decode_string(b"a\xffb", 0, 3, TextEncoding.UTF_8)
        assert decoded.value == "a�b"

    def test_empty(self):
        assert decode_string(b"", 0, 0, TextEncoding.UTF_8) == DecodedString("", 0)

    def test_str(self):
        assert str(DecodedString("abc", 4)) == "abc"

"""Tests for the Registry, Reader and the read entry points."""

from unittest.mock import Mock

import pytest

from mediatags import (
    Callbacks,
    FileReaderError,
    Reader,
    Registry,
    TagFormatError,
    read,
    read_tags,
)
from mediatags.config import Config
from mediatags.sources import BytesFileReader, LocalFileReader
from mediatags.tagging import ID3v1TagReader, ID3v2TagReader

from helpers import frame, tag, text_payload


class TestRegistry:
    """Test backend and tag reader registration."""

    def test_default_order(self):
        registry = Registry.default()
        assert registry.file_readers == [BytesFileReader, LocalFileReader]
        assert registry.tag_readers == [ID3v2TagReader, ID3v1TagReader]

    def test_registries_are_independent(self):
        first = Registry.default()
        second = Registry.default()
        first.remove_tag_reader(ID3v1TagReader)
        assert second.tag_readers == [ID3v2TagReader, ID3v1TagReader]

    def test_remove_missing_reader_is_a_no_op(self):
        registry = Registry().add_tag_reader(ID3v2TagReader)
        registry.remove_tag_reader(ID3v1TagReader)
        assert registry.tag_readers == [ID3v2TagReader]

    def test_find_file_reader(self, tmp_path):
        registry = Registry.default()
        assert registry.find_file_reader(b"data") is BytesFileReader
        assert registry.find_file_reader(str(tmp_path / "a.mp3")) is LocalFileReader
        assert registry.find_file_reader(tmp_path / "a.mp3") is LocalFileReader

    def test_no_file_reader(self):
        with pytest.raises(FileReaderError):
            Registry.default().find_file_reader(12345)

    def test_from_config(self, tmp_path):
        config = Config(tmp_path / "config.toml")
        config.set_tag_readers(["id3v1"])
        registry = Registry.from_config(config)
        assert registry.tag_readers == [ID3v1TagReader]


class TestRead:
    """Test the full read operation."""

    def test_read_bytes(self, id3v23_tag, audio_data):
        metadata = read_tags(id3v23_tag + audio_data)
        assert metadata["title"] == "Song Title"

    def test_read_path(self, mutagen_file):
        assert read_tags(mutagen_file)["title"] == "Mutagen Title"

    def test_first_registered_reader_wins(self, id3v23_tag, audio_data, id3v1_trailer):
        data = id3v23_tag + audio_data + id3v1_trailer
        assert read_tags(data).version == "2.3.0"

        registry = Registry.default().remove_tag_reader(ID3v2TagReader)
        assert read_tags(data, registry=registry).version == "1.1"

        registry = Registry().add_file_reader(BytesFileReader)
        registry.add_tag_reader(ID3v1TagReader).add_tag_reader(ID3v2TagReader)
        assert read_tags(data, registry=registry).version == "1.1"

    def test_no_tags(self, audio_data):
        with pytest.raises(TagFormatError) as exc_info:
            read_tags(audio_data)
        assert exc_info.value.kind == "tagFormat"
        assert exc_info.value.detail == "No suitable tag reader found"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileReaderError):
            read_tags(tmp_path / "missing.mp3")

    def test_unsupported_location(self):
        with pytest.raises(FileReaderError):
            read_tags(12345)

    def test_callbacks_called_once(self, id3v23_tag):
        on_success = Mock()
        on_error = Mock()
        read(id3v23_tag, Callbacks(on_success, on_error))
        on_success.assert_called_once()
        on_error.assert_not_called()
        assert on_success.call_args[0][0]["title"] == "Song Title"

    def test_error_callback_called_once(self, audio_data):
        on_success = Mock()
        on_error = Mock()
        read(audio_data, Callbacks(on_success, on_error))
        on_success.assert_not_called()
        on_error.assert_called_once()
        assert isinstance(on_error.call_args[0][0], TagFormatError)


class TestReaderOverrides:
    """Test the per-read overrides of the registry."""

    def test_set_tag_reader_skips_detection(self, id3v23_tag, audio_data, id3v1_trailer):
        data = id3v23_tag + audio_data + id3v1_trailer
        reader = Reader(data).set_tag_reader(ID3v1TagReader)
        on_success = Mock()
        reader.read(Callbacks(on_success, Mock()))
        assert on_success.call_args[0][0].version == "1.1"

    def test_set_file_reader(self, id3v23_tag):
        registry = Registry().add_tag_reader(ID3v2TagReader)
        reader = Reader(id3v23_tag, registry).set_file_reader(BytesFileReader)
        on_success = Mock()
        reader.read(Callbacks(on_success, Mock()))
        on_success.assert_called_once()

    def test_set_tags_to_read(self, id3v23_tag):
        reader = Reader(id3v23_tag).set_tags_to_read(["artist"])
        on_success = Mock()
        reader.read(Callbacks(on_success, Mock()))
        assert set(on_success.call_args[0][0].tags) == {"TPE1", "artist"}

    def test_detect(self, id3v23_tag, audio_data):
        on_success = Mock()
        Reader(id3v23_tag + audio_data).detect(Callbacks(on_success, Mock()))
        file_reader, tag_reader = on_success.call_args[0][0]
        assert isinstance(file_reader, BytesFileReader)
        assert tag_reader is ID3v2TagReader

    def test_malformed_tag_reported_through_on_error(self):
        data = tag(frame("APIC", b"\x00image/png\x00\x63\x00data"), frame("TIT2", text_payload("x")))
        on_error = Mock()
        read(data, Callbacks(Mock(), on_error))
        assert on_error.call_args[0][0].kind == "malformedFrame"

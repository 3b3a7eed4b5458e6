"""Pytest configuration and fixtures."""

import pytest
from mutagen.id3 import ID3, APIC, COMM, TALB, TCON, TIT2, TPE1, TRCK, TXXX, USLT

from helpers import frame, id3v1, tag, text_payload


@pytest.fixture
def id3v23_tag():
    """An ID3v2.3 tag with title, artist, genre and a comment."""
    return tag(
        frame("TIT2", text_payload("Song Title")),
        frame("TPE1", text_payload("Some Artist", encoding=1)),
        frame("TCON", text_payload("(17)Rock")),
        frame("COMM", b"\x00eng" + b"desc\x00" + b"hello"),
        padding=32,
    )


@pytest.fixture
def audio_data():
    """Stand-in for audio frames between the tags."""
    return bytes(range(256)) * 16


@pytest.fixture
def id3v1_trailer():
    return id3v1(
        title="Old Title",
        artist="Old Artist",
        album="Old Album",
        year="1999",
        comment="Old comment",
        track=7,
        genre=17,
    )


@pytest.fixture
def mutagen_file(tmp_path, audio_data):
    """A file with an ID3v2.4 tag written by mutagen."""
    path = tmp_path / "tagged.mp3"
    path.write_bytes(audio_data)

    tags = ID3()
    tags.add(TIT2(encoding=3, text=["Mutagen Title"]))
    tags.add(TPE1(encoding=1, text=["Mutagen Artist"]))
    tags.add(TALB(encoding=0, text=["Mutagen Album"]))
    tags.add(TRCK(encoding=3, text=["3/12"]))
    tags.add(TCON(encoding=3, text=["Jazz"]))
    tags.add(COMM(encoding=3, lang="eng", desc="note", text=["A comment"]))
    tags.add(USLT(encoding=3, lang="eng", desc="", text="La la la"))
    tags.add(TXXX(encoding=3, desc="MOOD", text=["calm"]))
    tags.add(APIC(encoding=3, mime="image/png", type=3, desc="cover", data=b"\x89PNG fake"))
    tags.save(str(path))
    return path

"""mediatags.

Reads embedded metadata (ID3v2 and ID3v1 tags) from media files through a
random-access byte source, loading only the byte ranges it needs.

Main modules:
    reader: Registry, Reader and the read()/read_tags() entry points
    detector: Tag format detection
    tagging: Tag container readers and ID3v2 frame decoding
    sources: Byte-source backends (in-memory, local file)
    cli: Command-line interface (mtags command)

Core modules:
    callbacks: Success/error callback pairs
    config: Configuration management
    constants: Tables shared by the tag readers
    errors: Error kinds reported by reads
    ranges: Byte ranges and load planning
    strings: Charset-aware string decoding
"""

try:
    from importlib.metadata import version, PackageNotFoundError

    __version__ = version("mediatags")
except PackageNotFoundError:
    # Package not installed; read directly from pyproject.toml
    from pathlib import Path
    import tomllib

    try:
        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            __version__ = tomllib.load(f)["project"]["version"]
    except (OSError, KeyError, tomllib.TOMLDecodeError):
        __version__ = "unknown"

from .callbacks import Callbacks, ResultCollector
from .errors import (
    TagReadError,
    FileReaderError,
    TagFormatError,
    UnsupportedVersionError,
    MalformedFrameError,
)
from .reader import Reader, Registry, read, read_tags
from .tagging import TagMetadata, FrameRecord

__all__ = [
    "Callbacks",
    "ResultCollector",
    "TagReadError",
    "FileReaderError",
    "TagFormatError",
    "UnsupportedVersionError",
    "MalformedFrameError",
    "Reader",
    "Registry",
    "read",
    "read_tags",
    "TagMetadata",
    "FrameRecord",
]

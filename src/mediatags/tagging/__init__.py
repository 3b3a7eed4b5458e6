"""Tag container readers and frame decoding.

Modules:
    base.py: MediaTagReader base class, TagMetadata and FrameRecord
    frames.py: ID3v2 frame dispatch and frame readers
    id3v2.py: ID3v2.2/2.3/2.4 container reader
    id3v1.py: ID3v1/1.1 container reader
"""

from .base import FrameRecord, MediaTagReader, TagMetadata
from .id3v1 import ID3v1TagReader
from .id3v2 import ID3v2TagReader

__all__ = [
    'FrameRecord',
    'MediaTagReader',
    'TagMetadata',
    'ID3v1TagReader',
    'ID3v2TagReader',
]

"""Byte-source backends.

Modules:
    base.py: MediaFileReader, the contract every backend implements
    chunks.py: Cache of loaded byte ranges
    array.py: In-memory buffers
    local.py: Files on the local filesystem
"""

from .base import MediaFileReader
from .array import BytesFileReader
from .local import LocalFileReader

__all__ = [
    'MediaFileReader',
    'BytesFileReader',
    'LocalFileReader',
]

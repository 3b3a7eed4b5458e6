"""Error types reported by tag reads.

Every read ends in a single error or a single result. Errors carry a
machine-readable ``kind`` and a human-readable ``detail``.
"""


class TagReadError(Exception):
    """Base class for all read failures."""

    kind = "unknown"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def __repr__(self):
        return f"{type(self).__name__}(kind={self.kind!r}, detail={self.detail!r})"


class FileReaderError(TagReadError):
    """The byte source could not provide the requested bytes."""

    kind = "fileReader"


class TagFormatError(TagReadError):
    """No registered tag reader recognised the file."""

    kind = "tagFormat"


class UnsupportedVersionError(TagReadError):
    """The tag container version is not one the decoder knows."""

    kind = "unsupportedVersion"


class MalformedFrameError(TagReadError):
    """A frame is inconsistent with its declared length or layout."""

    kind = "malformedFrame"

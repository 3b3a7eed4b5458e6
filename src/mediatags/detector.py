"""Tag format detection with the fewest possible loads.

Each registered tag reader declares a small identifier range. The ranges
are planned into at most one load per side of the file, both loads are
joined, and then the readers are probed in registration order.
"""

import logging
from enum import Enum
from typing import Callable, List, Optional, Sequence, Type

from .callbacks import Callbacks
from .errors import FileReaderError, TagFormatError, TagReadError
from .ranges import ByteRange, covering_range, is_range_valid, split_by_side
from .sources.base import MediaFileReader

logger = logging.getLogger(__name__)


class JoinState(Enum):
    WAITING_BOTH = 2
    WAITING_ONE = 1
    DONE = 0


class TwoSlotJoin:
    """Waits for exactly two completion signals before continuing.

    ``on_done`` runs once, on the second ``signal()``. ``fail()`` reports
    an error once and finishes the join; signals arriving after a failure
    are dropped.
    """

    def __init__(
        self,
        on_done: Callable[[], None],
        on_error: Callable[[TagReadError], None],
    ):
        self.state = JoinState.WAITING_BOTH
        self.error: Optional[TagReadError] = None
        self._on_done = on_done
        self._on_error = on_error

    def signal(self, *args) -> None:
        if self.state is JoinState.WAITING_BOTH:
            self.state = JoinState.WAITING_ONE
        elif self.state is JoinState.WAITING_ONE:
            self.state = JoinState.DONE
            self._on_done()
        elif self.error is None:
            raise RuntimeError("TwoSlotJoin received more than two signals")

    def fail(self, error: TagReadError) -> None:
        if self.state is JoinState.DONE:
            return
        self.state = JoinState.DONE
        self.error = error
        self._on_error(error)

    @property
    def callbacks(self) -> Callbacks:
        return Callbacks(self.signal, self.fail)


class FormatDetector:
    """Finds the first registered tag reader that recognises a file."""

    def __init__(self, tag_readers: Sequence[Type]):
        self.tag_readers = list(tag_readers)

    def identifier_ranges(self) -> List[ByteRange]:
        return [tag_reader.identifier_range() for tag_reader in self.tag_readers]

    def detect(self, file_reader: MediaFileReader, callbacks: Callbacks) -> None:
        """Report the matching tag reader class through ``callbacks``.

        ``file_reader`` must already be initialized so its size is known.
        """
        file_size = file_reader.get_size()
        join = TwoSlotJoin(
            lambda: self._probe(file_reader, file_size, callbacks),
            callbacks.on_error,
        )

        for side in split_by_side(self.identifier_ranges(), file_size):
            load = covering_range(side, file_size)
            if load is None:
                join.signal()
                continue
            logger.debug(f"Loading tag identifiers in {load}")
            file_reader.load_range(load, join.callbacks)

    def _probe(self, file_reader: MediaFileReader, file_size: int, callbacks: Callbacks) -> None:
        for tag_reader in self.tag_readers:
            byte_range = tag_reader.identifier_range()
            if not is_range_valid(byte_range, file_size):
                continue

            offset, length = byte_range.resolve(file_size)
            try:
                identifier = file_reader.get_bytes_at(offset, length)
            except TagReadError as e:
                callbacks.on_error(FileReaderError(e.detail))
                return

            if tag_reader.can_read_tag_format(identifier):
                logger.debug(f"{tag_reader.__name__} matched {identifier!r}")
                callbacks.on_success(tag_reader)
                return

        callbacks.on_error(TagFormatError("No suitable tag reader found"))

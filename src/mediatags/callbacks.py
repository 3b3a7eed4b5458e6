"""Completion callbacks shared by byte sources, detectors and tag readers."""

from typing import Any, Callable, NamedTuple, Optional

from .errors import TagReadError


class Callbacks(NamedTuple):
    """A success/error pair. Exactly one of them is called per operation."""

    on_success: Callable[..., None]
    on_error: Callable[[TagReadError], None]


class ResultCollector:
    """Callback pair that stores the outcome instead of acting on it.

    Used to turn a callback-driven read into a blocking call when every
    backend involved completes synchronously.
    """

    def __init__(self):
        self.done = False
        self.result: Any = None
        self.error: Optional[TagReadError] = None

    def on_success(self, result: Any = None) -> None:
        self.done = True
        self.result = result

    def on_error(self, error: TagReadError) -> None:
        self.done = True
        self.error = error

    @property
    def callbacks(self) -> Callbacks:
        return Callbacks(self.on_success, self.on_error)

    def get(self) -> Any:
        """Return the result or raise the reported error."""
        if not self.done:
            raise RuntimeError("Read has not completed yet")
        if self.error is not None:
            raise self.error
        return self.result

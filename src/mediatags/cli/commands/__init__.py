"""CLI command implementations."""

from .read import cmd_read
from .detect import cmd_detect

__all__ = [
    "cmd_read",
    "cmd_detect",
]

"""Utility functions for CLI operations."""

import dataclasses
import logging
from enum import IntEnum
from typing import Any

from pydantic import BaseModel


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 1
    NO_TAGS = 2
    INVALID_INPUT = 3


def setup_logging(level: str) -> None:
    """Configure logging based on user-specified level.

    Args:
        level: Logging level (debug, info, warning, error, critical)
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def json_output(response: BaseModel) -> None:
    """Print a response model as JSON, leaving out unset optional fields."""
    print(response.model_dump_json(indent=2, exclude_none=True))


def to_jsonable(value: Any) -> Any:
    """Turn decoded frames into plain JSON values; binary data becomes a size."""
    if isinstance(value, (bytes, bytearray)):
        return f"<{len(value)} bytes>"
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items()}
    return value


def to_text(value: Any) -> str:
    """Single-line rendering of a decoded value for tables."""
    value = to_jsonable(value)
    if isinstance(value, dict):
        return ", ".join(f"{k}={v}" for k, v in value.items())
    if isinstance(value, list):
        return "; ".join(to_text(v) for v in value)
    return str(value)

"""Pydantic schemas for JSON output validation.

All --json output from CLI commands uses these models, so every command
reports the same structure and optional fields are left out when unset.

Commands using Pydantic validation:
- read: ReadSuccessResponse | ErrorResponse
- detect: DetectSuccessResponse | ErrorResponse
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response for all commands.

    Attributes:
        status: Always "error" for error responses
        error: Machine-readable error kind (e.g., "tagFormat", "malformedFrame")
        message: Human-readable error message
    """

    status: Literal["error"] = "error"
    error: str = Field(
        description="Machine-readable error kind",
        examples=["fileReader", "tagFormat", "unsupportedVersion", "malformedFrame"],
    )
    message: str = Field(description="Human-readable error description")


class ReadSuccessResponse(BaseModel):
    """Response for a successful tag read.

    Attributes:
        status: Always "success"
        location: File that was read
        type: Tag container type (e.g. "ID3")
        version: Tag container version (e.g. "2.4.0")
        size: Tag size in bytes
        tags: Shortcut fields and frames, binary data replaced by its size
    """

    status: Literal["success"] = "success"
    location: str = Field(description="File that was read")
    type: str = Field(description="Tag container type")
    version: str = Field(description="Tag container version")
    size: int = Field(ge=0, description="Tag size in bytes")
    flags: Optional[Dict[str, bool]] = Field(default=None, description="Header flags")
    tags: Dict[str, Any] = Field(description="Decoded tags")


class DetectSuccessResponse(BaseModel):
    """Response for format detection.

    Attributes:
        status: Always "success"
        location: File that was probed
        file_size: Size of the file in bytes
        planned_ranges: Loads issued for the identifier ranges, as [offset, length]
        tag_reader: Name of the tag reader that matched
    """

    status: Literal["success"] = "success"
    location: str = Field(description="File that was probed")
    file_size: int = Field(ge=0, description="File size in bytes")
    planned_ranges: List[List[int]] = Field(description="Planned identifier loads")
    tag_reader: str = Field(description="Matching tag reader")


ReadResponse = ReadSuccessResponse | ErrorResponse
DetectResponse = DetectSuccessResponse | ErrorResponse

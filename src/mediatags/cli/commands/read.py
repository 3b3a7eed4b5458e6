"""Read command - Display the tags of a media file."""

import argparse
import logging
import sys

from rich.console import Console
from rich.table import Table

from ...config import Config
from ...constants import SHORTCUTS
from ...errors import TagFormatError, TagReadError
from ...reader import Registry, read_tags
from ...tagging.base import FrameRecord
from ..schemas import ErrorResponse, ReadSuccessResponse
from ..utils import ExitCode, json_output, to_jsonable, to_text

logger = logging.getLogger(__name__)


def cmd_read(args: argparse.Namespace) -> None:
    """Read and display the tags of a file.

    Args:
        args: Parsed command-line arguments
    """
    console = Console()
    use_json = getattr(args, "json", False)

    try:
        config = Config(args.config) if args.config else Config()
        registry = Registry.from_config(config)
    except ValueError as e:
        if use_json:
            json_output(ErrorResponse(error="invalid_config", message=str(e)))
        else:
            console.print(f"[red]Error: {e}[/red]")
        sys.exit(ExitCode.INVALID_INPUT)

    tags_to_read = args.tags or config.get_tags_to_read()

    try:
        metadata = read_tags(args.path, tags=tags_to_read, registry=registry)
    except TagReadError as e:
        logger.debug(f"Read of {args.path} failed: {e!r}")
        if use_json:
            json_output(ErrorResponse(error=e.kind, message=e.detail))
        else:
            console.print(f"[red]Error ({e.kind}): {e.detail}[/red]")
        sys.exit(ExitCode.NO_TAGS if isinstance(e, TagFormatError) else ExitCode.ERROR)

    if use_json:
        json_output(
            ReadSuccessResponse(
                location=str(args.path),
                type=metadata.type,
                version=metadata.version,
                size=metadata.size,
                flags=metadata.flags or None,
                tags=to_jsonable(metadata.tags),
            )
        )
        return

    console.print(f"[cyan]{metadata.type} v{metadata.version}, {metadata.size:,} bytes[/cyan]\n")

    fields = Table(title="Fields")
    fields.add_column("Field", style="cyan")
    fields.add_column("Value", style="magenta")
    for name in SHORTCUTS:
        if name in metadata:
            fields.add_row(name, to_text(metadata[name]))
    console.print(fields)

    frames = [v for v in metadata.tags.values() if isinstance(v, (FrameRecord, list))]
    if frames:
        table = Table(title="Frames")
        table.add_column("ID", style="cyan")
        table.add_column("Size", style="yellow", justify="right")
        table.add_column("Description", style="green")
        table.add_column("Data", style="magenta")
        for entry in frames:
            for frame in entry if isinstance(entry, list) else [entry]:
                data_str = to_text(frame.data)
                if len(data_str) > 60:
                    data_str = data_str[:57] + "..."
                table.add_row(frame.id, str(frame.size), frame.description, data_str)
        console.print(table)

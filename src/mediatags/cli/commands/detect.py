"""Detect command - Show which tag format a file carries."""

import argparse
import sys

from rich.console import Console
from rich.table import Table

from ...callbacks import ResultCollector
from ...config import Config
from ...errors import TagFormatError, TagReadError
from ...ranges import plan_ranges
from ...reader import Reader, Registry
from ..schemas import DetectSuccessResponse, ErrorResponse
from ..utils import ExitCode, json_output


def cmd_detect(args: argparse.Namespace) -> None:
    """Run format detection only and report the planned loads.

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

    collector = ResultCollector()
    Reader(args.path, registry).detect(collector.callbacks)
    try:
        file_reader, tag_reader = collector.get()
    except TagReadError as e:
        if use_json:
            json_output(ErrorResponse(error=e.kind, message=e.detail))
        else:
            console.print(f"[red]Error ({e.kind}): {e.detail}[/red]")
        sys.exit(ExitCode.NO_TAGS if isinstance(e, TagFormatError) else ExitCode.ERROR)

    file_size = file_reader.get_size()
    planned = plan_ranges([t.identifier_range() for t in registry.tag_readers], file_size)

    if use_json:
        json_output(
            DetectSuccessResponse(
                location=str(args.path),
                file_size=file_size,
                planned_ranges=[[r.offset, r.length] for r in planned],
                tag_reader=tag_reader.__name__,
            )
        )
        return

    table = Table(title="Format Detection", show_header=False)
    table.add_column("Field", style="cyan", width=15)
    table.add_column("Value", style="magenta")
    table.add_row("File Size", f"{file_size:,} bytes")
    for r in planned:
        table.add_row("Loaded Range", f"{r.offset}-{r.end} ({r.length} bytes)")
    table.add_row("Tag Reader", tag_reader.__name__)
    console.print(table)

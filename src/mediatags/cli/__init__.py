"""Command-line interface for mediatags (mtags).

This package provides the 'mtags' command-line tool with two subcommands:
    read: Read and display the tags of a media file
    detect: Show which tag format a file carries and what was loaded to find it

Modules:
    commands/: Command implementations
    schemas.py: Pydantic models for --json output
    utils.py: CLI utility functions
"""

import argparse
import logging
import sys

from rich_argparse import RichHelpFormatter

from .. import __version__
from ..config import Config
from .utils import setup_logging
from .commands import cmd_read, cmd_detect

__all__ = [
    "main",
    "cmd_read",
    "cmd_detect",
    "setup_logging",
]


class RichRawHelpFormatter(RichHelpFormatter, argparse.RawDescriptionHelpFormatter):
    """Combines Rich formatting with the ability to keep line breaks (Raw)."""
    pass


def main() -> None:
    """Main CLI entry point."""

    # Parent parser for shared options
    parent_parser = argparse.ArgumentParser(add_help=False)

    parent_parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parent_parser.add_argument(
        "-l",
        "--log-level",
        default=None,
        help="Set logging level (disabled by default)",
    )
    parent_parser.add_argument("-c", "--config", help="Path to configuration file")
    parent_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )

    parser = argparse.ArgumentParser(
        prog="mtags",
        usage="mtags <command> [options]",
        description="mediatags - Read ID3 tags while loading only the bytes needed",
        formatter_class=RichRawHelpFormatter,
        parents=[parent_parser],
    )

    subparsers = parser.add_subparsers(
        title="Commands",
        dest="command",
        metavar="",
    )

    # ──────────────────────────────
    # read
    # ──────────────────────────────
    read_parser = subparsers.add_parser(
        "read",
        help="Read the tags of a media file",
        usage="mtags read <path> [options]",
        description="Detect the tag format of a file and decode its tags",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    read_parser.add_argument("path", help="Path to the media file")
    read_parser.add_argument(
        "-t",
        "--tags",
        nargs="+",
        metavar="TAG",
        help="Only decode these fields or frame ids (e.g. title artist APIC)",
    )
    read_parser.set_defaults(func=cmd_read)

    # ──────────────────────────────
    # detect
    # ──────────────────────────────
    detect_parser = subparsers.add_parser(
        "detect",
        help="Show which tag format a file carries",
        usage="mtags detect <path> [options]",
        description="Probe the tag identifier ranges without decoding any frame",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    detect_parser.add_argument("path", help="Path to the media file")
    detect_parser.set_defaults(func=cmd_detect)

    args = parser.parse_args()

    # Show help if no command is provided
    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Logging setup; the config file supplies the level when none is given
    if args.log_level:
        setup_logging(args.log_level)
    else:
        setup_logging(Config(args.config).get_log_level())

    try:
        args.func(args)
    except KeyboardInterrupt:
        logging.info("\nOperation cancelled by user")
        sys.exit(130)
    except Exception as e:
        logging.error(f"Error: {e}", exc_info=args.log_level == "debug")
        sys.exit(1)


if __name__ == "__main__":
    main()

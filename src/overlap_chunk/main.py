"""Command line interface for overlap-chunk."""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from rich.console import Console

from . import __version__
from .chunking import MAX_OVERLAP_PERCENTAGE, chunk_text
from .config import load_config
from .exceptions import OverlapChunkError
from .utils.display import display_chunks_table, print_chunks
from .utils.files import read_stream, read_text, write_json
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)

PROG = "overlap-chunk"


def positive_int(value: str) -> int:
    """argparse type for the chunk size."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"chunk size must be a positive integer, got '{value}'"
        )
    if number <= 0:
        raise argparse.ArgumentTypeError(
            f"chunk size must be a positive integer, got '{value}'"
        )
    return number


def percentage(value: str) -> int:
    """argparse type for the overlap percentage."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"overlap must be an integer between 0 and {MAX_OVERLAP_PERCENTAGE}, got '{value}'"
        )
    if not 0 <= number <= MAX_OVERLAP_PERCENTAGE:
        raise argparse.ArgumentTypeError(
            f"overlap must be an integer between 0 and {MAX_OVERLAP_PERCENTAGE}, got '{value}'"
        )
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Split text into fixed-size, optionally overlapping chunks.",
        epilog="Reads standard input when no FILE is given.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        metavar="FILE",
        help="UTF-8 text file to split (default: standard input)",
    )
    parser.add_argument(
        "-s",
        "--size",
        type=positive_int,
        metavar="SIZE",
        help="Chunk size in characters (default: 100)",
    )
    parser.add_argument(
        "-o",
        "--overlap",
        type=percentage,
        metavar="PERCENT",
        help="Overlap between chunks as a percentage from 0 to 100 (default: 0)",
    )
    parser.add_argument(
        "-c", "--config", metavar="PATH", help="Path to a YAML configuration file"
    )

    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument(
        "--table", action="store_true", help="Show chunks as a table"
    )
    output_group.add_argument(
        "--output", metavar="PATH", help="Also write the chunks to PATH as a JSON array"
    )

    runtime_group = parser.add_argument_group("Runtime Options")
    runtime_group.add_argument(
        "-d", "--debug", action="store_true", help="Enable debug logging"
    )
    runtime_group.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def parse_args(args: List[str]) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        args: Command line arguments.

    Returns:
        Parsed arguments.
    """
    return build_parser().parse_args(args)


def run(
    args: argparse.Namespace,
    console: Console,
    stdin: TextIO,
) -> int:
    """Load configuration, read the input, chunk it and print the result."""
    config = load_config(args.config)
    config = config.update_from_dict(
        {"chunk_size": args.size, "overlap_percentage": args.overlap}
    )
    setup_logging(config.logging, debug=args.debug)

    logger.debug(
        f"chunk_size={config.chunk_size} overlap_percentage={config.overlap_percentage}"
    )

    if args.file:
        text = read_text(args.file)
    else:
        text = read_stream(stdin)

    chunks = chunk_text(text, config.chunk_size, config.chunk_options())
    logger.info(f"Split {len(text)} characters into {len(chunks)} chunks")

    if args.table:
        display_chunks_table(chunks, console)
    else:
        print_chunks(chunks, console)

    if args.output:
        write_json(chunks, args.output)
        logger.info(f"Chunks written to {args.output}")

    return 0


def main(
    argv: Optional[List[str]] = None,
    console: Optional[Console] = None,
    stdin: Optional[TextIO] = None,
) -> int:
    """Main entry point for the command line tool.

    Invalid command line arguments are handled by argparse, which prints the
    error and raises ``SystemExit`` with status 2 (``--help`` and ``--version``
    raise ``SystemExit`` with status 0).

    Returns:
        int: Exit code (0 for success, non-zero for error)
    """
    argv = sys.argv[1:] if argv is None else argv
    if stdin is None:
        stdin = sys.stdin
    if console is None:
        console = Console(soft_wrap=True)
    error_console = Console(stderr=True, soft_wrap=True)

    # Nothing to read: no FILE and an interactive terminal
    if not argv and stdin.isatty():
        build_parser().print_usage(sys.stderr)
        return 1

    args = parse_args(argv)

    try:
        return run(args, console, stdin)
    except OverlapChunkError as e:
        logger.debug("Chunking failed", exc_info=True)
        error_console.print(f"Error: {e}", markup=False, highlight=False)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as e:
        logger.exception("Unexpected error")
        error_console.print(f"Error: {e}", markup=False, highlight=False)
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""Utility functions for overlap-chunk."""

from .display import display_chunks_table, print_chunks  # noqa: F401
from .files import ensure_dir, read_stream, read_text, write_json  # noqa: F401
from .logging import setup_logging  # noqa: F401

__all__ = [
    # Files
    "ensure_dir",
    "read_text",
    "read_stream",
    "write_json",
    # Display
    "print_chunks",
    "display_chunks_table",
    # Logging
    "setup_logging",
]

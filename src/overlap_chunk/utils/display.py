"""
Display utilities for overlap-chunk.

Labelled chunk lines are written straight to the console's file so that tabs,
carriage returns and markup-like text come out exactly as they were read.
Rich rendering is only used for the table view.
"""

from typing import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

CHUNK_LABEL = "Chunk"


def print_chunks(chunks: Sequence[str], console: Console) -> None:
    """Print one ``Chunk <n>: <text>`` line per chunk, numbered from 1.

    Args:
        chunks: Chunks to print
        console: Rich console instance for output
    """
    output = console.file
    for i, chunk in enumerate(chunks, 1):
        output.write(f"{CHUNK_LABEL} {i}: {chunk}\n")
    output.flush()


def display_chunks_table(
    chunks: Sequence[str],
    console: Console,
    title: str = "Chunks",
) -> None:
    """Display chunks in a formatted table.

    Args:
        chunks: Chunks to display
        console: Rich console instance for output
        title: Table title
    """
    if not chunks:
        console.print("[yellow]No chunks produced.[/yellow]")
        return

    table = Table(title=title, show_lines=True)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Length", style="cyan", justify="right")
    table.add_column("Text", style="green")

    for i, chunk in enumerate(chunks, 1):
        table.add_row(str(i), str(len(chunk)), Text(chunk))

    console.print(table)

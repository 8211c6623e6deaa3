"""Fixed-size text chunking with percentage-based overlap.

Lengths and offsets are counted in codepoints, which is what ``len()`` and
slicing give on a Python ``str``.
"""

from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    from .config import ChunkOptions

MIN_OVERLAP_PERCENTAGE = 0
MAX_OVERLAP_PERCENTAGE = 100

# Smallest distance between two chunk starts.
MIN_STEP_SIZE = 1


def clamp_overlap_percentage(value: int) -> int:
    """Saturate an overlap percentage into ``[0, 100]``."""
    return max(MIN_OVERLAP_PERCENTAGE, min(MAX_OVERLAP_PERCENTAGE, int(value)))


def overlap_size(chunk_size: int, overlap_percentage: int) -> int:
    """Number of codepoints shared by two neighbouring chunks.

    ``chunk_size * overlap_percentage / 100`` rounded half up, computed with
    integers so that e.g. 2.5 always becomes 3.
    """
    if chunk_size <= 0:
        return 0
    percentage = clamp_overlap_percentage(overlap_percentage)
    return (2 * chunk_size * percentage + 100) // 200


def step_size(chunk_size: int, overlap_percentage: int) -> int:
    """Distance between the starts of two neighbouring chunks (never below 1)."""
    overlap = overlap_size(chunk_size, overlap_percentage)
    if overlap >= chunk_size:
        return MIN_STEP_SIZE
    return chunk_size - overlap


def chunk_spans(
    length: int, chunk_size: int, overlap_percentage: int = 0
) -> List[Tuple[int, int]]:
    """Compute the ``[start, end)`` offsets of every chunk of a text.

    Args:
        length: Length of the text in codepoints.
        chunk_size: Maximum size of each chunk.
        overlap_percentage: Overlap between neighbouring chunks, in percent of
            ``chunk_size``. Values outside 0-100 are saturated.

    Returns:
        The spans in left-to-right order. Empty when ``length`` or
        ``chunk_size`` is not positive.
    """
    if length <= 0 or chunk_size <= 0:
        return []
    if length <= chunk_size:
        return [(0, length)]

    step = step_size(chunk_size, overlap_percentage)
    spans = []
    start = 0
    while True:
        end = min(start + chunk_size, length)
        spans.append((start, end))
        if end == length:
            break
        start += step
    return spans


def chunk(text: str, chunk_size: int, overlap_percentage: int = 0) -> List[str]:
    """Split text into chunks of at most ``chunk_size`` codepoints.

    Args:
        text: The text to split.
        chunk_size: Maximum size of each chunk (in codepoints).
        overlap_percentage: How much of a chunk is repeated at the start of the
            next one, in percent of ``chunk_size``.

    Returns:
        A list of text chunks. ``[]`` for empty text or a zero chunk size, and
        ``[text]`` when the text already fits into one chunk.
    """
    if not text or chunk_size <= 0:
        return []
    if len(text) <= chunk_size:
        return [text]

    return [
        text[start:end]
        for start, end in chunk_spans(len(text), chunk_size, overlap_percentage)
    ]


def chunk_text(
    text: str, chunk_size: int, options: Optional["ChunkOptions"] = None
) -> List[str]:
    """Split text into chunks using a :class:`ChunkOptions` value.

    Args:
        text: The text to split.
        chunk_size: Maximum size of each chunk (in codepoints).
        options: Chunking options; defaults (no overlap) when ``None``.

    Returns:
        A list of text chunks.
    """
    overlap_percentage = options.overlap_percentage if options is not None else 0
    return chunk(text, chunk_size, overlap_percentage)

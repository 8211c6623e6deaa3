"""overlap-chunk - split text into fixed-size, optionally overlapping chunks."""

__version__ = "1.0.0"

from .chunking import chunk, chunk_spans, chunk_text, overlap_size, step_size  # noqa: E402
from .config import AppConfig, ChunkOptions, load_config  # noqa: E402
from .exceptions import (  # noqa: E402
    ConfigurationError,
    InputReadError,
    OverlapChunkError,
)

__all__ = [
    "__version__",
    # Chunking
    "chunk",
    "chunk_text",
    "chunk_spans",
    "overlap_size",
    "step_size",
    # Configuration
    "ChunkOptions",
    "AppConfig",
    "load_config",
    # Errors
    "OverlapChunkError",
    "ConfigurationError",
    "InputReadError",
]

"""File and stream utilities for overlap-chunk."""

import json
import logging
from pathlib import Path
from typing import Any, TextIO, Union

from ..exceptions import InputReadError

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def ensure_dir(path: Union[str, Path]) -> Path:
    """Ensure a directory exists, creating it if necessary.

    Args:
        path: Path to the directory.

    Returns:
        The resolved Path object.
    """
    path = Path(path).expanduser().resolve()
    path.mkdir(parents=True, exist_ok=True)
    return path


def read_text(file_path: Union[str, Path]) -> str:
    """Read a whole file as UTF-8 text.

    Args:
        file_path: Path to the file.

    Returns:
        The file contents.

    Raises:
        InputReadError: If the file cannot be read or is not valid UTF-8.
    """
    file_path = Path(file_path).expanduser()
    try:
        text = file_path.read_text(encoding=ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(str(file_path), e) from e
    logger.debug(f"Read {len(text)} characters from {file_path}")
    return text


def read_stream(stream: TextIO, name: str = "<stdin>") -> str:
    """Read a whole text stream.

    The underlying binary buffer is decoded as UTF-8 when the stream has one,
    so the result does not depend on the locale encoding.

    Raises:
        InputReadError: If the stream cannot be read or is not valid UTF-8.
    """
    try:
        buffer = getattr(stream, "buffer", None)
        if buffer is not None:
            text = buffer.read().decode(ENCODING)
        else:
            text = stream.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(name, e) from e
    logger.debug(f"Read {len(text)} characters from {name}")
    return text


def write_json(
    data: Any, file_path: Union[str, Path], indent: int = 2, ensure_ascii: bool = False
) -> None:
    """Write data to a JSON file.

    Args:
        data: Data to serialize to JSON.
        file_path: Path to the output file.
        indent: Number of spaces for indentation.
        ensure_ascii: Whether to escape non-ASCII characters.
    """
    file_path = Path(file_path).expanduser().resolve()
    ensure_dir(file_path.parent)

    with open(file_path, "w", encoding=ENCODING) as f:
        json.dump(data, f, indent=indent, ensure_ascii=ensure_ascii)

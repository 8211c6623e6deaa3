"""Custom exceptions for overlap-chunk."""

from typing import Optional


class OverlapChunkError(Exception):
    """Base exception for overlap-chunk errors."""
    pass


class ConfigurationError(OverlapChunkError):
    """Raised when there is a configuration error."""
    pass


class InputReadError(OverlapChunkError):
    """Raised when the input text cannot be read."""
    def __init__(self, source: str, cause: Optional[Exception] = None):
        self.source = source
        self.cause = cause
        message = f"Failed to read input from '{source}'"
        if cause:
            message = f"{message}: {cause}"
        super().__init__(message)

"""
Configuration and fixtures for tests.
"""

import io
import logging
import os
import sys

import pytest
from rich.console import Console

# Add the source directory to the Python path
sys.path.insert(
    0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
)

SAMPLE_TEXT = "This is a test text. We will split this long text into smaller chunks."


@pytest.fixture
def sample_text() -> str:
    """The sentence used throughout the chunking tests (70 characters)."""
    return SAMPLE_TEXT


@pytest.fixture
def console_output():
    """A Rich console writing into a string buffer.

    Yields ``(console, buffer)``; read the output with ``buffer.getvalue()``.
    """
    buffer = io.StringIO()
    console = Console(file=buffer, width=120, soft_wrap=True, color_system=None)
    yield console, buffer


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Run every test in an empty directory without OVERLAP_CHUNK_* variables."""
    for key in list(os.environ):
        if key.startswith("OVERLAP_CHUNK_"):
            monkeypatch.delenv(key, raising=False)
    # Keep Rich output free of escape codes
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setattr(
        "overlap_chunk.config.DEFAULT_CONFIG_PATHS",
        [tmp_path / "overlap-chunk.yaml"],
    )
    yield
    package_logger = logging.getLogger("overlap_chunk")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.propagate = True

"""Unit tests for the file, display and logging helpers."""

import io
import json
import logging

import pytest

from overlap_chunk.config import LoggingConfig
from overlap_chunk.exceptions import InputReadError
from overlap_chunk.utils import (
    display_chunks_table,
    print_chunks,
    read_stream,
    read_text,
    setup_logging,
    write_json,
)


class TestFiles:
    """Tests for the file helpers."""

    def test_read_text_utf8(self, tmp_path):
        path = tmp_path / "input.txt"
        path.write_bytes("héllo wörld 日本".encode("utf-8"))

        assert read_text(path) == "héllo wörld 日本"

    def test_read_text_missing_file(self, tmp_path):
        missing = tmp_path / "missing.txt"

        with pytest.raises(InputReadError) as exc_info:
            read_text(missing)

        assert exc_info.value.source == str(missing)
        assert isinstance(exc_info.value.cause, FileNotFoundError)
        assert "missing.txt" in str(exc_info.value)

    def test_read_text_invalid_utf8(self, tmp_path):
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"caf\xe9")

        with pytest.raises(InputReadError):
            read_text(path)

    def test_read_stream_text_only(self):
        assert read_stream(io.StringIO("from a stream")) == "from a stream"

    def test_read_stream_decodes_buffer(self):
        stream = io.TextIOWrapper(io.BytesIO("ünïcode".encode("utf-8")), encoding="latin-1")

        assert read_stream(stream) == "ünïcode"

    def test_read_stream_invalid_utf8(self):
        stream = io.TextIOWrapper(io.BytesIO(b"\xff\xfe"), encoding="latin-1")

        with pytest.raises(InputReadError) as exc_info:
            read_stream(stream)

        assert exc_info.value.source == "<stdin>"

    def test_write_json_creates_parent(self, tmp_path):
        path = tmp_path / "out" / "chunks.json"

        write_json(["日本", "abc"], path)

        assert json.loads(path.read_text(encoding="utf-8")) == ["日本", "abc"]
        assert "日本" in path.read_text(encoding="utf-8")


class TestDisplay:
    """Tests for the chunk display helpers."""

    def test_print_chunks_labels(self, console_output):
        console, buffer = console_output

        print_chunks(["This is a ", "test text."], console)

        assert buffer.getvalue().splitlines() == [
            "Chunk 1: This is a ",
            "Chunk 2: test text.",
        ]

    def test_print_chunks_keeps_markup_literal(self, console_output):
        console, buffer = console_output

        print_chunks(["[bold]not bold[/bold] :smile:"], console)

        assert buffer.getvalue() == "Chunk 1: [bold]not bold[/bold] :smile:\n"

    def test_print_chunks_keeps_tabs_and_carriage_returns(self, console_output):
        """Whitespace and control characters are written unchanged."""
        console, buffer = console_output

        print_chunks(["a\tb\r\nc", "\x1b[0m"], console)

        assert buffer.getvalue() == "Chunk 1: a\tb\r\nc\nChunk 2: \x1b[0m\n"

    def test_print_chunks_empty(self, console_output):
        console, buffer = console_output

        print_chunks([], console)

        assert buffer.getvalue() == ""

    def test_display_chunks_table(self, console_output):
        console, buffer = console_output

        display_chunks_table(["alpha", "[beta]"], console, title="Result")

        output = buffer.getvalue()
        assert "Result" in output
        assert "alpha" in output
        assert "[beta]" in output
        assert "Length" in output

    def test_display_chunks_table_empty(self, console_output):
        console, buffer = console_output

        display_chunks_table([], console)

        assert "No chunks produced." in buffer.getvalue()


class TestLogging:
    """Tests for setup_logging."""

    def test_default_level(self, console_output):
        console, _ = console_output

        logger = setup_logging(LoggingConfig(), console=console)

        assert logger.name == "overlap_chunk"
        assert logger.level == logging.WARNING
        assert logger.propagate is False
        assert len(logger.handlers) == 1

    def test_debug_overrides_level(self, console_output):
        console, buffer = console_output

        logger = setup_logging(LoggingConfig(level="ERROR"), debug=True, console=console)
        logging.getLogger("overlap_chunk.main").debug("visible debug message")

        assert logger.level == logging.DEBUG
        assert "visible debug message" in buffer.getvalue()

    def test_repeated_setup_replaces_handlers(self, console_output):
        console, _ = console_output

        setup_logging(LoggingConfig(), console=console)
        logger = setup_logging(LoggingConfig(), console=console)

        assert len(logger.handlers) == 1

    def test_log_file(self, tmp_path, console_output):
        console, _ = console_output
        log_file = tmp_path / "logs" / "overlap-chunk.log"

        logger = setup_logging(
            LoggingConfig(level="INFO", file=log_file), console=console
        )
        logging.getLogger("overlap_chunk.chunking").info("written to file")
        for handler in logger.handlers:
            handler.flush()

        assert log_file.exists()
        assert "written to file" in log_file.read_text(encoding="utf-8")

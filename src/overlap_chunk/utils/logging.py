import logging
import logging.handlers
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from ..config import LoggingConfig

PACKAGE_LOGGER_NAME = "overlap_chunk"


def setup_logging(
    logging_config: Optional[LoggingConfig] = None,
    debug: bool = False,
    console: Optional[Console] = None,
) -> logging.Logger:
    """Configures the package logger with Rich console output and an optional log file.

    Console output goes to stderr so that stdout only carries chunks. Calling
    this again replaces the handlers installed by a previous call.

    Args:
        logging_config: Logging settings; defaults when ``None``.
        debug: Force ``DEBUG`` level regardless of the configured level.
        console: Rich console for log output; a stderr console by default.

    Returns:
        The configured package logger.
    """
    logging_config = logging_config or LoggingConfig()
    log_level = logging.DEBUG if debug else getattr(logging, logging_config.level)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(log_level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.propagate = False

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        keywords=["INFO", "DEBUG", "WARNING", "ERROR", "CRITICAL"],
    )
    rich_handler.setLevel(log_level)
    package_logger.addHandler(rich_handler)

    if logging_config.file:
        log_file = logging_config.file.expanduser()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=logging_config.max_size,
            backupCount=logging_config.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(
            logging.Formatter(logging_config.format, datefmt="%Y-%m-%d %H:%M:%S")
        )
        # The file keeps everything the logger lets through
        file_handler.setLevel(logging.DEBUG)
        package_logger.addHandler(file_handler)

    package_logger.debug(
        f"Logging configured with level {logging.getLevelName(log_level)}"
        + (f" and log file {logging_config.file}" if logging_config.file else "")
    )
    return package_logger

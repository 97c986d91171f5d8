"""
Logging configuration for the video annotate tool.

Sets up structured logging with rich console output on stderr and an
optional plain-text log file.
"""

import os
import logging
import structlog
from rich.console import Console
from rich.logging import RichHandler
from logging import FileHandler
from typing import Any, Optional

# Console for status and log output; annotations go to stdout
console = Console(stderr=True)

# Marker attribute for handlers installed by setup_logging
_HANDLER_MARKER = "_video_annotate_handler"


def _remove_installed_handlers(root_logger: logging.Logger) -> None:
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root_logger.removeHandler(handler)
            handler.close()


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> Any:
    """
    Setup logging configurations for console and, optionally, file output.

    Calling this more than once replaces the handlers installed by the
    previous call.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...)
        log_file: Optional path to a plain-text log file

    Returns:
        The configured structlog logger
    """
    numeric_level = logging.getLevelName(str(level).upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    # Configure structlog to integrate with standard logging
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S.%f", utc=False),
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(min_level=numeric_level),
        context_class=dict,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.dev.ConsoleRenderer(colors=False),
    )

    std_root_logger = logging.getLogger()
    _remove_installed_handlers(std_root_logger)

    # Console Handler (using Rich for pretty output)
    rich_console_handler = RichHandler(console=console, rich_tracebacks=True, markup=False, show_path=False)
    rich_console_handler.setFormatter(formatter)
    rich_console_handler.setLevel(numeric_level)
    setattr(rich_console_handler, _HANDLER_MARKER, True)
    std_root_logger.addHandler(rich_console_handler)

    # File Handler (plain text)
    if log_file:
        log_dir = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(log_dir, exist_ok=True)
        file_log_handler = FileHandler(log_file, mode='a', encoding='utf-8')
        file_log_handler.setFormatter(formatter)
        file_log_handler.setLevel(numeric_level)
        setattr(file_log_handler, _HANDLER_MARKER, True)
        std_root_logger.addHandler(file_log_handler)

    std_root_logger.setLevel(numeric_level)

    logger = structlog.get_logger(__name__)
    logger.debug("Logging configured", level=logging.getLevelName(numeric_level), log_file=log_file)
    return logger

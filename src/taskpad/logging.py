"""Structured logging configuration for taskpad.

Uses structlog for structured, context-rich logging that supports
both human-readable console output and machine-readable JSON format.

The REPL owns the terminal, so log lines written to stderr land between
prompts. Set ``log_file`` (TASKPAD_LOG_FILE) to send them to a file.
"""

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

import structlog
from structlog.types import Processor

if TYPE_CHECKING:
    from taskpad.config import Settings

# File opened by configure_logging; closed when logging is reconfigured
_log_stream: TextIO | None = None
_stdlib_handler: logging.Handler | None = None


def _open_stream(log_file: Path | None) -> TextIO:
    if log_file is None:
        return sys.stderr
    path = Path(log_file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return path.open("a", encoding="utf-8")


def _renderer(log_format: str, stream: TextIO) -> list[Processor]:
    if log_format == "json":
        return [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return [
        structlog.dev.ConsoleRenderer(
            colors=stream.isatty(),
            exception_formatter=structlog.dev.plain_traceback,
        ),
    ]


def configure_logging(settings: "Settings | None" = None) -> None:
    """Configure structured logging based on settings.

    Safe to call more than once; each call replaces the previous output
    stream and level.

    Args:
        settings: Application settings. If None, logs warnings and above
            to stderr in console format.
    """
    global _log_stream, _stdlib_handler

    log_level = logging.WARNING
    log_format = "console"
    log_file = None

    if settings is not None:
        log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
        log_format = settings.log_format
        log_file = settings.log_file

    stream = _open_stream(log_file)
    if _log_stream is not None:
        _log_stream.close()
    _log_stream = stream if stream is not sys.stderr else None

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[*shared_processors, *_renderer(log_format, stream)],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        # module-level loggers must follow a reconfiguration
        cache_logger_on_first_use=False,
    )

    # asyncio and prompt_toolkit log through the standard library
    root = logging.getLogger()
    if _stdlib_handler is not None:
        root.removeHandler(_stdlib_handler)
    _stdlib_handler = logging.StreamHandler(stream)
    _stdlib_handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    _stdlib_handler.setLevel(log_level)
    root.addHandler(_stdlib_handler)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance.

    Args:
        name: Optional logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name) if name else structlog.get_logger()


def bind_context(**kwargs: object) -> None:
    """Bind context variables to all subsequent log calls in the current context.

    Example:
        bind_context(app_name="taskpad")
        logger.info("repl_starting")  # Will include app_name

    Args:
        **kwargs: Key-value pairs to bind to logging context
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


class Loggers:
    """Named loggers, one per layer."""

    @staticmethod
    def cli() -> structlog.stdlib.BoundLogger:
        return get_logger("taskpad.cli")

    @staticmethod
    def tasks() -> structlog.stdlib.BoundLogger:
        return get_logger("taskpad.tasks")

    @staticmethod
    def editor() -> structlog.stdlib.BoundLogger:
        return get_logger("taskpad.editor")

    @staticmethod
    def config() -> structlog.stdlib.BoundLogger:
        return get_logger("taskpad.config")

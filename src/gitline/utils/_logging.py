"""Logging utilities for gitline.

This module provides a standalone structlog logger factory. Loggers write
JSON-formatted or text-formatted events to a log file and never touch the
global structlog configuration. Standard output is reserved for the status
line, so events never go there.
"""

import logging
import sys
from os import getenv
from pathlib import Path
from typing import TYPE_CHECKING, Literal, NoReturn, TextIO, cast

import structlog

if TYPE_CHECKING:
    from structlog.typing import EventDict, FilteringBoundLogger, WrappedLogger

LogFormatType = Literal["json", "text"]

# One append handle per resolved log path, shared by every logger writing there
_log_files: dict[Path, TextIO] = {}


def _open_log_file(log_path: Path) -> TextIO:
    """Open a log file for appending, reusing an open handle for the same path.

    Raises:
        OSError: If the parent directory cannot be created or the file cannot
            be opened for writing.
    """
    key = log_path.resolve()
    handle = _log_files.get(key)
    if handle is None or handle.closed:
        key.parent.mkdir(parents=True, exist_ok=True)
        handle = key.open("a")
        _log_files[key] = handle
    return handle


def close_log_files() -> None:
    """Close every log file opened by create_logger.

    Loggers created earlier must not be used afterwards; a later call to
    create_logger reopens the file.
    """
    while _log_files:
        _, handle = _log_files.popitem()
        handle.close()


def _debug_enabled() -> bool:
    """Check whether GITLINE_DEBUG is set to a non-empty value."""
    return bool(getenv("GITLINE_DEBUG", None))


def _log_level_from_string(level: str, *, respect_env: bool = False) -> int:
    """Convert a log level string to a logging level integer.

    Args:
        level: Log level string (debug, info, warning, error).
        respect_env: If True, GITLINE_DEBUG overrides to DEBUG level.

    Returns:
        The logging level as an integer.
    """
    if respect_env and _debug_enabled():
        return logging.DEBUG

    log_levels = logging.getLevelNamesMapping()
    return log_levels.get(level.upper(), logging.WARNING)


def _drop_event(
    _logger: "WrappedLogger", _method_name: str, _event_dict: "EventDict"  # noqa: UP037
) -> NoReturn:
    raise structlog.DropEvent


def _create_logger(
    log_file_path: str,
    *,
    log_level: int = logging.WARNING,
    log_format: LogFormatType = "json",
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create a standalone structlog logger.

    Args:
        log_file_path: Path to the log file (opened in append mode). An empty
            path writes to stderr when GITLINE_DEBUG is set and discards
            every event otherwise.
        log_level: Minimum level that is emitted.
        log_format: Output format, either "json" or "text".

    Returns:
        A configured FilteringBoundLogger instance.

    Raises:
        OSError: If the log file cannot be opened.
    """
    processors: list[structlog.typing.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_file_path:
        log_file = _open_log_file(Path(log_file_path))
        raw_logger = structlog.WriteLoggerFactory(file=log_file)()
    elif _debug_enabled():
        raw_logger = structlog.WriteLoggerFactory(file=sys.stderr)()
    else:
        raw_logger = structlog.ReturnLogger()
        processors.insert(0, _drop_event)

    if log_format == "json":
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        # "timestamp [level] event key=value ..."
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            raw_logger,
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(log_level),
            context_class=dict,
        ),
    )


def create_logger(
    *,
    level: str = "warning",
    log_format: LogFormatType = "json",
    log_file: str = "",
    command: str = "",
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create the gitline logger.

    The log level is determined by (in order of precedence):
    1. GITLINE_DEBUG environment variable (if set, enables DEBUG level)
    2. The `level` parameter

    Loggers writing to the same file share one handle; close_log_files
    releases them.

    Args:
        level: Log level threshold (debug, info, warning, error).
        log_format: Output format, either "json" or "text".
        log_file: Path to the log file. Empty disables file logging.
        command: Name of the command, bound to all entries when given.

    Returns:
        A FilteringBoundLogger instance.

    Raises:
        OSError: If the log file or its directory cannot be created or opened.
    """
    logger = _create_logger(
        log_file,
        log_level=_log_level_from_string(level, respect_env=True),
        log_format=log_format,
    )

    if command:
        return logger.bind(command=command)
    return logger


def null_logger() -> "FilteringBoundLogger":  # noqa: UP037
    """Create a logger that discards every event."""
    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            structlog.ReturnLogger(),
            processors=[_drop_event],
            wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL),
            context_class=dict,
        ),
    )

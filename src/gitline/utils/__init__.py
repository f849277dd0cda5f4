"""Utilities shared across gitline."""

from ._exec import CommandResult, decode_output, run_command
from ._logging import LogFormatType, close_log_files, create_logger, null_logger

__all__ = [
    "CommandResult",
    "LogFormatType",
    "close_log_files",
    "create_logger",
    "decode_output",
    "null_logger",
    "run_command",
]

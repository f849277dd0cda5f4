"""Shared CLI utilities."""

from enum import IntEnum

__all__ = ["ExitCode"]


class ExitCode(IntEnum):
    """Exit codes for the gitline CLI."""

    SUCCESS = 0
    NOT_A_WORK_TREE = 1

# ruff: noqa: TC003  # Path needed at runtime for __init__ annotations
"""gitline exceptions."""

from pathlib import Path


class GitlineError(Exception):
    """Base exception for gitline errors."""


class GitQueryError(GitlineError):
    """Raised when a git query exits non-zero or cannot be run."""

    def __init__(self, message: str, *, args_: tuple[str, ...] = ()) -> None:
        """Initialize with error message and the git arguments that failed."""
        super().__init__(message)
        self.args_: tuple[str, ...] = args_


class NotAWorkTreeError(GitlineError):
    """Raised when the working directory is not inside a git work tree."""

    def __init__(self, message: str, *, cwd: Path | None = None) -> None:
        """Initialize with error message and the directory that was checked."""
        super().__init__(message)
        self.cwd: Path | None = cwd


class ConfigError(GitlineError):
    """Raised when environment configuration fails validation."""

    def __init__(self, message: str, *, key: str, value: object) -> None:
        """Initialize with error message and the offending key and value."""
        super().__init__(message)
        self.key: str = key
        self.value: object = value

"""Configuration models.

gitline reads no configuration files. These models validate the values
gathered from ``GITLINE_*`` environment variables.
"""

from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class LogLevel(StrEnum):
    """Log level threshold values.

    Values are ordered from most verbose (debug) to least verbose (error).
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Attributes:
        level: Log level threshold.
        format: Log output format.
        file: Path to log file (empty disables file logging).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.WARNING
    format: LogFormat = LogFormat.JSON
    file: str = ""


class GitConfig(BaseModel):
    """Git backend configuration section.

    Attributes:
        executable: Name or path of the git executable.
        timeout_ms: Per-query timeout in milliseconds. None waits forever.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    executable: str = Field(default="git", min_length=1)
    timeout_ms: int | None = Field(default=None, gt=0)


class Config(BaseModel):
    """Root gitline configuration."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    git: GitConfig = Field(default_factory=GitConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

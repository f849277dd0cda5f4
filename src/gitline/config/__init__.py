"""Configuration for gitline, read from GITLINE_* environment variables."""

from ._loader import (
    ENV_PREFIX,
    load_config,
    parse_env_vars,
    safe_load_config,
    set_nested_key,
)
from ._models import Config, GitConfig, LogFormat, LoggingConfig, LogLevel

__all__ = [
    "ENV_PREFIX",
    "Config",
    "GitConfig",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "load_config",
    "parse_env_vars",
    "safe_load_config",
    "set_nested_key",
]

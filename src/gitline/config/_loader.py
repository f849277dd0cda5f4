"""Environment configuration loading."""

import os
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from gitline.config._models import Config
from gitline.exceptions import ConfigError

ENV_PREFIX: str = "GITLINE_"


def set_nested_key(
    d: dict[str, Any],
    key_path: str,
    value: Any,  # noqa: ANN401
) -> None:
    """Set a value at a dotted key path in a nested dictionary.

    Creates intermediate dictionaries as needed.

    Example:
        >>> d = {}
        >>> set_nested_key(d, "logging.level", "debug")
        >>> d
        {'logging': {'level': 'debug'}}
    """
    parts = key_path.split(".")
    current = d

    for part in parts[:-1]:
        if not isinstance(current.get(part), dict):
            current[part] = {}
        current = current[part]

    current[parts[-1]] = value


def parse_env_vars(
    environ: Mapping[str, str] | None = None,
    prefix: str = ENV_PREFIX,
) -> dict[str, Any]:
    """Parse environment variables into a config dictionary.

    Args:
        environ: Environment to read. Defaults to ``os.environ``.
        prefix: Environment variable prefix (default: "GITLINE_").

    Returns:
        Dictionary of raw string values with nested structure. Values are
        left as strings for the models to coerce; empty values are skipped.

    Environment variable naming:
        - Add prefix (GITLINE_)
        - Convert to uppercase
        - Replace dots with double underscores
        - Example: logging.level -> GITLINE_LOGGING__LEVEL
    """
    env = os.environ if environ is None else environ
    result: dict[str, Any] = {}

    for key, value in env.items():
        if not key.startswith(prefix) or not value:
            continue

        config_key = key[len(prefix) :]
        if not config_key:
            continue

        # GITLINE_LOGGING__LEVEL -> logging.level
        set_nested_key(result, config_key.replace("__", ".").lower(), value)

    return result


def load_config(environ: Mapping[str, str] | None = None) -> Config:
    """Load configuration from environment variables.

    Args:
        environ: Environment to read. Defaults to ``os.environ``.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If a value fails validation.
    """
    data = parse_env_vars(environ)
    try:
        return Config.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first["loc"])
        env_name = ENV_PREFIX + key.upper().replace(".", "__")
        msg = f"Invalid value for {env_name}: {first['msg']}"
        raise ConfigError(msg, key=key, value=first.get("input")) from e


def safe_load_config(
    environ: Mapping[str, str] | None = None,
) -> tuple[Config, str | None]:
    """Load configuration, falling back to defaults on error.

    The status line must render even when the environment is misconfigured,
    so validation errors are returned rather than raised.

    Args:
        environ: Environment to read. Defaults to ``os.environ``.

    Returns:
        Tuple of (Config, error_message). On success, error_message is None.
        On failure, returns the default Config with the error message.
    """
    try:
        return load_config(environ), None
    except ConfigError as e:
        return Config(), str(e)

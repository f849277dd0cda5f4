"""Tests for gitline.config environment loading."""

import pytest

from gitline import ConfigError
from gitline.config import (
    Config,
    LogFormat,
    LogLevel,
    load_config,
    parse_env_vars,
    safe_load_config,
    set_nested_key,
)


class TestSetNestedKey:
    def test_creates_intermediate_dicts(self) -> None:
        d: dict[str, object] = {}
        set_nested_key(d, "logging.level", "debug")
        assert d == {"logging": {"level": "debug"}}

    def test_overwrites_scalar_with_dict(self) -> None:
        d: dict[str, object] = {"git": "x"}
        set_nested_key(d, "git.executable", "/usr/bin/git")
        assert d == {"git": {"executable": "/usr/bin/git"}}


class TestParseEnvVars:
    def test_ignores_other_prefixes(self) -> None:
        assert parse_env_vars({"HOME": "/root", "GIT_DIR": "/tmp"}) == {}

    def test_nests_double_underscores(self) -> None:
        env = {
            "GITLINE_LOGGING__LEVEL": "debug",
            "GITLINE_GIT__TIMEOUT_MS": "250",
        }
        assert parse_env_vars(env) == {
            "logging": {"level": "debug"},
            "git": {"timeout_ms": "250"},
        }

    def test_skips_empty_values(self) -> None:
        assert parse_env_vars({"GITLINE_GIT__TIMEOUT_MS": ""}) == {}

    def test_skips_bare_prefix(self) -> None:
        assert parse_env_vars({"GITLINE_": "x"}) == {}


class TestLoadConfig:
    def test_defaults(self) -> None:
        config = load_config({})
        assert config == Config()
        assert config.git.executable == "git"
        assert config.git.timeout_ms is None
        assert config.logging.level is LogLevel.WARNING
        assert config.logging.format is LogFormat.JSON
        assert config.logging.file == ""

    def test_reads_all_sections(self) -> None:
        config = load_config(
            {
                "GITLINE_GIT__EXECUTABLE": "/opt/git/bin/git",
                "GITLINE_GIT__TIMEOUT_MS": "500",
                "GITLINE_LOGGING__LEVEL": "info",
                "GITLINE_LOGGING__FORMAT": "text",
                "GITLINE_LOGGING__FILE": "/tmp/gitline.log",
            }
        )
        assert config.git.executable == "/opt/git/bin/git"
        assert config.git.timeout_ms == 500
        assert config.logging.level is LogLevel.INFO
        assert config.logging.format is LogFormat.TEXT
        assert config.logging.file == "/tmp/gitline.log"

    def test_debug_flag_is_not_a_config_key(self) -> None:
        assert load_config({"GITLINE_DEBUG": "1"}) == Config()

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITLINE_LOGGING__LEVEL", "error")
        assert load_config().logging.level is LogLevel.ERROR

    def test_invalid_level(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            _ = load_config({"GITLINE_LOGGING__LEVEL": "loud"})

        assert exc_info.value.key == "logging.level"
        assert exc_info.value.value == "loud"
        assert "GITLINE_LOGGING__LEVEL" in str(exc_info.value)

    @pytest.mark.parametrize("value", ["0", "-5", "soon"])
    def test_invalid_timeout(self, value: str) -> None:
        with pytest.raises(ConfigError) as exc_info:
            _ = load_config({"GITLINE_GIT__TIMEOUT_MS": value})
        assert exc_info.value.key == "git.timeout_ms"

    def test_config_is_frozen(self) -> None:
        config = load_config({})
        with pytest.raises(ValueError, match="frozen"):
            config.git = config.git  # pyright: ignore[reportAttributeAccessIssue]


class TestSafeLoadConfig:
    def test_success(self) -> None:
        config, error = safe_load_config({"GITLINE_LOGGING__LEVEL": "debug"})
        assert error is None
        assert config.logging.level is LogLevel.DEBUG

    def test_falls_back_to_defaults(self) -> None:
        config, error = safe_load_config({"GITLINE_LOGGING__FORMAT": "xml"})
        assert config == Config()
        assert error is not None
        assert "GITLINE_LOGGING__FORMAT" in error

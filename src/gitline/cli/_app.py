# pyright: reportUnusedFunction=false
"""The command-line interface for gitline."""

import sys
from typing import TYPE_CHECKING, cast

from cyclopts import App
from rich.console import Console

from gitline._scheduler import collect_status
from gitline.backend import GitBackend
from gitline.config import safe_load_config
from gitline.exceptions import NotAWorkTreeError
from gitline.utils import close_log_files, create_logger

from ._shared import ExitCode

if TYPE_CHECKING:
    from gitline.utils import LogFormatType

_HELP = "Print a one-line summary of the git work tree for shell prompts."


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="gitline",
        help=_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.default
    def _status() -> None:
        """Print branch, ahead, behind, staged, conflicts, modified, untracked
        and deleted counts as one space-separated line.

        Exits with status 1 and prints nothing outside a git work tree.
        """
        config, config_error = safe_load_config()
        log_format = cast("LogFormatType", config.logging.format.value)
        try:
            logger = create_logger(
                level=config.logging.level.value,
                log_format=log_format,
                log_file=config.logging.file,
                command="gitline",
            )
        except OSError as e:
            # Unusable log file: stderr under GITLINE_DEBUG, silent otherwise
            logger = create_logger(
                level=config.logging.level.value,
                log_format=log_format,
                command="gitline",
            )
            logger.warning(
                "config_invalid",
                error=f"GITLINE_LOGGING__FILE: {e}",
                log_file=config.logging.file,
            )
        if config_error is not None:
            logger.warning("config_invalid", error=config_error)

        backend = GitBackend(
            executable=config.git.executable,
            timeout_ms=config.git.timeout_ms,
            logger=logger,
        )

        try:
            record = collect_status(backend, logger=logger)
        except NotAWorkTreeError as e:
            logger.info("not_a_work_tree", error=str(e))
            sys.exit(ExitCode.NOT_A_WORK_TREE)

        console.print(
            record.render(), markup=False, highlight=False, emoji=False, soft_wrap=True
        )

    return app


def main() -> None:
    """Default entrypoint for the `gitline` CLI."""
    app = create_app()
    try:
        app()
    finally:
        close_log_files()


if __name__ == "__main__":
    main()

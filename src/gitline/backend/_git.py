# ruff: noqa: TC003  # Path needed at runtime for dataclass field
"""Subprocess-backed git backend."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from gitline.utils import null_logger, run_command

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


@dataclass(frozen=True, slots=True)
class GitBackend:
    """Runs git queries as child processes.

    Attributes:
        executable: Name or path of the git executable.
        cwd: Directory the queries run in, or None for the current directory.
        timeout_ms: Per-query timeout in milliseconds, or None to wait
            indefinitely.
        logger: Structured logger for per-query debug events.
    """

    executable: str = "git"
    cwd: Path | None = None
    timeout_ms: int | None = None
    logger: "FilteringBoundLogger" = field(  # noqa: UP037
        default_factory=null_logger, repr=False, compare=False
    )

    def query(self, *args: str) -> str | None:
        """Run ``git <args>`` and return its trimmed output, or None on failure."""
        result = run_command(
            self.executable, *args, cwd=self.cwd, timeout_ms=self.timeout_ms
        )
        self.logger.debug(
            "git_query",
            args=list(args),
            success=result.success,
            exit_code=result.exit_code,
            error=result.error,
            timed_out=result.timed_out,
        )
        return result.text

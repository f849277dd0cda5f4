"""Execution utilities for external commands.

This module runs a single external command to completion, captures its
standard output and classifies the outcome. Standard error is discarded and
no failure is ever raised to the caller.
"""

import subprocess
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result from command execution.

    Attributes:
        success: Whether the command ran and exited with status 0.
        exit_code: Process exit code, or None if the process never finished.
        stdout: Trimmed standard output, decoded lossily as UTF-8.
        error: Error message if execution failed (timeout, not found, etc.).
        timed_out: Whether the command timed out.
        command_not_found: Whether the executable was not found.
    """

    success: bool
    exit_code: int | None = None
    stdout: str = ""
    error: str | None = None
    timed_out: bool = False
    command_not_found: bool = False

    @property
    def text(self) -> str | None:
        """Standard output on success, None on any failure."""
        return self.stdout if self.success else None


def decode_output(output: bytes) -> str:
    """Decode process output, replacing undecodable bytes.

    Args:
        output: Raw bytes captured from the process.

    Returns:
        The decoded text with surrounding whitespace removed.
    """
    return output.decode("utf-8", errors="replace").strip()


def run_command(
    command: str,
    *args: str,
    cwd: str | Path | None = None,
    timeout_ms: int | None = None,
) -> CommandResult:
    """Run a command synchronously and capture its standard output.

    Standard input is closed and standard error goes to the null device.
    When ``timeout_ms`` is None the call waits for the process indefinitely.

    Args:
        command: Executable name or path.
        *args: Arguments passed to the executable, in order.
        cwd: Working directory for the process.
        timeout_ms: Optional timeout in milliseconds.

    Returns:
        CommandResult with execution outcome.
    """
    timeout_seconds = timeout_ms / 1000.0 if timeout_ms is not None else None

    try:
        result = subprocess.run(  # noqa: S603
            [command, *args],
            cwd=str(cwd) if cwd is not None else None,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            timeout=timeout_seconds,
            check=False,
        )
    except subprocess.TimeoutExpired:
        return CommandResult(
            success=False,
            error=f"Command timed out after {timeout_seconds}s",
            timed_out=True,
        )
    except FileNotFoundError as e:
        return CommandResult(
            success=False,
            error=str(e),
            command_not_found=True,
        )
    except Exception as e:  # noqa: BLE001
        return CommandResult(
            success=False,
            error=str(e),
        )

    return CommandResult(
        success=result.returncode == 0,
        exit_code=result.returncode,
        stdout=decode_output(result.stdout),
        error=None if result.returncode == 0 else f"Exited with {result.returncode}",
    )

"""Git backend protocol for type-safe dependency injection.

This module defines a runtime-checkable Protocol satisfied by both the real
subprocess-backed GitBackend and the FakeGitBackend used in tests.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class GitBackendProtocol(Protocol):
    """Protocol for running read-only git queries.

    Implementations must be safe to call from several threads at once.

    Example:
        >>> def current_branch(backend: GitBackendProtocol) -> str | None:
        ...     return backend.query("rev-parse", "--abbrev-ref", "HEAD")
    """

    def query(self, *args: str) -> str | None:
        """Run ``git <args>`` and return its output.

        Args:
            *args: Arguments passed to git, in order.

        Returns:
            Trimmed standard output when git exits with status 0, None when
            the query fails for any reason.
        """
        ...

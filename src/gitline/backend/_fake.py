"""Fake git backend for testing.

This module provides a FakeGitBackend class that implements
GitBackendProtocol for use in tests without running git.
"""

import threading
import time
from dataclasses import dataclass, field

type FakeResponse = str | BaseException | None


@dataclass(slots=True)
class FakeGitBackend:
    """Fake git backend answering queries from a lookup table.

    Responses are keyed by the exact argument tuple. A string is returned as
    the query output, None reports a failed query, and an exception instance
    is raised from ``query``. Unknown queries fail. Calls are recorded in
    arrival order under a lock, so the fake can be shared between threads.

    Example:
        >>> backend = FakeGitBackend()
        >>> backend.respond(("rev-parse", "--abbrev-ref", "HEAD"), "main")
        >>> backend.query("rev-parse", "--abbrev-ref", "HEAD")
        'main'
        >>> backend.query("config", "branch.main.remote") is None
        True
    """

    responses: dict[tuple[str, ...], FakeResponse] = field(default_factory=dict)
    delays: dict[tuple[str, ...], float] = field(default_factory=dict)
    calls: list[tuple[str, ...]] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def respond(
        self, args: tuple[str, ...], response: FakeResponse, *, delay: float = 0.0
    ) -> None:
        """Register the response (and optional delay in seconds) for a query."""
        self.responses[args] = response
        if delay:
            self.delays[args] = delay

    def query(self, *args: str) -> str | None:
        with self._lock:
            self.calls.append(args)

        delay = self.delays.get(args, 0.0)
        if delay:
            time.sleep(delay)

        response = self.responses.get(args)
        if isinstance(response, BaseException):
            raise response
        return response

    def was_called(self, *args: str) -> bool:
        """Check whether a query with exactly these arguments was made."""
        with self._lock:
            return args in self.calls

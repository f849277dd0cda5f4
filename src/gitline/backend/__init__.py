"""Git backends.

GitBackend runs real git child processes; FakeGitBackend answers from a
lookup table. Both satisfy GitBackendProtocol.
"""

from ._fake import FakeGitBackend, FakeResponse
from ._git import GitBackend
from ._protocol import GitBackendProtocol

__all__ = [
    "FakeGitBackend",
    "FakeResponse",
    "GitBackend",
    "GitBackendProtocol",
]

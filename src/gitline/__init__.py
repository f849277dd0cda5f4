"""gitline: a one-line git work tree summary for shell prompts.

Typical embedding:

    >>> from gitline import GitBackend, collect_status
    >>> print(collect_status(GitBackend()).render())  # doctest: +SKIP
    main 0 0 0 0 0 0 0
"""

from gitline._branch import count_divergence, resolve_branch, upstream_ref
from gitline._counter import count_files, count_paths
from gitline._models import DEFAULT_BRANCH, BranchInfo, StatusRecord, UnitResult
from gitline._scheduler import collect_status, ensure_work_tree, run_unit
from gitline.backend import FakeGitBackend, GitBackend, GitBackendProtocol
from gitline.enums import FileClass
from gitline.exceptions import (
    ConfigError,
    GitlineError,
    GitQueryError,
    NotAWorkTreeError,
)

__all__ = [
    "DEFAULT_BRANCH",
    "BranchInfo",
    "ConfigError",
    "FakeGitBackend",
    "FileClass",
    "GitBackend",
    "GitBackendProtocol",
    "GitQueryError",
    "GitlineError",
    "NotAWorkTreeError",
    "StatusRecord",
    "UnitResult",
    "collect_status",
    "count_divergence",
    "count_files",
    "count_paths",
    "ensure_work_tree",
    "resolve_branch",
    "run_unit",
    "upstream_ref",
]

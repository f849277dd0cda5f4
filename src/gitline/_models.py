"""gitline models.

This module defines the status record printed by the CLI and the typed
results passed between the concurrent units and the scheduler.
"""

from dataclasses import astuple, dataclass, fields
from typing import Literal, Self

DEFAULT_BRANCH: str = "main"


def _check_count(name: str, value: object) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        msg = f"{name} must be a non-negative integer, got {value!r}"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class BranchInfo:
    """Branch identity and divergence from upstream.

    Attributes:
        branch: Branch name, or ``:`` followed by a short commit id when HEAD
            is detached.
        ahead: Commits present locally but not upstream.
        behind: Commits present upstream but not locally.
    """

    branch: str
    ahead: int = 0
    behind: int = 0

    def __post_init__(self) -> None:
        if not self.branch:
            msg = "branch must not be empty"
            raise ValueError(msg)
        _check_count("ahead", self.ahead)
        _check_count("behind", self.behind)

    @classmethod
    def default(cls) -> Self:
        """Branch info used when the branch unit fails."""
        return cls(DEFAULT_BRANCH)


@dataclass(frozen=True, slots=True)
class StatusRecord:
    """Snapshot of a work tree's state, rendered as one status line.

    Attributes:
        branch: Branch name, or ``:`` + short commit id on a detached head.
        ahead: Commits present locally but not upstream.
        behind: Commits present upstream but not locally.
        staged: Paths with staged changes.
        conflicts: Paths with unresolved merge conflicts.
        modified: Paths with unstaged modifications.
        untracked: Paths not tracked and not ignored.
        deleted: Paths with unstaged deletions.
    """

    branch: str
    ahead: int = 0
    behind: int = 0
    staged: int = 0
    conflicts: int = 0
    modified: int = 0
    untracked: int = 0
    deleted: int = 0

    def __post_init__(self) -> None:
        if not self.branch:
            msg = "branch must not be empty"
            raise ValueError(msg)
        for f in fields(self)[1:]:
            _check_count(f.name, getattr(self, f.name))

    @classmethod
    def default(cls) -> Self:
        """Record with every field at its fallback value."""
        return cls(DEFAULT_BRANCH)

    def render(self) -> str:
        """Render the record as eight space-separated fields."""
        return " ".join(str(value) for value in astuple(self))


type UnitErrorType = Literal["query_failed", "crashed"]


@dataclass(frozen=True, slots=True)
class UnitResult[T]:
    """Outcome of one concurrent unit of work.

    Attributes:
        success: Whether the unit produced a value.
        value: The unit's value, or None if it failed.
        error: Error message if the unit failed.
        error_type: ``query_failed`` when a git query failed, ``crashed``
            when the unit raised anything else.
    """

    success: bool
    value: T | None = None
    error: str | None = None
    error_type: UnitErrorType | None = None

    def value_or(self, default: T) -> T:
        """Return the value on success, otherwise ``default``."""
        if self.success and self.value is not None:
            return self.value
        return default

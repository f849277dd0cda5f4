"""Branch identity and upstream divergence.

The branch name query is the only query whose failure fails the whole
resolution. Every later query falls back to a default value.
"""

from typing import TYPE_CHECKING

from gitline._models import BranchInfo
from gitline.exceptions import GitQueryError

if TYPE_CHECKING:
    from gitline.backend import GitBackendProtocol

# Reported by `git rev-parse --abbrev-ref HEAD` on a detached head
DETACHED_SENTINEL: str = "HEAD"
DEFAULT_REMOTE: str = "origin"
UNKNOWN_COMMIT: str = "unknown"
# Remote name meaning "the local repository"
LOCAL_REMOTE: str = "."
_REFS_HEADS: str = "refs/heads/"


def strip_refs_heads(ref: str) -> str:
    """Strip a leading refs/heads/ prefix from a reference."""
    if ref.startswith(_REFS_HEADS):
        return ref[len(_REFS_HEADS) :]
    return ref


def upstream_ref(branch: str, remote: str | None, merge: str | None) -> str:
    """Build the fully qualified upstream reference of a branch.

    Args:
        branch: Local branch name.
        remote: Value of ``branch.<name>.remote``, or None if unset.
        merge: Value of ``branch.<name>.merge``, or None if unset.

    Returns:
        The merge reference itself for the local remote ``.``, otherwise the
        merge reference requalified under ``refs/remotes/<remote>/``.
    """
    remote = remote or DEFAULT_REMOTE
    merge = merge or f"{_REFS_HEADS}{branch}"

    if remote == LOCAL_REMOTE:
        return merge
    return f"refs/remotes/{remote}/{strip_refs_heads(merge)}"


def count_divergence(rev_list: str) -> tuple[int, int]:
    """Count ahead and behind commits in ``rev-list --left-right`` output.

    Args:
        rev_list: Output of ``git rev-list --left-right <upstream>...HEAD``.

    Returns:
        Tuple of (ahead, behind). Lines marked ``>`` are only reachable from
        HEAD, lines marked ``<`` only from upstream. Other lines are ignored.
    """
    ahead = 0
    behind = 0
    for line in rev_list.splitlines():
        if line.startswith(">"):
            ahead += 1
        elif line.startswith("<"):
            behind += 1
    return ahead, behind


def resolve_branch(backend: "GitBackendProtocol") -> BranchInfo:  # noqa: UP037
    """Resolve the current branch and its divergence from upstream.

    Args:
        backend: Backend used to run the git queries.

    Returns:
        BranchInfo for the current HEAD. A detached head is reported as
        ``:<short id>`` with zero divergence.

    Raises:
        GitQueryError: If the current branch name cannot be determined.
    """
    branch_args = ("rev-parse", "--abbrev-ref", "HEAD")
    branch = backend.query(*branch_args)
    if not branch:
        msg = "Could not determine the current branch"
        raise GitQueryError(msg, args_=branch_args)

    if branch == DETACHED_SENTINEL:
        short_head = backend.query("rev-parse", "--short", "HEAD") or UNKNOWN_COMMIT
        return BranchInfo(f":{short_head}")

    remote = backend.query("config", f"branch.{branch}.remote")
    merge = backend.query("config", f"branch.{branch}.merge")
    ref = upstream_ref(branch, remote, merge)

    rev_list = backend.query("rev-list", "--left-right", f"{ref}...HEAD")
    ahead, behind = count_divergence(rev_list or "")

    return BranchInfo(branch, ahead, behind)

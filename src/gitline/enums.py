"""gitline enumerations."""

from enum import StrEnum


class FileClass(StrEnum):
    """File-state classifications counted in the status line.

    Members are declared in status line order.
    """

    STAGED = "staged"
    CONFLICTS = "conflicts"
    MODIFIED = "modified"
    UNTRACKED = "untracked"
    DELETED = "deleted"

    @property
    def git_args(self) -> tuple[str, ...]:
        """The git arguments that list one matching path per line."""
        return _GIT_ARGS[self]


_GIT_ARGS: dict[FileClass, tuple[str, ...]] = {
    FileClass.STAGED: ("diff", "--cached", "--name-only"),
    FileClass.CONFLICTS: ("diff", "--name-only", "--diff-filter=U"),
    FileClass.MODIFIED: ("diff", "--name-only", "--diff-filter=M"),
    FileClass.UNTRACKED: ("ls-files", "--others", "--exclude-standard"),
    FileClass.DELETED: ("diff", "--name-only", "--diff-filter=D"),
}

"""File-set counting for the five file classifications."""

from typing import TYPE_CHECKING

from gitline.exceptions import GitQueryError

if TYPE_CHECKING:
    from gitline.backend import GitBackendProtocol
    from gitline.enums import FileClass


def count_paths(output: str) -> int:
    """Count the distinct non-empty lines of a path listing."""
    return len({line for line in output.splitlines() if line.strip()})


def count_files(backend: "GitBackendProtocol", file_class: "FileClass") -> int:  # noqa: UP037
    """Count the paths git reports for one file classification.

    Args:
        backend: Backend used to run the git query.
        file_class: The classification to count.

    Returns:
        Number of distinct paths listed. Empty output counts as zero.

    Raises:
        GitQueryError: If the query fails.
    """
    output = backend.query(*file_class.git_args)
    if output is None:
        msg = f"Could not list {file_class} files"
        raise GitQueryError(msg, args_=file_class.git_args)
    return count_paths(output)

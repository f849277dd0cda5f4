"""Fixtures for integration tests against the real git executable."""

import os
import shutil
from pathlib import Path

import pytest
from dulwich import porcelain
from dulwich.repo import Repo

from tests.integration._worktree import GitWorkTree

_IDENTITY = b"Test User <test@example.com>"

requires_git = pytest.mark.skipif(
    shutil.which("git") is None, reason="git executable not available"
)


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.integration)
            item.add_marker(requires_git)


@pytest.fixture
def isolated_git_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep user and system git configuration out of the tests."""
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", os.devnull)
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test User")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test User")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@example.com")
    for name in (
        "GITLINE_DEBUG",
        "GITLINE_GIT__EXECUTABLE",
        "GITLINE_GIT__TIMEOUT_MS",
        "GITLINE_LOGGING__FILE",
        "GITLINE_LOGGING__LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def work_tree(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, isolated_git_env: None
) -> GitWorkTree:
    """Create a repository on ``main`` with a committed README and chdir into it.

    Structure:
        tmp_path/
            repo/
                .git/
                README.md
    """
    root = tmp_path / "repo"
    root.mkdir()

    with Repo.init(str(root)) as repo:
        repo.refs.set_symbolic_ref(b"HEAD", b"refs/heads/main")
        readme = root / "README.md"
        _ = readme.write_text("# test\n")
        porcelain.add(repo, paths=[str(readme)])
        porcelain.commit(
            repo, message=b"Initial commit", author=_IDENTITY, committer=_IDENTITY
        )

    monkeypatch.chdir(root)
    return GitWorkTree(root=root)


@pytest.fixture
def unborn_work_tree(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, isolated_git_env: None
) -> GitWorkTree:
    """Create a repository on ``main`` with no commits and chdir into it."""
    root = tmp_path / "fresh"
    root.mkdir()

    with Repo.init(str(root)) as repo:
        repo.refs.set_symbolic_ref(b"HEAD", b"refs/heads/main")

    monkeypatch.chdir(root)
    return GitWorkTree(root=root)

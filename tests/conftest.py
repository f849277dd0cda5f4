"""Shared test fixtures for gitline tests."""

from collections.abc import Iterator

import pytest
from rich.console import Console

from gitline import FakeGitBackend
from gitline.utils import close_log_files
from tests._backends import make_backend


@pytest.fixture(autouse=True)
def _close_log_files() -> Iterator[None]:
    yield
    close_log_files()


@pytest.fixture
def clean_backend() -> FakeGitBackend:
    return make_backend()


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )

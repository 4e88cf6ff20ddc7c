"""Shared fixtures."""

import pytest

RUNNER_VARIABLES = (
    "GITHUB_WORKSPACE",
    "HOME",
    "INPUT_CLEANUP_HOME",
    "INPUT_CLEANUP_WORKSPACE",
    "INPUT_DRY_RUN",
    "RUNNER_DEBUG",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove runner variables so tests never touch real directories."""
    for name in RUNNER_VARIABLES:
        monkeypatch.delenv(name, raising=False)

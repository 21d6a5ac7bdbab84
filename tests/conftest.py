"""Pytest configuration and fixtures."""

import subprocess

import pytest
from pathlib import Path


FOREIGN_HOOK = b"#!/bin/sh\n# team lint hook\necho linting\n"


@pytest.fixture(autouse=True)
def isolated_git_home(tmp_path, monkeypatch):
    """Gives every test its own HOME so the global git config is never touched."""
    home = tmp_path / "home"
    home.mkdir()

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    for name in (
        "XDG_CONFIG_HOME",
        "GIT_CONFIG_GLOBAL",
        "GIT_DIR",
        "GIT_WORK_TREE",
        "GIT_INDEX_FILE",
        "KINGFISHER_HOOK_CONFIG",
        "KINGFISHER_IMAGE",
    ):
        monkeypatch.delenv(name, raising=False)

    return home


@pytest.fixture
def temp_git_repo(tmp_path):
    """Creates a temporary git repository."""
    repo_dir = tmp_path / "test_repo"
    repo_dir.mkdir()

    subprocess.run(["git", "init"], cwd=repo_dir, check=True, capture_output=True)
    subprocess.run(
        ["git", "config", "user.email", "test@example.com"],
        cwd=repo_dir,
        check=True
    )
    subprocess.run(
        ["git", "config", "user.name", "Test User"],
        cwd=repo_dir,
        check=True
    )

    return repo_dir


@pytest.fixture
def hooks_dir(tmp_path):
    """Empty hooks directory outside any repository."""
    path = tmp_path / "hooks"
    path.mkdir()
    return path


@pytest.fixture
def foreign_hook(hooks_dir):
    """A user-authored, executable pre-commit hook."""
    hook = hooks_dir / "pre-commit"
    hook.write_bytes(FOREIGN_HOOK)
    hook.chmod(0o755)
    return hook


def git_config_global(*args: str) -> subprocess.CompletedProcess:
    """Runs ``git config --global`` against the isolated HOME."""
    return subprocess.run(
        ["git", "config", "--global", *args],
        capture_output=True,
        text=True,
    )


def is_executable(path: Path) -> bool:
    return path.stat().st_mode & 0o111 != 0

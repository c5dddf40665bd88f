"""Pytest configuration and fixtures."""

import subprocess
from pathlib import Path

import pytest
import structlog

from git_link.config.settings import get_settings

ORIGIN_URL = "git@github.com:acme/widget.git"


def git(repo: Path, *args: str) -> str:
    """Run git in ``repo`` and return stdout."""
    result = subprocess.run(
        ["git", *args], cwd=repo, capture_output=True, text=True, check=True
    )
    return result.stdout.strip()


def init_repo(path: Path, origin: str | None = ORIGIN_URL) -> Path:
    """Create a repository on branch ``main`` without any commits."""
    path.mkdir(parents=True, exist_ok=True)
    git(path, "init", "-q")
    git(path, "symbolic-ref", "HEAD", "refs/heads/main")
    git(path, "config", "user.email", "test@test.com")
    git(path, "config", "user.name", "Test")
    git(path, "config", "commit.gpgsign", "false")
    if origin is not None:
        git(path, "remote", "add", "origin", origin)
    return path


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    structlog.reset_defaults()


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a temporary repository with one commit on ``main``."""
    repo_path = init_repo(tmp_path / "widget")

    (repo_path / "src").mkdir()
    (repo_path / "src" / "lib.X").write_text("fn main() {}\n")
    (repo_path / "README.md").write_text("# Widget\n")

    git(repo_path, "add", ".")
    git(repo_path, "commit", "-q", "-m", "Initial commit")
    return repo_path


@pytest.fixture
def head_sha(git_repo: Path) -> str:
    """The lowercase hex id of HEAD in ``git_repo``."""
    return git(git_repo, "rev-parse", "HEAD")

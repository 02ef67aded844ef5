"""Fixtures for integration tests that run the real git executable."""

import os
import shutil
import subprocess
from pathlib import Path

import pytest

from gitconf.gateway.process.real import RealProcessRunner


def isolated_git_env(home: Path) -> dict[str, str]:
    """Environment that keeps git away from the developer's own config files."""
    env = dict(os.environ)
    env["HOME"] = str(home)
    env["XDG_CONFIG_HOME"] = str(home / ".config")
    env["GIT_CONFIG_GLOBAL"] = str(home / ".gitconfig")
    env["GIT_CONFIG_NOSYSTEM"] = "1"
    return env


def init_git_repo(repo_path: Path, default_branch: str, env: dict[str, str]) -> None:
    """Initialize a git repository with one commit on default_branch."""
    subprocess.run(["git", "init", "-b", default_branch], cwd=repo_path, env=env, check=True)
    subprocess.run(
        ["git", "config", "user.email", "test@example.com"], cwd=repo_path, env=env, check=True
    )
    subprocess.run(["git", "config", "user.name", "Test User"], cwd=repo_path, env=env, check=True)
    (repo_path / "README.md").write_text("# Test\n", encoding="utf-8")
    subprocess.run(["git", "add", "README.md"], cwd=repo_path, env=env, check=True)
    subprocess.run(
        ["git", "commit", "-m", "Initial commit"], cwd=repo_path, env=env, check=True
    )


@pytest.fixture
def git_env(tmp_path: Path) -> dict[str, str]:
    home = tmp_path / "home"
    home.mkdir()
    return isolated_git_env(home)


@pytest.fixture
def git_repo(tmp_path: Path, git_env: dict[str, str]) -> Path:
    """A fresh repository on branch "main" with a single commit."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    repo = tmp_path / "repo"
    repo.mkdir()
    init_git_repo(repo, "main", git_env)
    return repo


@pytest.fixture
def git_runner(git_repo: Path, git_env: dict[str, str]) -> RealProcessRunner:
    return RealProcessRunner("git", cwd=git_repo, env=git_env)

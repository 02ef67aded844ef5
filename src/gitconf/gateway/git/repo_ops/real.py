"""Real implementation of git repository and revision operations."""

import re
from pathlib import Path

from gitconf.gateway.git.repo_ops.abc import GitRepoOps
from gitconf.gateway.process.abc import ProcessRunner

_CHANGE_ID_RE = re.compile(r"^Change-Id:\s*(I[a-z0-9]+)$", re.MULTILINE)


class RealGitRepoOps(GitRepoOps):
    """Repository queries implemented as git invocations."""

    def __init__(self, runner: ProcessRunner) -> None:
        self._runner = runner

    def checkout(self, ref: str) -> None:
        """Check out a branch or commit."""
        self._runner.exec("checkout", ref)

    def in_repo(self) -> bool:
        """Check whether the working directory is inside a git repository."""
        return self._runner.exec_succeeded("rev-parse", "--git-dir")

    def git_dir(self) -> Path:
        """Path of the .git directory."""
        return Path(self._runner.exec("rev-parse", "--git-dir"))

    def is_detached_head(self) -> bool:
        """Check whether HEAD is detached."""
        # HEAD is attached exactly when it is a symbolic ref
        return not self._runner.exec_succeeded("symbolic-ref", "--quiet", "HEAD")

    def is_index_clean(self) -> bool:
        """Check whether the index and working tree match HEAD."""
        return self._runner.exec_succeeded(
            "diff-index", "--no-ext-diff", "--quiet", "--exit-code", "HEAD"
        )

    def hash_for(self, name: str) -> str:
        """Full commit hash a name resolves to."""
        return self._runner.exec("rev-list", "--max-count=1", name)

    def rev_list(self, target: str, exclude: str) -> list[str]:
        """Commits in target but not in exclude."""
        output = self._runner.exec("rev-list", target, f"^{exclude}")
        if not output:
            return []
        return output.split("\n")

    def commit_info(self, commit: str, fmt: str) -> str:
        """Render a commit with a format string."""
        return self._runner.exec("show", "--no-patch", f"--format={fmt}", commit)

    def describe_hash(self, commit: str) -> str:
        """Short hash and subject line."""
        return self.commit_info(commit, "%h %s")

    def get_change_id(self, commit: str) -> str | None:
        """Gerrit Change-Id trailer of a commit."""
        match = _CHANGE_ID_RE.search(self.commit_info(commit, "%b"))
        if match is None:
            return None
        return match.group(1)

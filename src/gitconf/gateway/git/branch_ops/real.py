"""Real implementation of git branch operations."""

from gitconf.gateway.git.branch_ops.abc import GitBranchOps
from gitconf.gateway.process.abc import ProcessRunner


class RealGitBranchOps(GitBranchOps):
    """Git branch operations implemented as git invocations."""

    def __init__(self, runner: ProcessRunner) -> None:
        self._runner = runner

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def create(self, name: str, start_point: str = "HEAD", *, force: bool = False) -> None:
        """Create a branch without checking it out."""
        flags = ["--force"] if force else []
        self._runner.exec("branch", flags, name, start_point)

    def remove(self, name: str) -> None:
        """Force-delete a local branch."""
        self._runner.exec("branch", "-D", name)

    def set_upstream(self, name: str, upstream: str) -> None:
        """Make a branch track an upstream."""
        self._runner.exec("branch", "--set-upstream-to", upstream, name)

    # ============================================================================
    # Query Operations
    # ============================================================================

    def name(self, ref: str = "HEAD") -> str:
        """Short branch name a symbolic ref points at."""
        return self._runner.exec("symbolic-ref", "--quiet", "--short", ref)

    def exists(self, name: str) -> bool:
        """Check whether a local branch exists."""
        return self._runner.exec_succeeded(
            "show-ref", "--verify", "--quiet", f"refs/heads/{name}"
        )

    def has_upstream(self, name: str = "HEAD") -> bool:
        """Check whether a branch has an upstream configured."""
        return self._runner.exec_succeeded("rev-parse", "--verify", "--quiet", f"{name}@{{u}}")

    def upstream(self, name: str = "HEAD") -> str:
        """Short name of a branch's upstream."""
        return self._runner.exec(
            "rev-parse", "--symbolic-full-name", "--abbrev-ref", f"{name}@{{u}}"
        )

    def is_remote(self, name: str) -> bool:
        """Check whether a name is a remote-tracking branch."""
        return self._runner.exec_succeeded(
            "rev-parse", "--verify", "--quiet", f"refs/remotes/{name}"
        )

    def list_branches(self) -> list[str]:
        """List all local branch names."""
        output = self._runner.exec("for-each-ref", "--format=%(refname:short)", "refs/heads/")
        return [line for line in output.split("\n") if line]

"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from gitconf.gateway.git.branch_ops.abc import GitBranchOps
from gitconf.gateway.git.branch_ops.real import RealGitBranchOps
from gitconf.gateway.git.config_ops.abc import GitConfigOps
from gitconf.gateway.git.config_ops.dry_run import DryRunGitConfigOps
from gitconf.gateway.git.config_ops.printing import PrintingGitConfigOps
from gitconf.gateway.git.config_ops.real import RealGitConfigOps
from gitconf.gateway.git.repo_ops.abc import GitRepoOps
from gitconf.gateway.git.repo_ops.real import RealGitRepoOps
from gitconf.gateway.process.abc import ProcessRunner
from gitconf.gateway.process.real import RealProcessRunner


@dataclass(frozen=True)
class GitconfContext:
    """Immutable context holding all dependencies for gitconf operations.

    Created at CLI entry point and threaded through the application via Click's
    context system. Frozen to prevent accidental modification at runtime.
    """

    runner: ProcessRunner
    config: GitConfigOps
    branch: GitBranchOps
    repo: GitRepoOps
    cwd: Path  # Working directory git runs in
    dry_run: bool


def create_context(
    *, cwd: Path, git_executable: str, dry_run: bool, verbose: bool
) -> GitconfContext:
    """Create production context with real implementations.

    Args:
        cwd: Directory git commands run in
        git_executable: git binary to invoke
        dry_run: If True, config mutations are printed but not executed
        verbose: If True, config mutations are printed before executing

    Returns:
        GitconfContext with real implementations, wrapped as requested
    """
    runner = RealProcessRunner(git_executable, cwd=cwd)
    config: GitConfigOps = RealGitConfigOps(runner)

    if dry_run:
        config = DryRunGitConfigOps(config)
    if dry_run or verbose:
        config = PrintingGitConfigOps(config, dry_run=dry_run)

    return GitconfContext(
        runner=runner,
        config=config,
        branch=RealGitBranchOps(runner),
        repo=RealGitRepoOps(runner),
        cwd=cwd,
        dry_run=dry_run,
    )


def context_for_test(
    *,
    runner: ProcessRunner | None = None,
    config: GitConfigOps | None = None,
    cwd: Path | None = None,
    dry_run: bool = False,
) -> GitconfContext:
    """Create test context, defaulting every gateway to fakes.

    Args:
        runner: Runner for branch/repo operations. If None, a FakeProcessRunner.
        config: Config gateway. If None, an empty FakeGitConfigOps.
        cwd: If None, uses Path("/test/default/cwd").
        dry_run: Whether to enable dry-run mode (default False).

    Example:
        >>> config = FakeGitConfigOps(local_values={"user.name": ["Alice"]})
        >>> ctx = context_for_test(config=config)
    """
    from gitconf.gateway.git.config_ops.fake import FakeGitConfigOps
    from gitconf.gateway.process.fake import FakeProcessRunner

    if runner is None:
        runner = FakeProcessRunner()
    if config is None:
        config = FakeGitConfigOps()

    return GitconfContext(
        runner=runner,
        config=config,
        branch=RealGitBranchOps(runner),
        repo=RealGitRepoOps(runner),
        cwd=cwd if cwd is not None else Path("/test/default/cwd"),
        dry_run=dry_run,
    )

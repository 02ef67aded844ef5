"""Types for git branch operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RemoteBranch:
    """A remote-tracking branch name split into remote and branch."""

    remote: str
    branch: str


def parse_remote_branch(name: str) -> RemoteBranch:
    """Split "origin/feature/x" into remote "origin" and branch "feature/x".

    Raises:
        ValueError: If the name has no remote part
    """
    remote, slash, branch = name.partition("/")
    if not slash or not remote or not branch:
        raise ValueError(f"Not a remote branch name: {name!r}")
    return RemoteBranch(remote=remote, branch=branch)

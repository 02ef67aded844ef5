"""Abstract interface for git repository and revision operations."""

from abc import ABC, abstractmethod
from pathlib import Path


class GitRepoOps(ABC):
    """Abstract interface for repository state and revision queries."""

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    @abstractmethod
    def checkout(self, ref: str) -> None:
        """Check out a branch or commit.

        Raises:
            CommandError: If git refuses the checkout
        """
        ...

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def in_repo(self) -> bool:
        """Check whether the working directory is inside a git repository."""
        ...

    @abstractmethod
    def git_dir(self) -> Path:
        """Path of the repository's .git directory, as git reports it."""
        ...

    @abstractmethod
    def is_detached_head(self) -> bool:
        """Check whether HEAD points at a commit rather than a branch."""
        ...

    @abstractmethod
    def is_index_clean(self) -> bool:
        """Check whether the index and working tree match HEAD."""
        ...

    @abstractmethod
    def hash_for(self, name: str) -> str:
        """Full commit hash a name resolves to."""
        ...

    @abstractmethod
    def rev_list(self, target: str, exclude: str) -> list[str]:
        """Commits reachable from ``target`` but not ``exclude``, newest first."""
        ...

    @abstractmethod
    def commit_info(self, commit: str, fmt: str) -> str:
        """Render a commit with a ``git show --format`` string."""
        ...

    @abstractmethod
    def describe_hash(self, commit: str) -> str:
        """Short hash and subject line, e.g. "1a2b3c4 Fix parser"."""
        ...

    @abstractmethod
    def get_change_id(self, commit: str) -> str | None:
        """Gerrit Change-Id trailer of a commit, or None when it has none."""
        ...

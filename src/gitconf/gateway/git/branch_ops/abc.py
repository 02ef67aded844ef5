"""Abstract interface for git branch operations."""

from abc import ABC, abstractmethod


class GitBranchOps(ABC):
    """Abstract interface for Git branch operations.

    Branch names are short names ("main"), not full refs.
    """

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    @abstractmethod
    def create(self, name: str, start_point: str = "HEAD", *, force: bool = False) -> None:
        """Create a branch without checking it out.

        Args:
            name: New branch name
            start_point: Commit-ish the branch starts at
            force: Reset the branch if it already exists

        Raises:
            CommandError: If git refuses to create the branch
        """
        ...

    @abstractmethod
    def remove(self, name: str) -> None:
        """Force-delete a local branch.

        Raises:
            CommandError: If the branch does not exist or is checked out
        """
        ...

    @abstractmethod
    def set_upstream(self, name: str, upstream: str) -> None:
        """Make ``name`` track ``upstream`` (e.g. "origin/main")."""
        ...

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def name(self, ref: str = "HEAD") -> str:
        """Short branch name a symbolic ref points at.

        Raises:
            CommandError: If the ref is not symbolic (e.g. detached HEAD)
        """
        ...

    @abstractmethod
    def exists(self, name: str) -> bool:
        """Check whether a local branch exists."""
        ...

    @abstractmethod
    def has_upstream(self, name: str = "HEAD") -> bool:
        """Check whether a branch has an upstream configured."""
        ...

    @abstractmethod
    def upstream(self, name: str = "HEAD") -> str:
        """Short name of a branch's upstream, e.g. "origin/main".

        Raises:
            CommandError: If the branch has no upstream
        """
        ...

    @abstractmethod
    def is_remote(self, name: str) -> bool:
        """Check whether ``name`` is a remote-tracking branch ("origin/main")."""
        ...

    @abstractmethod
    def list_branches(self) -> list[str]:
        """List all local branch names."""
        ...

"""Abstract interface for git configuration operations."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from gitconf.gateway.git.config_ops.types import ConfigScope


class GitConfigOps(ABC):
    """Abstract interface for Git configuration operations.

    This interface contains both mutation and query operations for git config.
    All implementations (real, fake, dry-run, printing) must implement this interface.

    Every operation takes a keyword-only ``scope``; "default" lets git pick the
    file. Read-then-write operations (unique add, unset_matching) assume
    nothing else mutates the same file between the read and the write.
    """

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    @abstractmethod
    def set(
        self,
        key: str,
        values: str | Sequence[str],
        *,
        scope: ConfigScope = "default",
        add: bool = False,
        unique: bool = False,
    ) -> list[str]:
        """Write one or more values for a key.

        Args:
            key: Configuration key (e.g., "user.name", "remote.origin.fetch")
            values: A value, or values to write in order
            scope: Configuration scope ("default", "local", or "global")
            add: Keep existing values and append. When False, existing values
                in the scope are removed first (no existing values is fine).
            unique: With add, skip values the key already holds in the scope

        Returns:
            The values passed in for writing, as a list (for unique adds,
            only those not already present)

        Raises:
            CommandError: If git rejects a write
        """
        ...

    @abstractmethod
    def add(
        self,
        key: str,
        values: str | Sequence[str],
        *,
        scope: ConfigScope = "default",
        unique: bool = False,
    ) -> list[str]:
        """Append values for a key. Equivalent to ``set(..., add=True)``."""
        ...

    @abstractmethod
    def unset(self, key: str, *, scope: ConfigScope = "default") -> None:
        """Remove every value of a key.

        Raises:
            CommandError: If the key has no values in the scope
        """
        ...

    @abstractmethod
    def unset_matching(
        self, key: str, values: str | Sequence[str], *, scope: ConfigScope = "default"
    ) -> list[str]:
        """Remove the given values of a multi-valued key, leaving the others.

        Values are matched exactly, never as substrings.

        Returns:
            The requested values the key actually held, which were removed
        """
        ...

    @abstractmethod
    def remove_section(self, section: str, *, scope: ConfigScope = "default") -> None:
        """Remove a whole section such as "remote.origin".

        Raises:
            CommandError: If the section does not exist
        """
        ...

    @abstractmethod
    def rename_section(
        self, section: str, new_name: str, *, scope: ConfigScope = "default"
    ) -> None:
        """Rename a section in place.

        Raises:
            CommandError: If the section does not exist
        """
        ...

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def get(self, key: str, *, scope: ConfigScope = "default") -> str | None:
        """Get the last value of a key, or None when git returns nothing.

        Missing keys and invalid keys both read as None.
        """
        ...

    @abstractmethod
    def get_all(self, key: str, *, scope: ConfigScope = "default") -> list[str]:
        """Get every value of a key in order, or [] when there are none."""
        ...

    @abstractmethod
    def get_regex(self, pattern: str, *, scope: ConfigScope = "default") -> dict[str, list[str]]:
        """Get all keys matching a regular expression.

        Returns:
            Mapping of matched key to its values in the order git printed
            them; {} when nothing matches
        """
        ...

    @abstractmethod
    def subsections(self, section: str, *, scope: ConfigScope = "default") -> list[str]:
        """List subsection names of a section, e.g. remote names for "remote"."""
        ...

    @abstractmethod
    def section_exists(self, section: str, *, scope: ConfigScope = "default") -> bool:
        """Check whether any key lives under the section."""
        ...

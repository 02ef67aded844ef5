"""Dry-run wrapper for git configuration operations."""

from collections.abc import Sequence

from gitconf.gateway.git.config_ops.abc import GitConfigOps
from gitconf.gateway.git.config_ops.types import ConfigScope, as_value_list


class DryRunGitConfigOps(GitConfigOps):
    """No-op wrapper that prevents execution of destructive operations.

    Mutations are no-ops that return what they would have written or removed.
    Query operations delegate to the wrapped implementation.
    """

    def __init__(self, wrapped: GitConfigOps) -> None:
        """Create a dry-run wrapper around a GitConfigOps implementation."""
        self._wrapped = wrapped

    # ============================================================================
    # Mutation Operations (no-ops in dry-run mode)
    # ============================================================================

    def set(
        self,
        key: str,
        values: str | Sequence[str],
        *,
        scope: ConfigScope = "default",
        add: bool = False,
        unique: bool = False,
    ) -> list[str]:
        """No-op for set in dry-run mode."""
        to_write = as_value_list(values)
        if add and unique:
            current = self._wrapped.get_all(key, scope=scope)
            return [value for value in to_write if value not in current]
        return to_write

    def add(
        self,
        key: str,
        values: str | Sequence[str],
        *,
        scope: ConfigScope = "default",
        unique: bool = False,
    ) -> list[str]:
        """No-op for add in dry-run mode."""
        return self.set(key, values, scope=scope, add=True, unique=unique)

    def unset(self, key: str, *, scope: ConfigScope = "default") -> None:
        """No-op for unset in dry-run mode."""

    def unset_matching(
        self, key: str, values: str | Sequence[str], *, scope: ConfigScope = "default"
    ) -> list[str]:
        """No-op for unset_matching in dry-run mode."""
        current = self._wrapped.get_all(key, scope=scope)
        return [value for value in as_value_list(values) if value in current]

    def remove_section(self, section: str, *, scope: ConfigScope = "default") -> None:
        """No-op for remove_section in dry-run mode."""

    def rename_section(
        self, section: str, new_name: str, *, scope: ConfigScope = "default"
    ) -> None:
        """No-op for rename_section in dry-run mode."""

    # ============================================================================
    # Query Operations (delegate to wrapped implementation)
    # ============================================================================

    def get(self, key: str, *, scope: ConfigScope = "default") -> str | None:
        """Query operation (read-only, delegates to wrapped)."""
        return self._wrapped.get(key, scope=scope)

    def get_all(self, key: str, *, scope: ConfigScope = "default") -> list[str]:
        """Query operation (read-only, delegates to wrapped)."""
        return self._wrapped.get_all(key, scope=scope)

    def get_regex(self, pattern: str, *, scope: ConfigScope = "default") -> dict[str, list[str]]:
        """Query operation (read-only, delegates to wrapped)."""
        return self._wrapped.get_regex(pattern, scope=scope)

    def subsections(self, section: str, *, scope: ConfigScope = "default") -> list[str]:
        """Query operation (read-only, delegates to wrapped)."""
        return self._wrapped.subsections(section, scope=scope)

    def section_exists(self, section: str, *, scope: ConfigScope = "default") -> bool:
        """Query operation (read-only, delegates to wrapped)."""
        return self._wrapped.section_exists(section, scope=scope)

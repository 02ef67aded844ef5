"""Printing wrapper for git configuration operations."""

from collections.abc import Sequence

from gitconf.gateway.git.config_ops.abc import GitConfigOps
from gitconf.gateway.git.config_ops.parsing import exact_value_pattern
from gitconf.gateway.git.config_ops.types import ConfigScope, scope_flags
from gitconf.printing.base import PrintingBase


def _git_config(scope: ConfigScope, *args: str) -> str:
    return " ".join(["git", "config", *scope_flags(scope), *args])


class PrintingGitConfigOps(PrintingBase, GitConfigOps):
    """Wrapper that prints operations before delegating.

    Mutation operations print styled output before delegating.
    Query operations delegate without printing.

    Usage:
        # For production
        printing_ops = PrintingGitConfigOps(real_ops, script_mode=False, dry_run=False)

        # For dry-run
        noop_inner = DryRunGitConfigOps(real_ops)
        printing_ops = PrintingGitConfigOps(noop_inner, script_mode=False, dry_run=True)
    """

    # Inherits __init__, _emit, and _format_command from PrintingBase

    # ============================================================================
    # Mutation Operations (print before delegating)
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
        """Set with printed output."""
        if not add:
            self._emit(self._format_command(_git_config(scope, "--unset-all", key)))
        written = self._wrapped.set(key, values, scope=scope, add=add, unique=unique)
        for value in written:
            self._emit(self._format_command(_git_config(scope, "--add", key, value)))
        return written

    def add(
        self,
        key: str,
        values: str | Sequence[str],
        *,
        scope: ConfigScope = "default",
        unique: bool = False,
    ) -> list[str]:
        """Add with printed output."""
        return self.set(key, values, scope=scope, add=True, unique=unique)

    def unset(self, key: str, *, scope: ConfigScope = "default") -> None:
        """Unset with printed output."""
        self._emit(self._format_command(_git_config(scope, "--unset-all", key)))
        self._wrapped.unset(key, scope=scope)

    def unset_matching(
        self, key: str, values: str | Sequence[str], *, scope: ConfigScope = "default"
    ) -> list[str]:
        """Unset matching values with printed output."""
        removed = self._wrapped.unset_matching(key, values, scope=scope)
        for value in removed:
            pattern = exact_value_pattern(value)
            self._emit(self._format_command(_git_config(scope, "--unset-all", key, pattern)))
        return removed

    def remove_section(self, section: str, *, scope: ConfigScope = "default") -> None:
        """Remove section with printed output."""
        self._emit(self._format_command(_git_config(scope, "--remove-section", section)))
        self._wrapped.remove_section(section, scope=scope)

    def rename_section(
        self, section: str, new_name: str, *, scope: ConfigScope = "default"
    ) -> None:
        """Rename section with printed output."""
        self._emit(
            self._format_command(_git_config(scope, "--rename-section", section, new_name))
        )
        self._wrapped.rename_section(section, new_name, scope=scope)

    # ============================================================================
    # Query Operations (delegate without printing)
    # ============================================================================

    def get(self, key: str, *, scope: ConfigScope = "default") -> str | None:
        """Query operation (read-only, no printing)."""
        return self._wrapped.get(key, scope=scope)

    def get_all(self, key: str, *, scope: ConfigScope = "default") -> list[str]:
        """Query operation (read-only, no printing)."""
        return self._wrapped.get_all(key, scope=scope)

    def get_regex(self, pattern: str, *, scope: ConfigScope = "default") -> dict[str, list[str]]:
        """Query operation (read-only, no printing)."""
        return self._wrapped.get_regex(pattern, scope=scope)

    def subsections(self, section: str, *, scope: ConfigScope = "default") -> list[str]:
        """Query operation (read-only, no printing)."""
        return self._wrapped.subsections(section, scope=scope)

    def section_exists(self, section: str, *, scope: ConfigScope = "default") -> bool:
        """Query operation (read-only, no printing)."""
        return self._wrapped.section_exists(section, scope=scope)

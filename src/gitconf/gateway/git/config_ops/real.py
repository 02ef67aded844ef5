"""Real implementation of git configuration operations."""

import logging
from collections.abc import Sequence

from gitconf.gateway.git.config_ops.abc import GitConfigOps
from gitconf.gateway.git.config_ops.parsing import (
    exact_value_pattern,
    parse_regex_output,
    section_pattern,
    subsection_names,
)
from gitconf.gateway.git.config_ops.types import ConfigScope, as_value_list, scope_flags
from gitconf.gateway.process.abc import ProcessRunner
from gitconf.gateway.process.types import CommandError, strip_trailing_newlines

logger = logging.getLogger(__name__)

# git config exits 5 when asked to unset a key that has no values
_EXIT_NOTHING_TO_UNSET = 5


class RealGitConfigOps(GitConfigOps):
    """Git configuration operations implemented as ``git config`` invocations."""

    def __init__(self, runner: ProcessRunner) -> None:
        """Create RealGitConfigOps.

        Args:
            runner: Process runner invoking git
        """
        self._runner = runner

    # ============================================================================
    # Mutation Operations
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
        """Write values for a key, replacing or appending."""
        to_write = as_value_list(values)
        flags = scope_flags(scope)

        if not add:
            self._clear_for_replace(key, flags)
        elif unique:
            current = self.get_all(key, scope=scope)
            to_write = [value for value in to_write if value not in current]

        for value in to_write:
            self._runner.exec("config", flags, "--add", key, value)

        return to_write

    def add(
        self,
        key: str,
        values: str | Sequence[str],
        *,
        scope: ConfigScope = "default",
        unique: bool = False,
    ) -> list[str]:
        """Append values for a key."""
        return self.set(key, values, scope=scope, add=True, unique=unique)

    def unset(self, key: str, *, scope: ConfigScope = "default") -> None:
        """Remove every value of a key."""
        self._runner.exec("config", "--unset-all", scope_flags(scope), key)

    def unset_matching(
        self, key: str, values: str | Sequence[str], *, scope: ConfigScope = "default"
    ) -> list[str]:
        """Remove exactly the given values of a key."""
        flags = scope_flags(scope)
        current = self.get_all(key, scope=scope)
        to_remove = [value for value in as_value_list(values) if value in current]

        for value in to_remove:
            self._runner.exec("config", "--unset-all", flags, key, exact_value_pattern(value))

        return to_remove

    def remove_section(self, section: str, *, scope: ConfigScope = "default") -> None:
        """Remove a whole section."""
        self._runner.exec("config", "--remove-section", scope_flags(scope), section)

    def rename_section(
        self, section: str, new_name: str, *, scope: ConfigScope = "default"
    ) -> None:
        """Rename a section."""
        self._runner.exec("config", "--rename-section", scope_flags(scope), section, new_name)

    # ============================================================================
    # Query Operations
    # ============================================================================

    def get(self, key: str, *, scope: ConfigScope = "default") -> str | None:
        """Get the last value of a key."""
        return self._read("config", scope_flags(scope), key)

    def get_all(self, key: str, *, scope: ConfigScope = "default") -> list[str]:
        """Get every value of a key."""
        output = self._read("config", scope_flags(scope), "--get-all", key)
        if output is None:
            return []
        return output.split("\n")

    def get_regex(self, pattern: str, *, scope: ConfigScope = "default") -> dict[str, list[str]]:
        """Get all keys matching a pattern."""
        output = self._read("config", scope_flags(scope), "--get-regexp", pattern)
        if output is None:
            return {}
        return parse_regex_output(output)

    def subsections(self, section: str, *, scope: ConfigScope = "default") -> list[str]:
        """List subsection names of a section."""
        matched = self.get_regex(section_pattern(section), scope=scope)
        return subsection_names(section, matched)

    def section_exists(self, section: str, *, scope: ConfigScope = "default") -> bool:
        """Check whether any key lives under the section."""
        return bool(self.get_regex(section_pattern(section), scope=scope))

    def _clear_for_replace(self, key: str, flags: list[str]) -> None:
        """Remove every value of a key before rewriting it.

        A key with no values is not an error here. Any other failure (a locked
        or unparseable config file) is raised before anything is written.
        """
        args = ("config", "--unset-all", flags, key)
        result = self._runner.run(*args)
        if result.exit_status == _EXIT_NOTHING_TO_UNSET:
            logger.debug("No existing values to clear for %s", key)
            return
        if not result.succeeded:
            raise CommandError(
                exit_status=result.exit_status,
                command=self._runner.describe(*args),
                stdout=strip_trailing_newlines(result.stdout),
                stderr=strip_trailing_newlines(result.stderr),
            )

    def _read(self, *args: str | list[str]) -> str | None:
        """Run a lookup; a non-zero exit means there is nothing to read."""
        result = self._runner.run(*args)
        if not result.succeeded:
            logger.debug(
                "git config lookup found nothing (exit status %d)", result.exit_status
            )
            return None
        return strip_trailing_newlines(result.stdout)

"""Fake implementation of git configuration operations for testing."""

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from gitconf.gateway.git.config_ops.abc import GitConfigOps
from gitconf.gateway.git.config_ops.parsing import section_pattern, subsection_names
from gitconf.gateway.git.config_ops.types import ConfigScope, as_value_list, scope_flags
from gitconf.gateway.process.types import CommandError, format_command

# Exit statuses git config uses for the failures the fake reproduces
_EXIT_NOTHING_TO_UNSET = 5
_EXIT_NO_SUCH_SECTION = 128


@dataclass(frozen=True)
class ConfigSetRecord:
    """Record of a single value written by set/add."""

    key: str
    value: str
    scope: ConfigScope


@dataclass(frozen=True)
class ConfigUnsetRecord:
    """Record of an unset or unset_matching operation."""

    key: str
    values: tuple[str, ...] | None
    scope: ConfigScope


class FakeGitConfigOps(GitConfigOps):
    """In-memory fake implementation for testing.

    Holds a "local" and a "global" file, each an ordered key -> values mapping.
    Default-scope reads see global values followed by local values (so the
    local value wins for ``get``); default-scope writes go to the local file.

    Constructor Injection: pre-configured state passed via constructor.
    Mutation Tracking: tracks writes, unsets and section changes for test assertions.
    """

    def __init__(
        self,
        *,
        local_values: Mapping[str, Sequence[str]] | None = None,
        global_values: Mapping[str, Sequence[str]] | None = None,
    ) -> None:
        """Create FakeGitConfigOps with pre-configured state.

        Args:
            local_values: Mapping of key -> values in the repository file
            global_values: Mapping of key -> values in the user's global file
        """
        self._files: dict[str, dict[str, list[str]]] = {
            "local": _copy_values(local_values),
            "global": _copy_values(global_values),
        }

        # Mutation tracking
        self._config_sets: list[ConfigSetRecord] = []
        self._unsets: list[ConfigUnsetRecord] = []
        self._removed_sections: list[str] = []
        self._renamed_sections: list[tuple[str, str]] = []

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
        target = self._file_for_write(scope)

        if not add:
            target.pop(key, None)
        elif unique:
            current = self.get_all(key, scope=scope)
            to_write = [value for value in to_write if value not in current]

        for value in to_write:
            target.setdefault(key, []).append(value)
            self._config_sets.append(ConfigSetRecord(key=key, value=value, scope=scope))

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
        target = self._file_for_write(scope)
        if not target.get(key):
            raise _config_error(_EXIT_NOTHING_TO_UNSET, scope, "--unset-all", key)
        del target[key]
        self._unsets.append(ConfigUnsetRecord(key=key, values=None, scope=scope))

    def unset_matching(
        self, key: str, values: str | Sequence[str], *, scope: ConfigScope = "default"
    ) -> list[str]:
        """Remove exactly the given values of a key."""
        current = self.get_all(key, scope=scope)
        to_remove = [value for value in as_value_list(values) if value in current]
        target = self._file_for_write(scope)

        for value in to_remove:
            existing = target.get(key, [])
            if value not in existing:
                raise _config_error(_EXIT_NOTHING_TO_UNSET, scope, "--unset-all", key, value)
            remaining = [item for item in existing if item != value]
            if remaining:
                target[key] = remaining
            else:
                del target[key]

        if to_remove:
            self._unsets.append(
                ConfigUnsetRecord(key=key, values=tuple(to_remove), scope=scope)
            )
        return to_remove

    def remove_section(self, section: str, *, scope: ConfigScope = "default") -> None:
        """Remove a whole section."""
        target = self._file_for_write(scope)
        keys = _keys_in_section(target, section)
        if not keys:
            raise _config_error(
                _EXIT_NO_SUCH_SECTION,
                scope,
                "--remove-section",
                section,
                stderr=f"fatal: no such section: {section}",
            )
        for key in keys:
            del target[key]
        self._removed_sections.append(section)

    def rename_section(
        self, section: str, new_name: str, *, scope: ConfigScope = "default"
    ) -> None:
        """Rename a section, keeping key order."""
        target = self._file_for_write(scope)
        if not _keys_in_section(target, section):
            raise _config_error(
                _EXIT_NO_SUCH_SECTION,
                scope,
                "--rename-section",
                section,
                new_name,
                stderr=f"fatal: no such section: {section}",
            )
        renamed: dict[str, list[str]] = {}
        for key, key_values in target.items():
            key_section, _, leaf = key.rpartition(".")
            if key_section == section:
                key = f"{new_name}.{leaf}"
            renamed.setdefault(key, []).extend(key_values)
        target.clear()
        target.update(renamed)
        self._renamed_sections.append((section, new_name))

    # ============================================================================
    # Query Operations
    # ============================================================================

    def get(self, key: str, *, scope: ConfigScope = "default") -> str | None:
        """Get the last value of a key."""
        values = self.get_all(key, scope=scope)
        if not values:
            return None
        return values[-1]

    def get_all(self, key: str, *, scope: ConfigScope = "default") -> list[str]:
        """Get every value of a key."""
        values: list[str] = []
        for config_file in self._files_for_read(scope):
            values.extend(config_file.get(key, []))
        return values

    def get_regex(self, pattern: str, *, scope: ConfigScope = "default") -> dict[str, list[str]]:
        """Get all keys matching a pattern."""
        try:
            compiled = re.compile(pattern)
        except re.error:
            # git exits non-zero for an invalid pattern, which reads as no match
            return {}
        matched: dict[str, list[str]] = {}
        for config_file in self._files_for_read(scope):
            for key, values in config_file.items():
                if compiled.search(key):
                    matched.setdefault(key, []).extend(values)
        return matched

    def subsections(self, section: str, *, scope: ConfigScope = "default") -> list[str]:
        """List subsection names of a section."""
        return subsection_names(section, self.get_regex(section_pattern(section), scope=scope))

    def section_exists(self, section: str, *, scope: ConfigScope = "default") -> bool:
        """Check whether any key lives under the section."""
        return bool(self.get_regex(section_pattern(section), scope=scope))

    def _files_for_read(self, scope: ConfigScope) -> list[dict[str, list[str]]]:
        if scope == "default":
            return [self._files["global"], self._files["local"]]
        return [self._files[scope]]

    def _file_for_write(self, scope: ConfigScope) -> dict[str, list[str]]:
        if scope == "default":
            return self._files["local"]
        return self._files[scope]

    # ============================================================================
    # State Inspection and Mutation Tracking Properties
    # ============================================================================

    def values_in(self, scope: ConfigScope) -> dict[str, list[str]]:
        """Snapshot of one file's contents ("default" reads as "local")."""
        return _copy_values(self._file_for_write(scope))

    @property
    def config_sets(self) -> list[ConfigSetRecord]:
        """Read-only access to written values for test assertions."""
        return list(self._config_sets)

    @property
    def unsets(self) -> list[ConfigUnsetRecord]:
        """Read-only access to unset operations for test assertions."""
        return list(self._unsets)

    @property
    def removed_sections(self) -> list[str]:
        """Read-only access to removed sections for test assertions."""
        return list(self._removed_sections)

    @property
    def renamed_sections(self) -> list[tuple[str, str]]:
        """Read-only access to (old, new) section renames for test assertions."""
        return list(self._renamed_sections)


def _copy_values(values: Mapping[str, Sequence[str]] | None) -> dict[str, list[str]]:
    if values is None:
        return {}
    return {key: list(key_values) for key, key_values in values.items()}


def _keys_in_section(config_file: Mapping[str, Sequence[str]], section: str) -> list[str]:
    return [key for key in config_file if key.rpartition(".")[0] == section]


def _config_error(
    exit_status: int, scope: ConfigScope, *args: str, stderr: str = ""
) -> CommandError:
    return CommandError(
        exit_status=exit_status,
        command=format_command(["git", "config", *args[:1], *scope_flags(scope), *args[1:]]),
        stdout="",
        stderr=stderr,
    )

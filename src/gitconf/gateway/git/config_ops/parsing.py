"""Parsing helpers for git config command output and patterns."""

from collections.abc import Iterable

# Characters with special meaning in a POSIX extended regular expression
_ERE_SPECIAL = frozenset("\\.[]()*+?{}|^$")


def ere_escape(text: str) -> str:
    """Escape text so git's POSIX ERE matcher treats it literally."""
    return "".join(f"\\{char}" if char in _ERE_SPECIAL else char for char in text)


def exact_value_pattern(value: str) -> str:
    """Value pattern matching exactly ``value``, not values containing it."""
    return f"^{ere_escape(value)}$"


def section_pattern(section: str) -> str:
    """Key pattern matching every key inside ``section``."""
    return f"^{ere_escape(section)}\\."


def parse_regex_output(output: str) -> dict[str, list[str]]:
    """Parse ``git config --get-regexp`` output into key -> values.

    Each line is ``key value``, split at the first space. Keys may repeat;
    their values are collected in the order the lines appear. A line with no
    space is a valueless (boolean) key and maps to an empty string.
    """
    parsed: dict[str, list[str]] = {}
    for line in output.split("\n"):
        if not line:
            continue
        key, _, value = line.partition(" ")
        parsed.setdefault(key, []).append(value)
    return parsed


def subsection_names(section: str, keys: Iterable[str]) -> list[str]:
    """Derive subsection names from full keys inside ``section``.

    ``remote.origin.url`` inside ``remote`` gives ``origin``. A subsection is
    listed once however many keys it holds, in first-seen order. Keys that sit
    directly in the section (``remote.name``) have no subsection and are skipped.
    """
    names: list[str] = []
    prefix_length = len(section) + 1
    for key in keys:
        remainder = key[prefix_length:]
        subsection, dot, _leaf = remainder.rpartition(".")
        if not dot:
            continue
        if subsection not in names:
            names.append(subsection)
    return names

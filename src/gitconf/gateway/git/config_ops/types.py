"""Types shared by git configuration gateways."""

from collections.abc import Sequence
from typing import Literal

# Which configuration file an operation targets. "default" passes no flag and
# lets git resolve it: all files for reads (most specific wins), the
# repository file for writes.
ConfigScope = Literal["default", "local", "global"]

SCOPE_FLAGS: dict[str, list[str]] = {
    "default": [],
    "local": ["--local"],
    "global": ["--global"],
}


def scope_flags(scope: ConfigScope) -> list[str]:
    """Map a scope to the git config command-line flags selecting it."""
    if scope not in SCOPE_FLAGS:
        raise ValueError(f"Unknown config scope: {scope!r}")
    return list(SCOPE_FLAGS[scope])


def as_value_list(values: str | Sequence[str]) -> list[str]:
    """A single value is a one-element list."""
    if isinstance(values, str):
        return [values]
    return list(values)

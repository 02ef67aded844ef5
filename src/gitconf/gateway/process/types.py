"""Value objects and errors for external process invocation."""

from collections.abc import Sequence
from dataclasses import dataclass

# An argument group is a single argument or any nesting of lists/tuples of them.
# None entries are dropped, which lets callers pass optional flags inline.
ArgGroup = str | Sequence["ArgGroup"] | None


def flatten_args(*args: ArgGroup) -> list[str]:
    """Flatten nested argument groups into a single ordered argv list.

    Example:
        >>> flatten_args("config", ["--global", None], ("--get-all",), "user.name")
        ['config', '--global', '--get-all', 'user.name']
    """
    flat: list[str] = []
    for arg in args:
        if arg is None:
            continue
        if isinstance(arg, str):
            flat.append(arg)
            continue
        flat.extend(flatten_args(*arg))
    return flat


def format_command(argv: Sequence[str]) -> str:
    """Render an argv list for humans, each argument single-quoted."""
    return " ".join(f"'{arg}'" for arg in argv)


def strip_trailing_newlines(text: str) -> str:
    """Drop the single line terminator a command prints after its last line.

    Only one is removed: a further newline belongs to the output itself, e.g.
    an empty last value in ``git config --get-all``.
    """
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a finished process. The exit status is data, not an error."""

    exit_status: int
    stdout: str
    stderr: str

    @property
    def succeeded(self) -> bool:
        return self.exit_status == 0


class CommandError(RuntimeError):
    """The command ran but exited non-zero where success was required."""

    def __init__(self, *, exit_status: int, command: str, stdout: str, stderr: str) -> None:
        self.exit_status = exit_status
        self.command = command
        self.stdout = stdout
        self.stderr = stderr
        message = f"Command {command} failed with exit status {exit_status}"
        if stderr:
            message = f"{message}: {stderr}"
        super().__init__(message)


class InvocationError(RuntimeError):
    """The executable could not be started at all (e.g. it is not installed)."""

    def __init__(self, *, command: str, message: str) -> None:
        self.command = command
        self.message = message
        super().__init__(f"Failed to start {command}: {message}")

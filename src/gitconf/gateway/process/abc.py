"""Abstract interface for invoking the external git executable."""

from abc import ABC, abstractmethod
from concurrent.futures import Future

from gitconf.gateway.process.types import (
    ArgGroup,
    CommandError,
    CommandResult,
    flatten_args,
    format_command,
    strip_trailing_newlines,
)


class ProcessRunner(ABC):
    """Abstract interface for running an external command.

    This is the only boundary between gitconf and the outside world: every
    gateway builds its operations out of these calls, so tests substitute a
    fake runner instead of spawning subprocesses.

    Implementations provide ``run`` and ``stream``. ``exec`` and
    ``exec_succeeded`` are defined here on top of ``run`` so the
    "must succeed" and "is it true" contracts are identical everywhere.
    """

    @property
    @abstractmethod
    def executable(self) -> str:
        """Name or path of the executable every call invokes."""
        ...

    @abstractmethod
    def run(self, *args: ArgGroup) -> CommandResult:
        """Run the command synchronously and report its outcome as data.

        Args:
            *args: Argument groups, flattened in order before invocation

        Returns:
            CommandResult with the exit status and raw captured output

        Raises:
            InvocationError: If the executable could not be started
        """
        ...

    @abstractmethod
    def stream(self, *args: ArgGroup) -> Future[None]:
        """Start the command without blocking, piping its output live.

        The child's stdout and stderr are forwarded to this process's stdout
        and stderr as they arrive. There is no timeout and no cancellation.

        Returns:
            Future that resolves to None on exit status 0, or fails with
            CommandError (non-zero exit) or InvocationError (spawn failure)
        """
        ...

    def exec(self, *args: ArgGroup) -> str:
        """Run the command, requiring success.

        Returns:
            stdout with the trailing newline removed

        Raises:
            CommandError: If the command exits non-zero
            InvocationError: If the executable could not be started
        """
        result = self.run(*args)
        if not result.succeeded:
            raise CommandError(
                exit_status=result.exit_status,
                command=self.describe(*args),
                stdout=strip_trailing_newlines(result.stdout),
                stderr=strip_trailing_newlines(result.stderr),
            )
        return strip_trailing_newlines(result.stdout)

    def exec_succeeded(self, *args: ArgGroup) -> bool:
        """Run the command and report whether it exited 0, discarding output."""
        return self.run(*args).succeeded

    def describe(self, *args: ArgGroup) -> str:
        """Human-readable command line for error messages and logs."""
        return format_command([self.executable, *flatten_args(*args)])

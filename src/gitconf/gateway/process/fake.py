"""Fake process runner for testing gateways without spawning subprocesses."""

import sys
from collections.abc import Callable, Mapping
from concurrent.futures import Future

from gitconf.gateway.process.abc import ProcessRunner
from gitconf.gateway.process.types import (
    ArgGroup,
    CommandError,
    CommandResult,
    InvocationError,
    flatten_args,
    strip_trailing_newlines,
)


def ok(stdout: str = "") -> CommandResult:
    """Successful result, with stdout as git would print it."""
    return CommandResult(exit_status=0, stdout=stdout, stderr="")


def failed(exit_status: int = 1, stderr: str = "") -> CommandResult:
    """Failed result with the given exit status."""
    return CommandResult(exit_status=exit_status, stdout="", stderr=stderr)


class FakeProcessRunner(ProcessRunner):
    """Scripted runner.

    Constructor Injection: responses are configured up front, keyed by the
    flattened argv (without the executable). A handler can compute responses
    for argv lists not found in the mapping; anything else gets default_result.
    Mutation Tracking: every invocation is recorded in ``calls``.
    """

    def __init__(
        self,
        *,
        results: Mapping[tuple[str, ...], CommandResult] | None = None,
        handler: Callable[[list[str]], CommandResult] | None = None,
        default_result: CommandResult | None = None,
        executable: str = "git",
        executable_missing: bool = False,
    ) -> None:
        self._results = dict(results) if results is not None else {}
        self._handler = handler
        self._default_result = default_result if default_result is not None else ok()
        self._executable = executable
        self._executable_missing = executable_missing

        self._calls: list[list[str]] = []
        self._stream_calls: list[list[str]] = []

    @property
    def executable(self) -> str:
        return self._executable

    def run(self, *args: ArgGroup) -> CommandResult:
        argv = flatten_args(*args)
        self._calls.append(argv)
        if self._executable_missing:
            raise InvocationError(
                command=self.describe(argv), message="No such file or directory"
            )
        return self._respond(argv)

    def stream(self, *args: ArgGroup) -> Future[None]:
        argv = flatten_args(*args)
        self._stream_calls.append(argv)

        future: Future[None] = Future()
        future.set_running_or_notify_cancel()
        if self._executable_missing:
            future.set_exception(
                InvocationError(command=self.describe(argv), message="No such file or directory")
            )
            return future

        result = self._respond(argv)
        sys.stdout.write(result.stdout)
        sys.stderr.write(result.stderr)
        if not result.succeeded:
            future.set_exception(
                CommandError(
                    exit_status=result.exit_status,
                    command=self.describe(argv),
                    stdout="",
                    stderr=strip_trailing_newlines(result.stderr),
                )
            )
            return future
        future.set_result(None)
        return future

    def _respond(self, argv: list[str]) -> CommandResult:
        key = tuple(argv)
        if key in self._results:
            return self._results[key]
        if self._handler is not None:
            return self._handler(argv)
        return self._default_result

    # ============================================================================
    # Mutation Tracking Properties
    # ============================================================================

    @property
    def calls(self) -> list[list[str]]:
        """Argv (without executable) of every run, in order."""
        return [list(call) for call in self._calls]

    @property
    def stream_calls(self) -> list[list[str]]:
        """Argv (without executable) of every stream, in order."""
        return [list(call) for call in self._stream_calls]

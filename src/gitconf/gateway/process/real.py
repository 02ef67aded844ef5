"""Production process runner using subprocess."""

import logging
import subprocess
import sys
import threading
from collections.abc import Mapping
from concurrent.futures import Future
from pathlib import Path
from typing import IO

from gitconf.gateway.process.abc import ProcessRunner
from gitconf.gateway.process.types import (
    ArgGroup,
    CommandError,
    CommandResult,
    InvocationError,
    flatten_args,
    strip_trailing_newlines,
)

logger = logging.getLogger(__name__)


class RealProcessRunner(ProcessRunner):
    """Runs the executable as a child process in a fixed working directory."""

    def __init__(
        self,
        executable: str = "git",
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        """Create a runner.

        Args:
            executable: Command to invoke, resolved via PATH
            cwd: Working directory for every invocation (None: inherit)
            env: Full environment for the child (None: inherit)
        """
        self._executable = executable
        self._cwd = cwd
        self._env = dict(env) if env is not None else None

    @property
    def executable(self) -> str:
        return self._executable

    def run(self, *args: ArgGroup) -> CommandResult:
        argv = [self._executable, *flatten_args(*args)]
        logger.debug("git.run: %s", argv)

        try:
            result = subprocess.run(
                argv,
                cwd=self._cwd,
                env=self._env,
                capture_output=True,
                text=True,
                encoding="utf-8",
                # Config values and paths are not guaranteed to be UTF-8
                errors="surrogateescape",
                check=False,
            )
        except OSError as e:
            raise InvocationError(command=self.describe(*args), message=str(e)) from e

        if result.returncode != 0:
            logger.debug(
                "git.run: exit status %d: %s",
                result.returncode,
                strip_trailing_newlines(result.stderr),
            )
        return CommandResult(
            exit_status=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )

    def stream(self, *args: ArgGroup) -> Future[None]:
        argv = [self._executable, *flatten_args(*args)]
        command = self.describe(*args)
        logger.debug("git.stream: %s", argv)

        future: Future[None] = Future()
        future.set_running_or_notify_cancel()

        try:
            # Binary pipes: output is forwarded byte for byte, whatever its encoding
            process = subprocess.Popen(
                argv,
                cwd=self._cwd,
                env=self._env,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as e:
            future.set_exception(InvocationError(command=command, message=str(e)))
            return future

        # Resolved at call time so redirected/captured streams are honoured
        stdout_sink = sys.stdout
        stderr_sink = sys.stderr
        stderr_buffer: list[bytes] = []

        pumps = [
            threading.Thread(
                target=_pump, args=(process.stdout, stdout_sink, None), daemon=True
            ),
            threading.Thread(
                target=_pump, args=(process.stderr, stderr_sink, stderr_buffer), daemon=True
            ),
        ]
        for pump in pumps:
            pump.start()

        def supervise() -> None:
            exit_status = process.wait()
            for pump in pumps:
                pump.join()
            logger.debug("git.stream: %s exited with status %d", command, exit_status)
            if exit_status != 0:
                stderr = b"".join(stderr_buffer).decode("utf-8", errors="replace")
                future.set_exception(
                    CommandError(
                        exit_status=exit_status,
                        command=command,
                        stdout="",
                        stderr=strip_trailing_newlines(stderr),
                    )
                )
                return
            future.set_result(None)

        threading.Thread(target=supervise, daemon=True).start()
        return future


def _pump(source: IO[bytes] | None, sink: IO[str], buffer: list[bytes] | None) -> None:
    """Copy a child's pipe to a sink line by line, optionally keeping a copy.

    The pipe is always read to EOF. If the sink stops accepting writes the
    remaining output is discarded, so the child never blocks on a full pipe.
    """
    if source is None:
        return
    sink_open = True
    with source:
        for line in source:
            if buffer is not None:
                buffer.append(line)
            if not sink_open:
                continue
            try:
                _write_bytes(sink, line)
            except (OSError, ValueError) as e:
                logger.debug("git.stream: output sink failed, discarding the rest: %s", e)
                sink_open = False


def _write_bytes(sink: IO[str], data: bytes) -> None:
    binary = getattr(sink, "buffer", None)
    if binary is not None:
        # Text written earlier must land before these bytes
        sink.flush()
        binary.write(data)
        binary.flush()
        return
    sink.write(data.decode("utf-8", errors="replace"))
    sink.flush()

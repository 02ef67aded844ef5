"""User-facing CLI errors."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import IO, Any

import click

from gitconf.gateway.process.types import CommandError, InvocationError


class UserFacingCliError(click.ClickException):
    """Expected failure shown to the user as a red one-line error, exit status 1."""

    def show(self, file: IO[Any] | None = None) -> None:
        click.echo(click.style("Error: ", fg="red") + self.format_message(), err=True)


@contextmanager
def git_errors_as_user_errors() -> Iterator[None]:
    """Report git failures as user-facing errors instead of tracebacks."""
    try:
        yield
    except CommandError as e:
        message = e.stderr if e.stderr else str(e)
        raise UserFacingCliError(message) from e
    except InvocationError as e:
        raise UserFacingCliError(str(e)) from e

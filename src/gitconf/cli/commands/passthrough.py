"""Run an arbitrary git command with live output."""

import click

from gitconf.cli.helpers import require_context
from gitconf.gateway.process.types import CommandError


@click.command(
    "git",
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED, required=True)
@click.pass_context
def git_cmd(ctx: click.Context, args: tuple[str, ...]) -> None:
    """Run git ARGS in the working directory, streaming its output.

    Exits with git's own exit status.
    """
    completion = require_context(ctx).runner.stream(list(args))
    try:
        completion.result()
    except CommandError as e:
        # git has already written its error output to our stderr
        raise SystemExit(e.exit_status) from e

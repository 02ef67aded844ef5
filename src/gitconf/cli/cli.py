import logging
from pathlib import Path
from typing import Any

import click

from gitconf.cli.commands.branch import branch_group
from gitconf.cli.commands.config import config_group
from gitconf.cli.commands.passthrough import git_cmd
from gitconf.cli.commands.status import status_cmd
from gitconf.cli.ensure import git_errors_as_user_errors
from gitconf.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


class GitconfGroup(click.Group):
    """Command group reporting git failures as user-facing errors."""

    def invoke(self, ctx: click.Context) -> Any:
        with git_errors_as_user_errors():
            return super().invoke(ctx)


@click.group(cls=GitconfGroup, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="gitconf")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--dry-run", is_flag=True, help="Print config changes without making them")
@click.option("-v", "--verbose", is_flag=True, help="Print config changes as they are made")
@click.option(
    "-C",
    "--cwd",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Run as if started in this directory",
)
@click.option(
    "--git",
    "git_executable",
    envvar="GITCONF_GIT",
    default="git",
    show_default=True,
    help="git executable to invoke",
)
@click.pass_context
def cli(
    ctx: click.Context,
    debug: bool,
    dry_run: bool,
    verbose: bool,
    cwd: Path | None,
    git_executable: str,
) -> None:
    """Read and write git configuration from the command line."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(
            cwd=cwd if cwd is not None else Path.cwd(),
            git_executable=git_executable,
            dry_run=dry_run,
            verbose=verbose,
        )


# Register all commands
cli.add_command(branch_group)
cli.add_command(config_group)
cli.add_command(git_cmd)
cli.add_command(status_cmd)


def main() -> None:
    """CLI entry point used by the `gitconf` console script."""
    cli()

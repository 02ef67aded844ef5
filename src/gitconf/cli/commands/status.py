"""Summarize repository state."""

import click

from gitconf.cli.ensure import UserFacingCliError
from gitconf.cli.helpers import require_context


@click.command("status")
@click.pass_context
def status_cmd(ctx: click.Context) -> None:
    """Show the current branch (or detached commit) and whether the index is clean."""
    gitconf_ctx = require_context(ctx)
    repo = gitconf_ctx.repo
    if not repo.in_repo():
        raise UserFacingCliError(f"Not a git repository: {gitconf_ctx.cwd}")

    if repo.is_detached_head():
        head = click.style(f"detached at {repo.describe_hash('HEAD')}", fg="yellow")
    else:
        head = click.style(gitconf_ctx.branch.name(), fg="green", bold=True)
    click.echo(f"HEAD: {head}")

    if repo.is_index_clean():
        click.echo("Working tree: " + click.style("clean", fg="green"))
    else:
        click.echo("Working tree: " + click.style("dirty", fg="red"))

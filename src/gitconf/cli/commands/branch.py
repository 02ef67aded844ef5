"""Inspect local branches."""

import click

from gitconf.cli.helpers import require_context


@click.group("branch")
def branch_group() -> None:
    """Inspect local branches."""


@branch_group.command("list")
@click.pass_context
def branch_list(ctx: click.Context) -> None:
    """List local branches, marking the current one."""
    gitconf_ctx = require_context(ctx)
    current = None
    if not gitconf_ctx.repo.is_detached_head():
        current = gitconf_ctx.branch.name()
    for name in gitconf_ctx.branch.list_branches():
        marker = "*" if name == current else " "
        click.echo(f"{marker} {name}")


@branch_group.command("upstream")
@click.argument("name", default="HEAD")
@click.pass_context
def branch_upstream(ctx: click.Context, name: str) -> None:
    """Print the upstream of branch NAME (default: current). Exits 1 if none."""
    branch = require_context(ctx).branch
    if not branch.has_upstream(name):
        raise SystemExit(1)
    click.echo(branch.upstream(name))

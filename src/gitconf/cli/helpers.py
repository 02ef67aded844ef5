"""Helpers shared by CLI commands."""

from collections.abc import Callable
from typing import Any

import click

from gitconf.core.context import GitconfContext
from gitconf.gateway.git.config_ops.types import ConfigScope


def require_context(ctx: click.Context) -> GitconfContext:
    """Get the GitconfContext created at the CLI entry point."""
    if not isinstance(ctx.obj, GitconfContext):
        raise click.UsageError("gitconf context is not initialized")
    return ctx.obj


def scope_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add mutually exclusive --global/--local flags as a ``scope`` parameter."""
    func = click.option(
        "--local", "scope", flag_value="local", help="Use the repository config file"
    )(func)
    func = click.option(
        "--global", "scope", flag_value="global", help="Use the global (per-user) config file"
    )(func)
    return func


def resolve_scope(scope: str | None) -> ConfigScope:
    """Scope selected on the command line; neither flag means "default"."""
    if scope == "global":
        return "global"
    if scope == "local":
        return "local"
    return "default"

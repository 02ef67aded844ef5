"""Read and write git configuration keys."""

import click

from gitconf.cli.ensure import UserFacingCliError
from gitconf.cli.helpers import require_context, resolve_scope, scope_options


@click.group("config")
def config_group() -> None:
    """Read and write git configuration."""


@config_group.command("get")
@click.argument("key")
@click.option("--all", "all_values", is_flag=True, help="Print every value of the key")
@click.option("--regex", "use_regex", is_flag=True, help="Treat KEY as a pattern over key names")
@scope_options
@click.pass_context
def config_get(
    ctx: click.Context, key: str, all_values: bool, use_regex: bool, scope: str | None
) -> None:
    """Print the value(s) of KEY. Exits 1 when nothing is set."""
    if all_values and use_regex:
        raise UserFacingCliError("--all and --regex cannot be combined")
    config = require_context(ctx).config
    resolved = resolve_scope(scope)

    if use_regex:
        matched = config.get_regex(key, scope=resolved)
        if not matched:
            raise SystemExit(1)
        for matched_key, values in matched.items():
            for value in values:
                click.echo(f"{matched_key} {value}" if value else matched_key)
        return

    if all_values:
        values = config.get_all(key, scope=resolved)
        if not values:
            raise SystemExit(1)
        for value in values:
            click.echo(value)
        return

    value = config.get(key, scope=resolved)
    if value is None:
        raise SystemExit(1)
    click.echo(value)


@config_group.command("set")
@click.argument("key")
@click.argument("values", nargs=-1, required=True)
@click.option("--add", is_flag=True, help="Keep existing values and append")
@click.option("--unique", is_flag=True, help="With --add, skip values already present")
@scope_options
@click.pass_context
def config_set(
    ctx: click.Context,
    key: str,
    values: tuple[str, ...],
    add: bool,
    unique: bool,
    scope: str | None,
) -> None:
    """Set KEY to VALUES, replacing existing values unless --add is given."""
    if unique and not add:
        raise UserFacingCliError("--unique requires --add")
    require_context(ctx).config.set(
        key, list(values), scope=resolve_scope(scope), add=add, unique=unique
    )


@config_group.command("add")
@click.argument("key")
@click.argument("values", nargs=-1, required=True)
@click.option("--unique", is_flag=True, help="Skip values already present")
@scope_options
@click.pass_context
def config_add(
    ctx: click.Context, key: str, values: tuple[str, ...], unique: bool, scope: str | None
) -> None:
    """Append VALUES to KEY."""
    require_context(ctx).config.add(key, list(values), scope=resolve_scope(scope), unique=unique)


@config_group.command("unset")
@click.argument("key")
@scope_options
@click.pass_context
def config_unset(ctx: click.Context, key: str, scope: str | None) -> None:
    """Remove every value of KEY."""
    require_context(ctx).config.unset(key, scope=resolve_scope(scope))


@config_group.command("unset-matching")
@click.argument("key")
@click.argument("values", nargs=-1, required=True)
@scope_options
@click.pass_context
def config_unset_matching(
    ctx: click.Context, key: str, values: tuple[str, ...], scope: str | None
) -> None:
    """Remove the given VALUES of KEY, printing the ones that were present."""
    removed = require_context(ctx).config.unset_matching(
        key, list(values), scope=resolve_scope(scope)
    )
    for value in removed:
        click.echo(value)


@config_group.command("subsections")
@click.argument("section")
@scope_options
@click.pass_context
def config_subsections(ctx: click.Context, section: str, scope: str | None) -> None:
    """List the subsections of SECTION (e.g. remote names for "remote")."""
    for name in require_context(ctx).config.subsections(section, scope=resolve_scope(scope)):
        click.echo(name)


@config_group.command("section-exists")
@click.argument("section")
@scope_options
@click.pass_context
def config_section_exists(ctx: click.Context, section: str, scope: str | None) -> None:
    """Exit 0 if SECTION has any keys, 1 otherwise."""
    if not require_context(ctx).config.section_exists(section, scope=resolve_scope(scope)):
        raise SystemExit(1)


@config_group.command("remove-section")
@click.argument("section")
@scope_options
@click.pass_context
def config_remove_section(ctx: click.Context, section: str, scope: str | None) -> None:
    """Remove SECTION and every key in it."""
    require_context(ctx).config.remove_section(section, scope=resolve_scope(scope))


@config_group.command("rename-section")
@click.argument("section")
@click.argument("new_name")
@scope_options
@click.pass_context
def config_rename_section(
    ctx: click.Context, section: str, new_name: str, scope: str | None
) -> None:
    """Rename SECTION to NEW_NAME."""
    require_context(ctx).config.rename_section(section, new_name, scope=resolve_scope(scope))

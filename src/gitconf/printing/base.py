"""Base class for gateway wrappers that echo operations before running them."""

from typing import Any

import click


class PrintingBase:
    """Shared plumbing for Printing* gateway wrappers.

    Output goes to stderr so stdout stays reserved for command results.
    """

    def __init__(self, wrapped: Any, *, script_mode: bool = False, dry_run: bool = False) -> None:
        """Wrap an implementation.

        Args:
            wrapped: Implementation to delegate to (real or dry-run)
            script_mode: Suppress all printing (output is consumed by scripts)
            dry_run: Mark printed commands as not actually executed
        """
        self._wrapped = wrapped
        self._script_mode = script_mode
        self._dry_run = dry_run

    def _emit(self, message: str) -> None:
        if self._script_mode:
            return
        click.echo(message, err=True)

    def _format_command(self, command: str) -> str:
        styled = click.style(f"  $ {command}", dim=True)
        if self._dry_run:
            return f"{click.style('[DRY RUN]', fg='yellow', bold=True)} {styled}"
        return styled

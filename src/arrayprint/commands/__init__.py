"""Subcommand modules for arrayprint."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from arrayprint.commands.show import array, matrix

    cli.add_command(array)
    cli.add_command(matrix)

"""Commands: print one container at a time."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from arrayprint.commands._base import ArrayCommand

if TYPE_CHECKING:
    from arrayprint.commands._context import AppContext


@click.command(cls=ArrayCommand)
@click.pass_obj
def array(app: AppContext) -> None:
    """Print the 5-element array."""
    app.show(array=True, matrix=False)


@click.command(cls=ArrayCommand)
@click.pass_obj
def matrix(app: AppContext) -> None:
    """Print the 3x3 matrix."""
    app.show(array=False, matrix=True)

"""Rich table renderers for the Sequence and the Grid.

Used only for ``--table`` output.  The default plain format is produced
by :mod:`arrayprint.output.formatters` and never passes through Rich.
Tables expand to the console width, which comes from ``[output] table_width``.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

if TYPE_CHECKING:
    from arrayprint.domain.containers import Grid, Sequence

ARRAY_THEME = Theme(
    {
        "arr.title": "bold",
        "arr.value": "cyan",
        "arr.index": "dim",
    }
)


def render_tables(
    *,
    sequence: Sequence | None = None,
    grid: Grid | None = None,
    width: int = 80,
    no_color: bool = False,
) -> str:
    """Render whichever containers are given as tables *width* columns wide.

    Rendering goes to a StringIO buffer; Rich drops color codes on its
    own when that buffer is not a terminal.
    """
    buf = StringIO()
    console = Console(
        file=buf,
        theme=ARRAY_THEME,
        no_color=no_color,
        highlight=False,
        width=width,
    )
    if sequence is not None:
        console.print(_sequence_table(sequence))
    if grid is not None:
        console.print(_grid_table(grid))
    return buf.getvalue().rstrip("\n")


def _sequence_table(sequence: Sequence) -> Table:
    table = Table(title="Array elements", title_style="arr.title", expand=True)
    for index in range(len(sequence)):
        table.add_column(str(index), header_style="arr.index", justify="right")
    table.add_row(*(str(value) for value in sequence), style="arr.value")
    return table


def _grid_table(grid: Grid) -> Table:
    # Leading column holds the row index.
    table = Table(title="Matrix elements", title_style="arr.title", expand=True)
    table.add_column("", style="arr.index", justify="right")
    for col in range(len(grid[0]) if grid else 0):
        table.add_column(str(col), header_style="arr.index", justify="right")
    for row_index, row in enumerate(grid):
        table.add_row(str(row_index), *(str(value) for value in row), style="arr.value")
    return table

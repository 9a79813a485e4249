"""ArrayPrinter — owns the literal containers and writes them out.

Every operation is total: there is no input, nothing to validate, and
all indices are bounded by the container dimensions.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import IO

import click

from arrayprint.domain.containers import (
    GRID,
    GRID_COLS,
    GRID_ROWS,
    SEQUENCE,
    SEQUENCE_LENGTH,
    grid_as_lists,
)
from arrayprint.output.formatters import format_grid, format_sequence
from arrayprint.services.result import ServiceResult

logger = logging.getLogger(__name__)

ARRAY_HEADER = "Array elements:"
MATRIX_HEADER = "Matrix elements:"


class ArrayPrinter:
    """Writes the Sequence and the Grid to a text stream.

    Args:
        file: Target stream.  ``None`` means standard output, resolved by
            Click at write time.
    """

    def __init__(self, file: IO[str] | None = None) -> None:
        self._file = file
        self.sequence = SEQUENCE
        self.grid = GRID

    def _write(self, text: str) -> None:
        click.echo(text, file=self._file, nl=False)

    def print_sequence(self) -> None:
        """Write the Sequence on one line, in index order."""
        logger.debug("Printing sequence of length %d", SEQUENCE_LENGTH)
        self._write(format_sequence(self.sequence))

    def print_grid(self) -> None:
        """Write the Grid row by row."""
        logger.debug("Printing %dx%d grid", GRID_ROWS, GRID_COLS)
        self._write(format_grid(self.grid))

    def print_array_section(self) -> None:
        self._write(ARRAY_HEADER + "\n")
        self.print_sequence()

    def print_matrix_section(self) -> None:
        self._write(MATRIX_HEADER + "\n")
        self.print_grid()

    def run(self) -> int:
        """Print both sections and return the exit status (always 0)."""
        self.print_array_section()
        self.print_matrix_section()
        return 0

    def snapshot(
        self,
        *,
        array: bool = True,
        matrix: bool = True,
        warnings: Iterable[str] = (),
    ) -> ServiceResult:
        """Return the requested containers as a ServiceResult."""
        data: dict[str, list] = {}
        shape: dict[str, list[int]] = {}
        if array:
            data["array"] = list(self.sequence)
            shape["array"] = [SEQUENCE_LENGTH]
        if matrix:
            data["matrix"] = grid_as_lists(self.grid)
            shape["matrix"] = [GRID_ROWS, GRID_COLS]
        return ServiceResult(op="print_arrays", data=data, shape=shape, warnings=list(warnings))

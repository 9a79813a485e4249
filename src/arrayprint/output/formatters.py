"""Plain-text and JSON output helpers.

The plain format is fixed: every value is followed by one space and
every row ends with a newline, so numeric lines carry a trailing space.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from arrayprint.domain.containers import Grid, Sequence
    from arrayprint.services.result import ServiceResult


def format_row(values: Iterable[int]) -> str:
    """Format one line of values, each followed by a single space."""
    return "".join(f"{value} " for value in values) + "\n"


def format_sequence(sequence: Sequence) -> str:
    return format_row(sequence)


def format_grid(grid: Grid) -> str:
    """Format *grid* in row-major order, one line per row."""
    return "".join(format_row(row) for row in grid)


def format_result(result: ServiceResult, *, indent: int = 2) -> str:
    """Format a ServiceResult as JSON."""
    return result.model_dump_json(indent=indent)

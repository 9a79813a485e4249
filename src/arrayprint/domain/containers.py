"""The two literal containers: a 5-element Sequence and a 3x3 Grid.

Both are tuples, so they are immutable after import.  Dimensions are
exposed as constants and every traversal is bounded by them.
"""

from __future__ import annotations

SEQUENCE_LENGTH = 5
GRID_ROWS = 3
GRID_COLS = 3

Sequence = tuple[int, ...]
Grid = tuple[tuple[int, ...], ...]

SEQUENCE: Sequence = (1, 2, 3, 4, 5)

GRID: Grid = (
    (1, 2, 3),
    (4, 5, 6),
    (7, 8, 9),
)


def sequence_element(index: int) -> int:
    """Return the Sequence element at *index*."""
    return SEQUENCE[index]


def grid_element(row: int, col: int) -> int:
    """Return the Grid element at (*row*, *col*)."""
    return GRID[row][col]


def grid_as_lists(grid: Grid = GRID) -> list[list[int]]:
    """Copy *grid* into nested lists (for JSON payloads)."""
    return [list(row) for row in grid]

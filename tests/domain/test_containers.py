"""Tests for the literal Sequence and Grid."""

import pytest

from arrayprint.domain.containers import (
    GRID,
    GRID_COLS,
    GRID_ROWS,
    SEQUENCE,
    SEQUENCE_LENGTH,
    grid_as_lists,
    grid_element,
    sequence_element,
)


class TestSequence:
    def test_length(self) -> None:
        assert len(SEQUENCE) == SEQUENCE_LENGTH == 5

    @pytest.mark.parametrize("index", range(SEQUENCE_LENGTH))
    def test_element_is_index_plus_one(self, index: int) -> None:
        assert sequence_element(index) == index + 1

    def test_immutable(self) -> None:
        with pytest.raises(TypeError):
            SEQUENCE[0] = 42  # type: ignore[index]


class TestGrid:
    def test_dimensions(self) -> None:
        assert len(GRID) == GRID_ROWS == 3
        assert all(len(row) == GRID_COLS == 3 for row in GRID)

    def test_row_major_values(self) -> None:
        for row in range(GRID_ROWS):
            for col in range(GRID_COLS):
                assert grid_element(row, col) == row * 3 + col + 1

    def test_rows_immutable(self) -> None:
        with pytest.raises(TypeError):
            GRID[1][1] = 0  # type: ignore[index]


class TestGridAsLists:
    def test_copies_into_lists(self) -> None:
        assert grid_as_lists() == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]

    def test_copy_does_not_alias(self) -> None:
        copy = grid_as_lists()
        copy[0][0] = 99
        assert GRID[0][0] == 1

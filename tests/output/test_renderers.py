"""Tests for Rich table renderers."""

from arrayprint.domain.containers import GRID, SEQUENCE
from arrayprint.output.renderers import render_tables


class TestRenderTables:
    def test_sequence_table(self) -> None:
        output = render_tables(sequence=SEQUENCE, no_color=True)
        assert "Array elements" in output
        assert "Matrix elements" not in output
        for value in SEQUENCE:
            assert str(value) in output

    def test_grid_table(self) -> None:
        output = render_tables(grid=GRID, no_color=True)
        assert "Matrix elements" in output
        assert "Array elements" not in output
        for row in GRID:
            for value in row:
                assert str(value) in output

    def test_no_ansi_when_not_a_terminal(self) -> None:
        output = render_tables(sequence=SEQUENCE, grid=GRID)
        assert "\x1b" not in output

    def test_tables_fill_width(self) -> None:
        output = render_tables(sequence=SEQUENCE, grid=GRID, width=50, no_color=True)
        assert max(len(line) for line in output.splitlines()) == 50

    def test_nothing_requested(self) -> None:
        assert render_tables() == ""

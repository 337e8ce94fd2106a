"""Tests for the wrap-around render grid."""

import numpy as np
import pytest

from console_arcade.snake.grid import CellType, Grid


class TestGridShape:
    def test_cells_are_rows_by_columns(self):
        grid = Grid(width=7, height=4)
        assert grid.cells.shape == (4, 7)
        assert grid.cells.dtype == np.int8
        assert not grid.cells.any()

    @pytest.mark.parametrize("width,height", [(3, 4), (4, 3), (0, 10)])
    def test_rejects_boards_smaller_than_four(self, width, height):
        with pytest.raises(ValueError, match="at least 4"):
            Grid(width=width, height=height)


class TestGridWrap:
    @pytest.mark.parametrize(
        "point,expected",
        [
            ((-1, 2), (4, 2)),   # off the top
            ((5, 2), (0, 2)),    # off the bottom
            ((2, -1), (2, 5)),   # off the left
            ((2, 6), (2, 0)),    # off the right
            ((3, 3), (3, 3)),
        ],
    )
    def test_wrap_each_edge(self, point, expected):
        assert Grid(width=6, height=5).wrap(*point) == expected


class TestGridPainting:
    def test_rows_reflect_painted_cells(self):
        grid = Grid(width=4, height=4)
        grid.set(1, 2, CellType.FOOD)
        grid.set(3, 0, CellType.SNAKE)
        rows = grid.rows()
        assert len(rows) == 4
        assert rows[1][2] is CellType.FOOD
        assert rows[3][0] is CellType.SNAKE
        assert sum(cell is CellType.EMPTY for row in rows for cell in row) == 14

    def test_clear_erases_everything(self):
        grid = Grid(width=5, height=5)
        grid.set(0, 0, CellType.SNAKE)
        grid.set(4, 4, CellType.FOOD)
        grid.clear()
        assert all(cell is CellType.EMPTY for row in grid.rows() for cell in row)

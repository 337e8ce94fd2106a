"""Grid representation for the snake board."""

from __future__ import annotations

import enum

import numpy as np


class CellType(enum.IntEnum):
    """Integer codes stored in the grid array."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2


class Grid:
    """NumPy-backed board with wrap-around edges.

    Coordinates use (row, col) ordering consistent with NumPy indexing.
    The grid is a render buffer: :class:`~console_arcade.snake.world.SnakeWorld`
    keeps the authoritative snake and food positions and paints them here.
    """

    def __init__(self, width: int = 30, height: int = 20) -> None:
        if width < 4 or height < 4:
            raise ValueError("Grid dimensions must be at least 4×4.")
        self.width = width
        self.height = height
        self.cells = np.zeros((height, width), dtype=np.int8)

    def clear(self) -> None:
        self.cells[:] = CellType.EMPTY

    def wrap(self, row: int, col: int) -> tuple[int, int]:
        """Map a coordinate that stepped off one edge onto the opposite edge."""
        return row % self.height, col % self.width

    def set(self, row: int, col: int, cell_type: CellType) -> None:
        self.cells[row, col] = cell_type

    def rows(self) -> list[list[CellType]]:
        """Return the cells as nested lists of :class:`CellType`, top row first."""
        return [[CellType(v) for v in row] for row in self.cells.tolist()]

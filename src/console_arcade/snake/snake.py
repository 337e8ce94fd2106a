"""Snake body and movement directions."""

from __future__ import annotations

import enum
from collections import deque


class Direction(enum.Enum):
    """Cardinal movement directions with (row_delta, col_delta) values."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered deque of (row, col) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    def __init__(
        self,
        start_row: int,
        start_col: int,
        direction: Direction = Direction.RIGHT,
        length: int = 3,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        dr, dc = direction.value
        self.body: deque[tuple[int, int]] = deque()
        for i in range(length):
            self.body.append((start_row - dr * i, start_col - dc * i))
        self.direction = direction

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> tuple[int, int]:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> tuple[int, int]:
        return self.body[-1]

    def set_direction(self, new_direction: Direction) -> bool:
        """Change direction, ignoring 180° reversals.

        The reversal check runs against the most recently accepted
        direction, so two quick turns between moves are both honoured.
        Returns whether the change was accepted.
        """
        if _OPPOSITES[new_direction] == self.direction:
            return False
        self.direction = new_direction
        return True

    def next_head(self) -> tuple[int, int]:
        """Compute the next head position without moving (unwrapped)."""
        dr, dc = self.direction.value
        r, c = self.head
        return r + dr, c + dc

    def push_head(self, cell: tuple[int, int]) -> None:
        self.body.appendleft(cell)

    def pop_tail(self) -> tuple[int, int]:
        """Remove and return the tail segment."""
        return self.body.pop()

    def occupies(self, row: int, col: int) -> bool:
        """Check whether the snake occupies a given cell."""
        return (row, col) in self.body

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "direction": self.direction.name,
        }

"""3×3 tic-tac-toe board with win and draw detection."""

from __future__ import annotations

import enum
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

BOARD_SIZE = 9
WIN_SCORE = 10

# Rows, columns, then the two diagonals.
WIN_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Mark(str, enum.Enum):
    """Cell contents. The computer always plays ``O``."""

    EMPTY = " "
    HUMAN = "X"
    COMPUTER = "O"

    @property
    def opponent(self) -> Mark:
        if self is Mark.HUMAN:
            return Mark.COMPUTER
        if self is Mark.COMPUTER:
            return Mark.HUMAN
        return Mark.EMPTY


class GameStatus(enum.Enum):
    """Outcome of a board as seen by the game shell."""

    COMPUTER_WIN = "computer_win"
    HUMAN_WIN = "human_win"
    DRAW = "draw"
    IN_PROGRESS = "in_progress"


_CHAR_TO_MARK: dict[str, Mark] = {
    "X": Mark.HUMAN,
    "O": Mark.COMPUTER,
    "_": Mark.EMPTY,
    " ": Mark.EMPTY,
    ".": Mark.EMPTY,
}


class GameBoard:
    """Nine cells indexed 0..8, row by row.

    The board does not enforce turn order; that is up to the caller.
    """

    def __init__(self, cells: Sequence[Mark] | None = None) -> None:
        if cells is None:
            self.cells: list[Mark] = [Mark.EMPTY] * BOARD_SIZE
        else:
            if len(cells) != BOARD_SIZE:
                raise ValueError(f"A board has exactly {BOARD_SIZE} cells.")
            self.cells = [Mark(c) for c in cells]

    @classmethod
    def from_string(cls, layout: str) -> GameBoard:
        """Build a board from nine characters, e.g. ``"XX_OO____"``."""
        if len(layout) != BOARD_SIZE:
            raise ValueError(f"Layout must have {BOARD_SIZE} characters.")
        try:
            return cls([_CHAR_TO_MARK[ch.upper()] for ch in layout])
        except KeyError as exc:
            raise ValueError(f"Unknown cell character {exc.args[0]!r}.") from None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameBoard):
            return NotImplemented
        return self.cells == other.cells

    def __hash__(self) -> int:
        return hash(tuple(self.cells))

    def __repr__(self) -> str:
        return f"GameBoard.from_string({self.to_string()!r})"

    def __getitem__(self, index: int) -> Mark:
        return self.cells[index]

    def to_string(self) -> str:
        return "".join("_" if c is Mark.EMPTY else c.value for c in self.cells)

    def copy(self) -> GameBoard:
        return GameBoard(self.cells)

    def swapped(self) -> GameBoard:
        """Return a copy with the X and O marks exchanged."""
        return GameBoard([c.opponent for c in self.cells])

    def is_empty(self, index: int) -> bool:
        return 0 <= index < BOARD_SIZE and self.cells[index] is Mark.EMPTY

    def place(self, index: int, mark: Mark) -> bool:
        """Write *mark* into an empty cell.

        Returns ``False`` and leaves the board untouched if the index is out
        of range, the cell is taken, or *mark* is EMPTY.
        """
        if mark is Mark.EMPTY or not self.is_empty(index):
            return False
        self.cells[index] = mark
        return True

    def clear(self, index: int) -> None:
        self.cells[index] = Mark.EMPTY

    @contextmanager
    def trial(self, index: int, mark: Mark) -> Iterator[GameBoard]:
        """Temporarily place *mark* at *index*; the cell is emptied on exit."""
        if not self.place(index, mark):
            raise ValueError(f"Cell {index} is not available for a trial move.")
        try:
            yield self
        finally:
            self.clear(index)

    def empty_cells(self) -> list[int]:
        return [i for i, c in enumerate(self.cells) if c is Mark.EMPTY]

    def has_moves_left(self) -> bool:
        return Mark.EMPTY in self.cells

    def winner(self) -> Mark | None:
        """Return the mark owning a complete line, if any."""
        cells = self.cells
        for a, b, c in WIN_LINES:
            if cells[a] is not Mark.EMPTY and cells[a] is cells[b] is cells[c]:
                return cells[a]
        return None

    def evaluate(self) -> int:
        """+10 for a computer line, -10 for a human line, else 0."""
        winner = self.winner()
        if winner is Mark.COMPUTER:
            return WIN_SCORE
        if winner is Mark.HUMAN:
            return -WIN_SCORE
        return 0

    def status(self) -> GameStatus:
        score = self.evaluate()
        if score == WIN_SCORE:
            return GameStatus.COMPUTER_WIN
        if score == -WIN_SCORE:
            return GameStatus.HUMAN_WIN
        if not self.has_moves_left():
            return GameStatus.DRAW
        return GameStatus.IN_PROGRESS

    def to_dict(self) -> dict:
        """Serialize board state to a dictionary."""
        return {
            "cells": [c.value for c in self.cells],
            "status": self.status().value,
        }

"""Full-depth minimax for the computer player.

The computer (``O``) maximizes and the human (``X``) minimizes. Terminal
positions are scored from the computer's side with a depth adjustment:

- computer win at depth d: ``10 - d`` (sooner is better);
- human win at depth d: ``-10 + d`` (later is better);
- draw: ``0``.

Ties between equally valued moves go to the lowest cell index.
"""

from __future__ import annotations

import logging

from console_arcade.tictactoe.board import WIN_SCORE, GameBoard, GameStatus, Mark

logger = logging.getLogger(__name__)


def minimax(board: GameBoard, depth: int, maximizing: bool) -> int:
    """Score *board* assuming both sides play perfectly from here.

    Trial moves are made on *board* itself and always undone, so the board
    is unchanged when this returns.
    """
    score = board.evaluate()
    if score == WIN_SCORE:
        return score - depth
    if score == -WIN_SCORE:
        return score + depth
    if not board.has_moves_left():
        return 0

    mark = Mark.COMPUTER if maximizing else Mark.HUMAN
    best: int | None = None
    for index in board.empty_cells():
        board.place(index, mark)
        try:
            value = minimax(board, depth + 1, not maximizing)
        finally:
            board.clear(index)
        if best is None or (value > best if maximizing else value < best):
            best = value
    return best


def move_values(board: GameBoard) -> dict[int, int]:
    """Minimax value of every computer move on *board*, keyed by cell.

    Works on a private copy; *board* itself is never modified.
    """
    work = board.copy()
    values: dict[int, int] = {}
    for index in work.empty_cells():
        with work.trial(index, Mark.COMPUTER):
            values[index] = minimax(work, 0, False)
    return values


def best_move(board: GameBoard) -> int | None:
    """Pick the computer's move for *board*.

    Returns the 0-based cell index, or ``None`` if the game is already over
    (a line is complete or no cell is free).
    """
    if board.status() is not GameStatus.IN_PROGRESS:
        return None

    values = move_values(board)
    # max() keeps the first of equal values, i.e. the lowest index.
    index = max(values, key=values.__getitem__)
    logger.debug(
        "Best move for %s is %d (value %d).",
        board.to_string(), index, values[index],
    )
    return index

"""Text rendering for the tic-tac-toe board."""

from __future__ import annotations

from console_arcade.tictactoe.board import GameBoard

RULE = "#" * 44
ROW_SEPARATOR = "---+---+---"


def banner(*lines: str) -> str:
    """Frame *lines* between two ``#`` rules."""
    return "\n".join([RULE, *lines, RULE]) + "\n"


def render_board(board: GameBoard) -> str:
    rows = []
    for r in range(3):
        a, b, c = (board[r * 3 + i].value for i in range(3))
        rows.append(f" {a} | {b} | {c} ")
    body = f"\n{ROW_SEPARATOR}\n".join(rows)
    return f"\n{RULE}\n{body}\n{RULE}\n"

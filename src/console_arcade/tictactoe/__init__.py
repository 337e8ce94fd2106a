"""Tic-tac-toe with a minimax computer opponent."""

from console_arcade.tictactoe.board import (
    WIN_LINES,
    WIN_SCORE,
    GameBoard,
    GameStatus,
    Mark,
)
from console_arcade.tictactoe.search import best_move, minimax, move_values
from console_arcade.tictactoe.session import (
    GameMode,
    StreamConsole,
    parse_move,
    play_two_player,
    play_vs_computer,
    run_session,
)

__all__ = [
    "WIN_LINES",
    "WIN_SCORE",
    "GameBoard",
    "GameMode",
    "GameStatus",
    "Mark",
    "StreamConsole",
    "best_move",
    "minimax",
    "move_values",
    "parse_move",
    "play_two_player",
    "play_vs_computer",
    "run_session",
]

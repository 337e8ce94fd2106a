"""Interactive tic-tac-toe sessions: two players or human vs computer."""

from __future__ import annotations

import enum
import logging
import sys
from collections.abc import Callable
from typing import Protocol, TextIO

from console_arcade.errors import InvalidMoveError
from console_arcade.tictactoe.board import BOARD_SIZE, GameBoard, GameStatus, Mark
from console_arcade.tictactoe.render import banner, render_board
from console_arcade.tictactoe.search import best_move

logger = logging.getLogger(__name__)


class GameMode(enum.Enum):
    """Who sits on the ``O`` side."""

    TWO_PLAYER = "two-player"
    COMPUTER = "computer"


_MENU_CHOICES: dict[int, GameMode] = {
    1: GameMode.TWO_PLAYER,
    2: GameMode.COMPUTER,
}

_TWO_PLAYER_RESULTS: dict[GameStatus, str] = {
    GameStatus.COMPUTER_WIN: " O (Player 2) wins!",
    GameStatus.HUMAN_WIN: " X (Player 1) wins!",
    GameStatus.DRAW: " It's a draw!",
}

_VS_COMPUTER_RESULTS: dict[GameStatus, str] = {
    GameStatus.COMPUTER_WIN: " Computer (O) wins!",
    GameStatus.HUMAN_WIN: " You (X) win! Congrats!",
    GameStatus.DRAW: " It's a draw!",
}


class Console(Protocol):
    """Line-oriented I/O used by the sessions."""

    def read_line(self, prompt: str) -> str:
        """Show *prompt* and return one line; raise EOFError at end of input."""

    def write(self, text: str) -> None: ...


class StreamConsole:
    """:class:`Console` over a pair of text streams (stdin/stdout by default)."""

    def __init__(
        self, stdin: TextIO | None = None, stdout: TextIO | None = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def read_line(self, prompt: str) -> str:
        self.write(prompt)
        line = self.stdin.readline()
        if not line:
            raise EOFError("Input closed.")
        return line.rstrip("\r\n")

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()


def parse_move(text: str, board: GameBoard) -> int:
    """Turn a 1-based cell number typed by a player into a 0-based index.

    Raises :class:`InvalidMoveError` with a message fit for the player.
    """
    try:
        position = int(text.strip())
    except ValueError:
        raise InvalidMoveError("Invalid input. Please enter a number 1-9.") from None
    if not 1 <= position <= BOARD_SIZE:
        raise InvalidMoveError("Position must be 1..9.")
    if not board.is_empty(position - 1):
        raise InvalidMoveError("Cell already taken. Choose another.")
    return position - 1


def prompt_move(console: Console, board: GameBoard) -> int:
    """Ask until the player names a free cell; return its 0-based index."""
    while True:
        text = console.read_line("Enter your move (1-9): ")
        try:
            return parse_move(text, board)
        except InvalidMoveError as exc:
            console.write(f"{exc}\n")


def choose_mode(console: Console) -> GameMode | None:
    """Show the mode menu.

    Returns ``None`` after telling the player why, if the answer is not a
    number or names no mode.
    """
    console.write(banner("          === Tic-Tac-Toe Game ==="))
    console.write("1) Two players\n2) Play vs Computer (AI)\n")
    answer = console.read_line("Choose mode (1 or 2): ")
    try:
        choice = int(answer.strip())
    except ValueError:
        console.write("Invalid input. Exiting.\n")
        return None
    mode = _MENU_CHOICES.get(choice)
    if mode is None:
        console.write("Unknown mode. Exiting.\n")
    return mode


def ask_human_first(console: Console) -> bool:
    answer = console.read_line("Do you want to go first? (y/n): ")
    return answer.strip()[:1].lower() == "y"


def play_two_player(console: Console) -> GameStatus:
    """X and O take turns at the same keyboard. X moves first."""
    board = GameBoard()
    console.write(banner(" Two-player mode. X = Player1, O = Player2"))
    console.write(render_board(board))

    turn = Mark.HUMAN
    while True:
        console.write(banner(f" Player {turn.value}'s turn."))
        board.place(prompt_move(console, board), turn)
        console.write(render_board(board))

        status = board.status()
        if status is not GameStatus.IN_PROGRESS:
            console.write(banner(_TWO_PLAYER_RESULTS[status]))
            logger.info("Two-player game finished: %s.", status.value)
            return status
        turn = turn.opponent


def play_vs_computer(
    console: Console,
    human_first: bool | None = None,
    search: Callable[[GameBoard], int | None] = best_move,
) -> GameStatus:
    """Human plays X against the minimax computer playing O.

    When *human_first* is ``None`` the player is asked.
    """
    board = GameBoard()
    console.write(banner(" Human vs Computer", " You are X. Computer is O."))
    console.write(render_board(board))

    human_turn = ask_human_first(console) if human_first is None else human_first
    status = board.status()
    while status is GameStatus.IN_PROGRESS:
        if human_turn:
            console.write(banner(" Your move (X):"))
            board.place(prompt_move(console, board), Mark.HUMAN)
        else:
            console.write(banner(" Computer is thinking..."))
            move = search(board)
            if move is None:
                # No move available: nothing left to play for.
                status = GameStatus.DRAW
                break
            board.place(move, Mark.COMPUTER)
            console.write(f" Computer chose position {move + 1}.\n")

        console.write(render_board(board))
        status = board.status()
        human_turn = not human_turn

    console.write(banner(_VS_COMPUTER_RESULTS[status]))
    logger.info("Game against computer finished: %s.", status.value)
    return status


def run_session(
    console: Console,
    mode: GameMode | None = None,
    human_first: bool | None = None,
) -> GameStatus | None:
    """Play one game. Returns ``None`` if no valid mode was chosen."""
    if mode is None:
        mode = choose_mode(console)
        if mode is None:
            return None
    if mode is GameMode.TWO_PLAYER:
        return play_two_player(console)
    return play_vs_computer(console, human_first=human_first)

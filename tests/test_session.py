"""Tests for the tic-tac-toe sessions."""

import io

import pytest

from console_arcade.errors import InvalidMoveError
from console_arcade.tictactoe.board import GameBoard, GameStatus
from console_arcade.tictactoe.session import (
    GameMode,
    StreamConsole,
    choose_mode,
    parse_move,
    play_two_player,
    play_vs_computer,
    prompt_move,
    run_session,
)


class ScriptedConsole:
    """Console that answers prompts from a list and records output."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "".join(self.output)


def _first_free(board: GameBoard) -> int:
    return board.empty_cells()[0]


class TestParseMove:
    def test_valid(self):
        assert parse_move("1", GameBoard()) == 0
        assert parse_move(" 9 \n", GameBoard()) == 8

    @pytest.mark.parametrize("text", ["", "abc", "4.5", "one"])
    def test_malformed(self, text):
        with pytest.raises(InvalidMoveError, match="enter a number 1-9"):
            parse_move(text, GameBoard())

    @pytest.mark.parametrize("text", ["0", "10", "-3"])
    def test_out_of_range(self, text):
        with pytest.raises(InvalidMoveError, match=r"1\.\.9"):
            parse_move(text, GameBoard())

    def test_occupied(self):
        with pytest.raises(InvalidMoveError, match="already taken"):
            parse_move("1", GameBoard.from_string("X________"))

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_move("x", GameBoard())


class TestPromptMove:
    def test_reprompts_until_valid(self):
        console = ScriptedConsole(["abc", "12", "1", "5"])
        move = prompt_move(console, GameBoard.from_string("X________"))
        assert move == 4
        assert len(console.prompts) == 4
        assert "Invalid input. Please enter a number 1-9." in console.text
        assert "Position must be 1..9." in console.text
        assert "Cell already taken. Choose another." in console.text

    def test_eof_propagates(self):
        with pytest.raises(EOFError):
            prompt_move(ScriptedConsole([]), GameBoard())


class TestTwoPlayer:
    def test_x_wins(self):
        console = ScriptedConsole(["1", "4", "2", "5", "3"])
        assert play_two_player(console) is GameStatus.HUMAN_WIN
        assert "X (Player 1) wins!" in console.text

    def test_o_wins(self):
        console = ScriptedConsole(["1", "4", "2", "5", "9", "6"])
        assert play_two_player(console) is GameStatus.COMPUTER_WIN
        assert "O (Player 2) wins!" in console.text

    def test_draw(self):
        console = ScriptedConsole(["1", "2", "3", "5", "4", "6", "8", "7", "9"])
        assert play_two_player(console) is GameStatus.DRAW
        assert "It's a draw!" in console.text

    def test_turn_banner_alternates(self):
        console = ScriptedConsole(["1", "4", "2", "5", "3"])
        play_two_player(console)
        assert console.text.count("Player X's turn.") == 3
        assert console.text.count("Player O's turn.") == 2


class TestVsComputer:
    def test_computer_does_not_lose_to_greedy_human(self):
        # The human always tries the lowest-numbered cell first.
        console = ScriptedConsole([str(n) for n in range(1, 10)] * 5)
        result = play_vs_computer(console, human_first=True)
        assert result is not GameStatus.HUMAN_WIN

    def test_computer_first_uses_search(self):
        console = ScriptedConsole(["9", "8", "7", "6", "5"])
        result = play_vs_computer(console, human_first=False, search=_first_free)
        assert "Computer chose position 1." in console.text
        assert "Computer chose position 2." in console.text
        assert result is GameStatus.COMPUTER_WIN
        assert "Computer (O) wins!" in console.text

    def test_asks_who_goes_first(self):
        console = ScriptedConsole(["n", "9", "8", "7", "6", "5"])
        play_vs_computer(console, search=_first_free)
        assert console.prompts[0] == "Do you want to go first? (y/n): "
        assert "Computer chose position 1." in console.text

    def test_yes_lets_human_start(self):
        console = ScriptedConsole(["Y", "1", "2", "3"])
        result = play_vs_computer(console, search=lambda b: b.empty_cells()[-1])
        assert result is GameStatus.HUMAN_WIN
        assert "You (X) win! Congrats!" in console.text

    def test_no_move_available_ends_game(self):
        console = ScriptedConsole([])
        result = play_vs_computer(console, human_first=False, search=lambda b: None)
        assert result is GameStatus.DRAW


class TestMenu:
    def test_choose_mode(self):
        assert choose_mode(ScriptedConsole(["1"])) is GameMode.TWO_PLAYER
        assert choose_mode(ScriptedConsole([" 2 "])) is GameMode.COMPUTER
        assert choose_mode(ScriptedConsole(["7"])) is None

    def test_unknown_mode_exits(self):
        console = ScriptedConsole(["3"])
        assert run_session(console) is None
        assert "Unknown mode. Exiting." in console.text

    def test_non_numeric_choice_exits(self):
        console = ScriptedConsole(["two"])
        assert run_session(console) is None
        assert "Invalid input. Exiting." in console.text
        assert "Unknown mode" not in console.text

    def test_menu_then_two_player(self):
        console = ScriptedConsole(["1", "1", "4", "2", "5", "3"])
        assert run_session(console) is GameStatus.HUMAN_WIN

    def test_explicit_mode_skips_menu(self):
        console = ScriptedConsole(["1", "4", "2", "5", "3"])
        assert run_session(console, mode=GameMode.TWO_PLAYER) is GameStatus.HUMAN_WIN
        assert "Choose mode (1 or 2): " not in console.prompts


class TestStreamConsole:
    def test_reads_lines_and_writes(self):
        out = io.StringIO()
        console = StreamConsole(stdin=io.StringIO("5\r\n"), stdout=out)
        assert console.read_line("> ") == "5"
        console.write("done")
        assert out.getvalue() == "> done"

    def test_eof(self):
        console = StreamConsole(stdin=io.StringIO(""), stdout=io.StringIO())
        with pytest.raises(EOFError):
            console.read_line("> ")

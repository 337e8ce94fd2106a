"""Tests for the text renderers."""

from console_arcade.snake.render import (
    CONTROLS_HINT,
    game_over_message,
    render_world,
)
from console_arcade.snake.world import SnakeWorld
from console_arcade.tictactoe.board import GameBoard
from console_arcade.tictactoe.render import RULE, banner, render_board


class TestSnakeRender:
    def test_frame_layout(self):
        world = SnakeWorld(width=6, height=4, seed=0)
        world.food = (0, 0)
        lines = render_world(world, "Ada").splitlines()
        assert lines[0] == "+------+"
        assert lines[5] == "+------+"
        assert lines[1] == "|*     |"
        assert lines[3] == "| OOO  |"
        assert lines[6] == f"Ada   Score: 0   {CONTROLS_HINT}"

    def test_game_over_message(self):
        world = SnakeWorld(width=6, height=4, seed=0)
        world.score = 30
        assert game_over_message(world, "Ada") == "Game Over! Ada's Score: 30"


class TestBoardRender:
    def test_render_board(self):
        board = GameBoard.from_string("XO__X___O")
        text = render_board(board)
        assert " X | O |   " in text
        assert "   | X |   " in text
        assert "   |   | O " in text
        assert text.count("---+---+---") == 2
        assert text.count(RULE) == 2

    def test_banner(self):
        assert banner(" hello") == f"{RULE}\n hello\n{RULE}\n"

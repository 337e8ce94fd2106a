"""Console Arcade: snake and tic-tac-toe for the terminal."""

from console_arcade.snake import Direction, GameLoop, InputEvent, SnakeWorld
from console_arcade.tictactoe import GameBoard, GameStatus, Mark, best_move

__all__ = [
    "Direction",
    "GameBoard",
    "GameLoop",
    "GameStatus",
    "InputEvent",
    "Mark",
    "SnakeWorld",
    "best_move",
]

"""Real-time snake: wrap-around world, fixed-interval loop and key decoding."""

from console_arcade.snake.food import FoodSpawner
from console_arcade.snake.grid import CellType, Grid
from console_arcade.snake.snake import Direction, Snake
from console_arcade.snake.world import FOOD_REWARD, SnakeWorld, WorldStatus
from console_arcade.snake.keys import InputEvent, decode_key
from console_arcade.snake.loop import GameLoop, InputSource, LoopResult

__all__ = [
    "FOOD_REWARD",
    "CellType",
    "Direction",
    "FoodSpawner",
    "GameLoop",
    "Grid",
    "InputEvent",
    "InputSource",
    "LoopResult",
    "Snake",
    "SnakeWorld",
    "WorldStatus",
    "decode_key",
]

"""Tick-based snake world composing the snake, food and wrap-around grid."""

from __future__ import annotations

import enum
import logging

import numpy as np

from console_arcade.snake.food import FoodSpawner
from console_arcade.snake.grid import CellType, Grid
from console_arcade.snake.snake import Direction, Snake

logger = logging.getLogger(__name__)

FOOD_REWARD = 10


class WorldStatus(enum.Enum):
    """Lifecycle of a world: running until the snake bites itself."""

    RUNNING = "running"
    OVER = "over"


class SnakeWorld:
    """Single-snake world on a wrap-around board.

    Leaving an edge is never fatal; the head re-enters on the opposite side.
    The only way to die is to move into a cell the body already covers. Each
    call to :meth:`tick` advances the game by one step and returns the
    updated state dictionary.
    """

    def __init__(
        self,
        width: int = 30,
        height: int = 20,
        initial_length: int = 3,
        food_reward: int = FOOD_REWARD,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        if not 1 <= initial_length <= width // 2 + 1:
            raise ValueError(
                "initial_length must fit between the centre and the left edge.",
            )
        if food_reward < 0:
            raise ValueError("food_reward must be non-negative.")
        self.width = width
        self.height = height
        self.initial_length = initial_length
        self.food_reward = food_reward
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self._grid = Grid(width=width, height=height)
        self._spawner = FoodSpawner(width, height, rng=self.rng)
        self.reset()

    def reset(self) -> None:
        """Start a new game: fresh snake in the centre, new food, zero score."""
        self.snake = Snake(
            self.height // 2, self.width // 2,
            Direction.RIGHT, length=self.initial_length,
        )
        self.food = self._spawner.spawn(self.snake.body)
        self.score = 0
        self.tick_count = 0
        self.alive = True

    @property
    def direction(self) -> Direction:
        return self.snake.direction

    @property
    def status(self) -> WorldStatus:
        return WorldStatus.RUNNING if self.alive else WorldStatus.OVER

    def set_direction(self, direction: Direction) -> bool:
        """Request a turn for the next tick.

        U-turns are rejected. Several requests before a tick coalesce; the
        last accepted one wins. Returns whether the request was accepted.
        """
        if not self.alive:
            return False
        return self.snake.set_direction(direction)

    def tick(self) -> dict:
        """Advance the world by one step.

        Returns the full game state as a serializable dict.
        """
        if not self.alive:
            return self.get_state()

        next_r, next_c = self._grid.wrap(*self.snake.next_head())

        # The tail still counts: it has not moved away yet.
        if self.snake.occupies(next_r, next_c):
            self.alive = False
            logger.info(
                "Snake died at tick %d with score %d.",
                self.tick_count, self.score,
            )
            return self.get_state()

        self.snake.push_head((next_r, next_c))
        if (next_r, next_c) == self.food:
            self.score += self.food_reward
            self.food = self._spawner.spawn(self.snake.body)
        else:
            self.snake.pop_tail()

        self.tick_count += 1
        return self.get_state()

    def to_grid(self) -> Grid:
        """Paint the snake and food into the grid buffer and return it."""
        self._grid.clear()
        for r, c in self.snake.body:
            self._grid.set(r, c, CellType.SNAKE)
        if self.food is not None:
            self._grid.set(self.food[0], self.food[1], CellType.FOOD)
        return self._grid

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick_count,
            "score": self.score,
            "alive": self.alive,
            "status": self.status.value,
            "width": self.width,
            "height": self.height,
            "snake": self.snake.to_dict(),
            "food": list(self.food) if self.food is not None else None,
        }

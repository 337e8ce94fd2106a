"""Fixed-interval game loop: poll input, tick the world, render."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from console_arcade.snake.keys import InputEvent
from console_arcade.snake.world import SnakeWorld

logger = logging.getLogger(__name__)

DEFAULT_TICK_INTERVAL = 0.12  # seconds
DEFAULT_POLL_INTERVAL = 0.005  # seconds


class InputSource(Protocol):
    """Anything that can hand out pending key events without blocking."""

    def poll_event(self) -> InputEvent | None:
        """Return the next pending event, or ``None`` if nothing is waiting.

        A closed source reports :attr:`InputEvent.QUIT`.
        """


@dataclass(frozen=True)
class LoopResult:
    """Outcome of one :meth:`GameLoop.run`."""

    score: int
    ticks: int
    quit: bool


class GameLoop:
    """Drive a :class:`SnakeWorld` in real time.

    Every pass drains all pending input, then applies at most one tick and
    render once *tick_interval* seconds have passed since the previous tick.
    The loop sleeps *poll_interval* between passes. *clock* and *sleep* are
    injectable so tests can run on simulated time.
    """

    def __init__(
        self,
        world: SnakeWorld,
        source: InputSource,
        render: Callable[[SnakeWorld], None],
        tick_interval: float = DEFAULT_TICK_INTERVAL,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if tick_interval <= 0:
            raise ValueError("tick_interval must be positive.")
        if poll_interval < 0:
            raise ValueError("poll_interval must be non-negative.")
        self.world = world
        self.source = source
        self.render = render
        self.tick_interval = tick_interval
        self.poll_interval = poll_interval
        self._clock = clock
        self._sleep = sleep
        self.quit_requested = False

    def run(self) -> LoopResult:
        """Play until the snake dies or the player quits."""
        last_tick = self._clock()
        while self.world.alive:
            self._drain_input()
            if self.quit_requested:
                logger.info(
                    "Player quit at tick %d with score %d.",
                    self.world.tick_count, self.world.score,
                )
                break
            now = self._clock()
            if now - last_tick >= self.tick_interval:
                self.world.tick()
                self.render(self.world)
                last_tick = now
            self._sleep(self.poll_interval)

        self.render(self.world)
        return LoopResult(
            score=self.world.score,
            ticks=self.world.tick_count,
            quit=self.quit_requested,
        )

    def _drain_input(self) -> None:
        """Apply every pending event; stop early on QUIT."""
        while True:
            event = self.source.poll_event()
            if event is None:
                return
            if event is InputEvent.QUIT:
                self.quit_requested = True
                return
            self.world.set_direction(event.direction)

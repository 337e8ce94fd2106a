"""Food placement by rejection sampling."""

from __future__ import annotations

import logging
from collections.abc import Collection

import numpy as np

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Chooses food cells uniformly among the cells not covered by the snake.

    Uses an injected NumPy generator so placement is reproducible under a
    fixed seed.
    """

    def __init__(
        self,
        width: int,
        height: int,
        rng: np.random.Generator | None = None,
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError("Food area must be at least 1×1.")
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else np.random.default_rng()

    def spawn(
        self, occupied: Collection[tuple[int, int]],
    ) -> tuple[int, int] | None:
        """Return a random cell not in *occupied*.

        Draws random coordinates until a free one turns up. Returns ``None``
        when every cell is occupied.
        """
        taken = set(occupied)
        if len(taken) >= self.width * self.height:
            logger.warning("No empty cells available for food placement.")
            return None

        attempts = 0
        while True:
            attempts += 1
            row = int(self.rng.integers(self.height))
            col = int(self.rng.integers(self.width))
            if (row, col) not in taken:
                logger.debug(
                    "Food placed at (%d, %d) after %d draw(s).",
                    row, col, attempts,
                )
                return row, col

"""Game settings.

Defaults reproduce the classic console games. Values come from the command
line only; no config files or environment variables are consulted.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace

from console_arcade.tictactoe.session import GameMode


@dataclass(frozen=True)
class SnakeConfig:
    """Board size, scoring and timing for the snake game."""

    width: int = 30
    height: int = 20
    initial_length: int = 3
    food_reward: int = 10

    # Timing
    tick_interval_ms: int = 120
    poll_interval_ms: int = 5

    seed: int | None = None

    def __post_init__(self) -> None:
        if self.width < 4 or self.height < 4:
            raise ValueError("Board dimensions must be at least 4×4.")
        if not 1 <= self.initial_length <= self.width // 2 + 1:
            raise ValueError("initial_length does not fit on the board.")
        if self.food_reward < 0:
            raise ValueError("food_reward must be non-negative.")
        if self.tick_interval_ms < 1:
            raise ValueError("tick_interval_ms must be at least 1.")
        if self.poll_interval_ms < 0:
            raise ValueError("poll_interval_ms must be non-negative.")

    @property
    def tick_interval(self) -> float:
        """Tick interval in seconds."""
        return self.tick_interval_ms / 1000.0

    @property
    def poll_interval(self) -> float:
        return self.poll_interval_ms / 1000.0

    def to_dict(self) -> dict:
        return asdict(self)

    def with_overrides(self, **overrides) -> SnakeConfig:
        """Return a copy with the non-``None`` *overrides* applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


@dataclass(frozen=True)
class TicTacToeConfig:
    """Mode and move order; ``None`` means ask the player."""

    mode: GameMode | None = None
    human_first: bool | None = None

    def to_dict(self) -> dict:
        return {
            "mode": self.mode.value if self.mode is not None else None,
            "human_first": self.human_first,
        }

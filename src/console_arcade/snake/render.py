"""Plain-text rendering of a snake world."""

from __future__ import annotations

from console_arcade.snake.grid import CellType
from console_arcade.snake.world import SnakeWorld

SNAKE_CHAR = "O"
FOOD_CHAR = "*"
EMPTY_CHAR = " "
CONTROLS_HINT = "Controls: WASD or Arrow keys. Press 'q' to quit."

_CELL_CHARS: dict[CellType, str] = {
    CellType.EMPTY: EMPTY_CHAR,
    CellType.SNAKE: SNAKE_CHAR,
    CellType.FOOD: FOOD_CHAR,
}


def render_world(world: SnakeWorld, player_name: str = "Player") -> str:
    """Draw the board inside a ``+---+`` frame with a status line below."""
    grid = world.to_grid()
    border = "+" + "-" * grid.width + "+"
    lines = [border]
    for row in grid.rows():
        lines.append("|" + "".join(_CELL_CHARS[cell] for cell in row) + "|")
    lines.append(border)
    lines.append(f"{player_name}   Score: {world.score}   {CONTROLS_HINT}")
    return "\n".join(lines) + "\n"


def game_over_message(world: SnakeWorld, player_name: str = "Player") -> str:
    return f"Game Over! {player_name}'s Score: {world.score}"

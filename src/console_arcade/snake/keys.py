"""Keyboard decoding for the snake controls."""

from __future__ import annotations

import enum

from console_arcade.snake.snake import Direction


class InputEvent(enum.Enum):
    """Logical events produced by an input source."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    QUIT = "quit"

    @property
    def direction(self) -> Direction | None:
        """The movement direction for this event, or ``None`` for QUIT."""
        return _EVENT_TO_DIRECTION.get(self)


_EVENT_TO_DIRECTION: dict[InputEvent, Direction] = {
    InputEvent.UP: Direction.UP,
    InputEvent.DOWN: Direction.DOWN,
    InputEvent.LEFT: Direction.LEFT,
    InputEvent.RIGHT: Direction.RIGHT,
}

ESCAPE = "\x1b"
# Windows getwch() prefixes extended keys with one of these.
WINDOWS_PREFIXES = ("\x00", "\xe0")

_LETTER_KEYS: dict[str, InputEvent] = {
    "w": InputEvent.UP,
    "s": InputEvent.DOWN,
    "a": InputEvent.LEFT,
    "d": InputEvent.RIGHT,
    "q": InputEvent.QUIT,
}

# Final byte of the ANSI "ESC [ x" cursor sequences.
_ANSI_ARROWS: dict[str, InputEvent] = {
    "A": InputEvent.UP,
    "B": InputEvent.DOWN,
    "C": InputEvent.RIGHT,
    "D": InputEvent.LEFT,
}

# Scan code following a Windows extended-key prefix.
_WINDOWS_ARROWS: dict[str, InputEvent] = {
    "H": InputEvent.UP,
    "P": InputEvent.DOWN,
    "K": InputEvent.LEFT,
    "M": InputEvent.RIGHT,
}


def decode_key(sequence: str) -> InputEvent | None:
    """Map one raw key sequence to an :class:`InputEvent`.

    Accepts single letters (any case), ANSI arrow sequences such as
    ``"\\x1b[A"`` and Windows extended keys such as ``"\\xe0H"``. Returns
    ``None`` for anything else.
    """
    if not sequence:
        return None
    if len(sequence) == 1:
        return _LETTER_KEYS.get(sequence.lower())
    if sequence.startswith(ESCAPE + "[") and len(sequence) == 3:
        return _ANSI_ARROWS.get(sequence[2])
    if sequence[0] in WINDOWS_PREFIXES and len(sequence) == 2:
        return _WINDOWS_ARROWS.get(sequence[1])
    return None

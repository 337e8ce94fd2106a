"""Exceptions shared by the console games."""

from __future__ import annotations


class InvalidMoveError(ValueError):
    """A tic-tac-toe move that cannot be applied to the current board.

    Raised for malformed input, out-of-range cell numbers and occupied cells.
    Sessions catch it and re-prompt.
    """


class TerminalUnavailableError(RuntimeError):
    """Raised when raw keyboard input cannot be set up on this terminal."""

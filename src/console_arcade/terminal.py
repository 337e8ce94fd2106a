"""Raw-mode keyboard input and ANSI screen helpers."""

from __future__ import annotations

import logging
import os
import select
import sys
import time
from collections.abc import Callable
from typing import TextIO

from console_arcade.errors import TerminalUnavailableError
from console_arcade.snake.keys import (
    ESCAPE,
    WINDOWS_PREFIXES,
    InputEvent,
    decode_key,
)

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\x1b[2J\x1b[H"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"

_IS_WINDOWS = sys.platform == "win32"


def require_tty(stream: TextIO | None = None) -> None:
    """Raise :class:`TerminalUnavailableError` unless *stream* is a TTY."""
    stream = stream if stream is not None else sys.stdin
    if not stream.isatty():
        raise TerminalUnavailableError(
            "Snake needs an interactive terminal; stdin is not a TTY.",
        )


def clear_screen(stream: TextIO | None = None) -> None:
    stream = stream if stream is not None else sys.stdout
    stream.write(CLEAR_SCREEN)
    stream.flush()


def draw(frame: str, stream: TextIO | None = None) -> None:
    """Replace the whole screen with *frame*."""
    stream = stream if stream is not None else sys.stdout
    stream.write(CLEAR_SCREEN + frame)
    stream.flush()


def type_effect(
    text: str,
    delay: float = 0.03,
    stream: TextIO | None = None,
    sleep: Callable[[float], None] | None = None,
) -> None:
    """Print *text* one character at a time."""
    stream = stream if stream is not None else sys.stdout
    sleep = sleep if sleep is not None else time.sleep
    for ch in text:
        stream.write(ch)
        stream.flush()
        if delay > 0:
            sleep(delay)


class RawTerminal:
    """Non-blocking keyboard reader for an interactive console.

    Use as a context manager: on POSIX, entering switches stdin to cbreak
    mode without echo and exiting restores the saved attributes. On Windows
    keys come from ``msvcrt`` and no mode switch is needed. While active,
    :meth:`poll_event` never blocks.
    """

    def __init__(
        self, stdin: TextIO | None = None, stdout: TextIO | None = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._fd: int | None = None
        self._saved_attrs: list | None = None
        self._closed = False

    def __enter__(self) -> RawTerminal:
        require_tty(self.stdin)
        if not _IS_WINDOWS:
            import termios
            import tty

            self._fd = self.stdin.fileno()
            try:
                self._saved_attrs = termios.tcgetattr(self._fd)
            except termios.error as exc:
                raise TerminalUnavailableError(
                    f"Cannot read terminal attributes: {exc}",
                ) from exc
            tty.setcbreak(self._fd)
        else:
            # An empty system() call turns on ANSI escapes in cmd.exe.
            os.system("")  # noqa: S605, S607
        self.stdout.write(HIDE_CURSOR)
        self.stdout.flush()
        logger.debug("Terminal switched to raw input mode.")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._saved_attrs is not None and self._fd is not None:
            import termios

            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved_attrs)
            self._saved_attrs = None
        self.stdout.write(SHOW_CURSOR)
        self.stdout.flush()
        logger.debug("Terminal mode restored.")

    def poll_event(self) -> InputEvent | None:
        """Return the next decoded key event, or ``None`` if none is pending.

        Unknown keys are consumed and skipped. End of input yields QUIT.
        """
        if self._closed:
            return InputEvent.QUIT
        while True:
            sequence = self._read_sequence()
            if sequence is None:
                return None
            if sequence == "":
                self._closed = True
                return InputEvent.QUIT
            event = decode_key(sequence)
            if event is not None:
                return event

    def wait_for_key(self, interval: float = 0.05) -> None:
        """Block until any key is pressed, polling every *interval* seconds."""
        while self._read_sequence() is None:
            time.sleep(interval)

    def _read_sequence(self) -> str | None:
        """Read one raw key sequence; ``""`` means end of input."""
        if _IS_WINDOWS:
            return self._read_windows()
        return self._read_posix()

    def _read_posix(self) -> str | None:
        ch = self._read_char()
        if ch != ESCAPE:
            return ch
        second = self._read_char()
        if second != "[":
            return ESCAPE
        third = self._read_char()
        return ESCAPE + "[" + (third or "")

    def _read_char(self) -> str | None:
        readable, _, _ = select.select([self._fd], [], [], 0)
        if not readable:
            return None
        data = os.read(self._fd, 1)
        return data.decode("latin-1")

    def _read_windows(self) -> str | None:
        import msvcrt

        if not msvcrt.kbhit():
            return None
        ch = msvcrt.getwch()
        if ch in WINDOWS_PREFIXES:
            return ch + msvcrt.getwch()
        return ch

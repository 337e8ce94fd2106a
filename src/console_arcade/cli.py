"""Command-line launcher for the console games."""

from __future__ import annotations

import argparse
import logging
import sys
import time

logger = logging.getLogger(__name__)

_INTRO_LINES = (
    "int main() {",
    "    // initializing game engine",
    "    SnakeGame game;",
    "    game.run();",
    "    return 0;",
    "}",
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="console-arcade",
        description="Console snake and tic-tac-toe.",
    )
    parser.add_argument(
        "--log-level", type=str, default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (logs go to stderr).",
    )
    sub = parser.add_subparsers(dest="command", help="Available games.")

    # --- snake ---
    snake_p = sub.add_parser("snake", help="Play real-time snake.")
    snake_p.add_argument("--width", type=int, default=None)
    snake_p.add_argument("--height", type=int, default=None)
    snake_p.add_argument(
        "--tick-ms", type=int, default=None,
        help="Milliseconds between snake moves (lower is faster).",
    )
    snake_p.add_argument("--seed", type=int, default=None)
    snake_p.add_argument("--name", type=str, default=None)
    snake_p.add_argument(
        "--no-intro", action="store_true",
        help="Skip the title screen and name prompt.",
    )

    # --- tictactoe ---
    ttt_p = sub.add_parser("tictactoe", help="Play tic-tac-toe.")
    ttt_p.add_argument(
        "--mode", type=str, default=None,
        choices=["two-player", "computer"],
        help="Skip the mode menu.",
    )
    ttt_p.add_argument(
        "--first", type=str, default=None,
        choices=["human", "computer"],
        help="Who moves first against the computer.",
    )

    return parser


def _snake_intro(name: str | None = None, stdout=None, stdin=None) -> str:
    """Title screen and start prompt. Returns the player's name.

    The name is only asked for when *name* is not given.
    """
    from console_arcade.terminal import clear_screen, type_effect

    stdout = stdout if stdout is not None else sys.stdout
    stdin = stdin if stdin is not None else sys.stdin
    clear_screen(stdout)
    for line in (
        "+-------------------------------------------+",
        "|                                           |",
        "|               S N A K E   G A M E         |",
        "|                                           |",
        "+-------------------------------------------+",
    ):
        stdout.write(f"{line}\n")
    stdout.write("\nControls: WASD or Arrow keys.\n\n")
    if name is None:
        stdout.write("Enter your name (press Enter to accept): ")
        stdout.flush()
        name = stdin.readline().strip() or "Player"

    stdout.write("\nPreparing game...\n\n")
    for line in _INTRO_LINES:
        stdout.write("    ")
        type_effect(line, delay=0.025, stream=stdout)
        stdout.write("\n")
        time.sleep(0.2)
    stdout.write("\nPress any key to start...\n")
    stdout.flush()
    return name


def _run_snake(args: argparse.Namespace) -> int:
    from console_arcade.config import SnakeConfig
    from console_arcade.errors import TerminalUnavailableError
    from console_arcade.snake.loop import GameLoop, LoopResult
    from console_arcade.snake.render import game_over_message, render_world
    from console_arcade.snake.world import SnakeWorld
    from console_arcade.terminal import RawTerminal, draw, require_tty

    flag_map = {
        "width": "width",
        "height": "height",
        "tick_ms": "tick_interval_ms",
        "seed": "seed",
    }
    overrides = {
        cfg_name: getattr(args, cli_name, None)
        for cli_name, cfg_name in flag_map.items()
    }
    try:
        config = SnakeConfig().with_overrides(**overrides)
    except ValueError as exc:
        print(f"console-arcade snake: error: {exc}", file=sys.stderr)  # noqa: T201
        return 2

    try:
        require_tty(sys.stdin)
        name = args.name or "Player"
        if not args.no_intro:
            name = _snake_intro(args.name or None)

        world = SnakeWorld(
            width=config.width,
            height=config.height,
            initial_length=config.initial_length,
            food_reward=config.food_reward,
            seed=config.seed,
        )
        with RawTerminal() as term:
            if not args.no_intro:
                term.wait_for_key()
            loop = GameLoop(
                world,
                term,
                render=lambda w: draw(render_world(w, name)),
                tick_interval=config.tick_interval,
                poll_interval=config.poll_interval,
            )
            try:
                result = loop.run()
            except KeyboardInterrupt:
                logger.info("Interrupted; treating as quit.")
                result = LoopResult(
                    score=world.score, ticks=world.tick_count, quit=True,
                )
    except TerminalUnavailableError as exc:
        print(f"console-arcade snake: {exc}", file=sys.stderr)  # noqa: T201
        return 1

    print(f"\n{game_over_message(world, name)}")  # noqa: T201
    logger.info(
        "Snake finished: score=%d ticks=%d quit=%s.",
        result.score, result.ticks, result.quit,
    )
    return 0


def _run_tictactoe(args: argparse.Namespace) -> int:
    from console_arcade.config import TicTacToeConfig
    from console_arcade.tictactoe.session import (
        GameMode,
        StreamConsole,
        run_session,
    )

    first_map = {"human": True, "computer": False}
    config = TicTacToeConfig(
        mode=GameMode(args.mode) if args.mode else None,
        human_first=first_map.get(args.first),
    )
    console = StreamConsole()
    try:
        run_session(console, mode=config.mode, human_first=config.human_first)
    except EOFError:
        console.write("\n")
        logger.info("Input closed; leaving tic-tac-toe.")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``console-arcade`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "snake": _run_snake,
        "tictactoe": _run_tictactoe,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())

"""Command-line entry point for Console Snake."""

from __future__ import annotations

import argparse
import curses
import logging
import os
import signal
import sys

from console_snake.config import (
    DEFAULT_HAZARDS,
    MESSAGE_HEIGHT,
    MESSAGE_WIDTH,
    MORE_HAZARDS,
    WINDOW_TITLE,
    ConfigError,
    GameConfig,
)
from console_snake.game import GameState
from console_snake.loop import (
    EXIT_STATUS,
    TERMINATE_MESSAGE,
    GameLoop,
    install_interrupt_handler,
)
from console_snake.terminal import CursesTerminal, TerminalIO

logger = logging.getLogger(__name__)

# Environment variable naming a log file. Curses owns the screen, so logs
# never go to stderr.
LOG_ENV = "CONSOLE_SNAKE_LOG"

_MORE_HAZARDS_FLAG = "--more-hazards"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="console-snake",
        description="Steer a snake around the terminal, eat food, avoid hazards.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        _MORE_HAZARDS_FLAG, action="store_true",
        help=f"Place {MORE_HAZARDS} hazards instead of {DEFAULT_HAZARDS}.",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse *argv*; the flag is case-insensitive and unknown arguments are ignored."""
    raw = sys.argv[1:] if argv is None else argv
    normalized = [
        arg.lower() if arg.lower() == _MORE_HAZARDS_FLAG else arg
        for arg in raw
        # "--more-hazards=..." is not the flag; argparse would reject it.
        if not arg.lower().startswith(_MORE_HAZARDS_FLAG + "=")
    ]
    args, _ = _build_parser().parse_known_args(normalized)
    return args


def build_config(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        hazard_count=MORE_HAZARDS if args.more_hazards else DEFAULT_HAZARDS,
    )


def _configure_logging() -> None:
    log_file = os.environ.get(LOG_ENV)
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=logging.INFO,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )
    else:
        logging.getLogger("console_snake").addHandler(logging.NullHandler())


def setup_terminal(terminal: TerminalIO, config: GameConfig) -> bool:
    """Hide the cursor, set the title and make room for board and messages.

    Returns ``False`` if the window is too small and could not be grown.
    """
    terminal.set_cursor_visible(False)
    terminal.set_title(WINDOW_TITLE)

    min_width = max(config.width, MESSAGE_WIDTH)
    min_height = config.height + MESSAGE_HEIGHT
    width, height = terminal.get_window_size()
    if width < min_width or height < min_height:
        return terminal.set_window_size(
            max(width, min_width), max(height, min_height),
        )
    return True


def show_too_small(terminal: TerminalIO, config: GameConfig) -> None:
    """Tell the player the window cannot hold the game and wait for a key."""
    width, height = terminal.get_window_size()
    terminal.display_text(
        0,
        "Terminal too small!\n"
        f"Need at least {max(config.width, MESSAGE_WIDTH)}x"
        f"{config.height + MESSAGE_HEIGHT}, got {width}x{height}\n"
        "Press any key to quit",
    )
    terminal.flush()
    terminal.read_key_blocking()


def _play(stdscr, config: GameConfig) -> tuple[int, int]:
    terminal = CursesTerminal(stdscr)
    if not setup_terminal(terminal, config):
        logger.error("Window too small for a %dx%d board.", config.width, config.height)
        show_too_small(terminal, config)
        return EXIT_STATUS, 0

    game = GameState(terminal, config)
    loop = GameLoop(game)
    previous = install_interrupt_handler(loop)
    try:
        status = loop.run()
    finally:
        signal.signal(signal.SIGINT, previous)
    return status, game.score


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``console-snake`` command."""
    _configure_logging()
    args = parse_args(argv)

    try:
        config = build_config(args)
    except ConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        print(f"console-snake: {exc}", file=sys.stderr)  # noqa: T201
        return 2

    status, score = curses.wrapper(_play, config)
    # The curses screen is gone by now; repeat the farewell on the console.
    print(TERMINATE_MESSAGE)  # noqa: T201
    print(f"Final score: {score}")  # noqa: T201
    return status


if __name__ == "__main__":
    sys.exit(main())

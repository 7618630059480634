"""Time-stepped game loop: input, movement, game over and termination."""

from __future__ import annotations

import enum
import functools
import logging
import signal
import time
from typing import TYPE_CHECKING, Any

from console_snake.config import POLL_INTERVAL, STEP_INTERVAL
from console_snake.snake import Direction
from console_snake.terminal import (
    KEY_DOWN,
    KEY_LEFT,
    KEY_PLAY,
    KEY_QUIT,
    KEY_RIGHT,
    KEY_UP,
)

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import FrameType

    from console_snake.game import GameState

    _SignalHandler = Callable[[int, FrameType | None], Any] | int | None

logger = logging.getLogger(__name__)

STEERING: dict[str, Direction] = {
    KEY_UP: Direction.UP,
    KEY_DOWN: Direction.DOWN,
    KEY_LEFT: Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT,
}

GAME_OVER_MESSAGE = "Game Over. Press 'p' to play again. Press 'q' to quit."
TERMINATE_MESSAGE = "Terminating game..."

# Status returned by run(); a deliberate quit is not a success.
EXIT_STATUS = 1


class LoopState(enum.Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"
    TERMINATED = "terminated"


class GameLoop:
    """Drives a :class:`GameState` until the player quits.

    Movement happens at most once per ``STEP_INTERVAL`` while input is
    polled every ``POLL_INTERVAL``, so pressing keys faster never makes
    the snake faster. The clock must be monotonic.
    """

    def __init__(
        self,
        game: GameState,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.game = game
        self.clock = clock
        self.sleep = sleep
        self.state = LoopState.PLAYING
        self.pending_direction = Direction.RIGHT
        self.next_move_at = 0.0
        self.interrupted = False
        # Lets modal waits inside the game notice an interrupt.
        game.interrupted = lambda: self.interrupted

    def request_termination(self) -> None:
        """Ask the loop to stop at its next check point."""
        self.interrupted = True

    def start(self) -> None:
        """Build the first board, with instructions, and begin playing."""
        self.game.reset(True)
        self.pending_direction = self.game.snake.direction
        self.next_move_at = self.clock()
        self.state = LoopState.PLAYING

    def tick(self) -> LoopState:
        """Run one poll of the PLAYING state."""
        for key in self.game.terminal.read_available_keys():
            if key in STEERING:
                self.pending_direction = STEERING[key]

        now = self.clock()
        if now >= self.next_move_at:
            if not self.game.snake.move(self.pending_direction):
                logger.info("Snake crashed with score %d.", self.game.score)
                self.state = LoopState.GAME_OVER
                return self.state
            self.next_move_at = now + STEP_INTERVAL

        self.game.display_score()
        self.sleep(POLL_INTERVAL)
        return self.state

    def game_over(self) -> LoopState:
        """Wait for the player to restart or quit."""
        self.game.display_message(GAME_OVER_MESSAGE)
        key = self.game.wait_for_key(KEY_PLAY, KEY_QUIT)
        if key == KEY_PLAY:
            self.game.reset(False)
            self.pending_direction = self.game.snake.direction
            self.next_move_at = self.clock() + STEP_INTERVAL
            self.state = LoopState.PLAYING
        elif key == KEY_QUIT:
            self.terminate()
        return self.state

    def terminate(self) -> None:
        """Show the termination message and stop the loop."""
        self.game.display_message(TERMINATE_MESSAGE)
        self.state = LoopState.TERMINATED
        logger.info("Game terminated with score %d.", self.game.score)

    def run(self) -> int:
        """Play until quit or interrupt. Returns the process exit status."""
        self.start()
        while self.state is not LoopState.TERMINATED:
            if self.interrupted:
                self.terminate()
            elif self.state is LoopState.PLAYING:
                self.tick()
            else:
                self.game_over()
        return EXIT_STATUS


def _on_interrupt(loop: GameLoop, signum: int, frame: FrameType | None) -> None:
    logger.info("Received signal %d, stopping.", signum)
    loop.request_termination()


def install_interrupt_handler(loop: GameLoop) -> _SignalHandler:
    """Route SIGINT to *loop* instead of raising KeyboardInterrupt.

    Returns the previously installed handler.
    """
    return signal.signal(signal.SIGINT, functools.partial(_on_interrupt, loop))

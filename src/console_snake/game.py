"""Board owner: grid, snake, score and item placement."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from console_snake.config import MESSAGE_WIDTH, GameConfig
from console_snake.grid import GLYPHS, CellType, Grid
from console_snake.snake import Direction, Snake
from console_snake.terminal import KEY_PLAY

if TYPE_CHECKING:
    from collections.abc import Callable

    from console_snake.terminal import TerminalIO

logger = logging.getLogger(__name__)

# Lines of the message area cleared before a new message is written.
_MESSAGE_LINES = 6

INSTRUCTIONS = (
    "- Use WASD to steer the snake up, down, left, and right.\n"
    f"- Collect food ({GLYPHS[CellType.FOOD]}) for more points.\n"
    f"- Avoid hazards ({GLYPHS[CellType.HAZARD]}) and keep moving to stay alive.\n"
    "\n"
    "Tip: Use a console font with equal height and width.\n"
    "Press 'p' to start playing."
)


class PlacementError(RuntimeError):
    """Raised when an item cannot be placed within the attempt budget."""


class GameState:
    """Owns the grid, the snake and the score, and rebuilds them on reset.

    Every cell change goes through :meth:`draw`, which keeps the grid and
    the terminal in step. *interrupted* is polled by blocking waits so an
    interrupt can end them; :class:`~console_snake.loop.GameLoop` binds it
    to its own flag.
    """

    def __init__(
        self,
        terminal: TerminalIO,
        config: GameConfig | None = None,
        interrupted: Callable[[], bool] | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self.terminal = terminal
        self.rng = np.random.default_rng(self.config.seed)
        self.grid = Grid(width=self.config.width, height=self.config.height)
        self.snake: Snake | None = None
        self.score = 0
        self.food_placed = 0
        self.hazards_placed = 0
        self.interrupted = interrupted or (lambda: False)

    # --- grid pass-through ---

    def get_symbol(self, x: int, y: int) -> CellType:
        """Return the cell type at ``(x, y)``."""
        return self.grid.get(x, y)

    def draw(self, x: int, y: int, cell: CellType) -> None:
        """Store *cell* at ``(x, y)`` and render it."""
        self.grid.set(x, y, cell)
        self.terminal.draw_symbol(x, y, cell)

    # --- messages ---

    def display_score(self) -> None:
        message = f"Score: {self.score}"
        self.terminal.display_text(self.grid.height + 1, message.ljust(MESSAGE_WIDTH))
        self.terminal.flush()

    def display_message(self, message: str) -> None:
        """Blank the message area, then write *message* at its top."""
        row = self.grid.height + 3
        self.terminal.display_text(row, "\n".join([" " * MESSAGE_WIDTH] * _MESSAGE_LINES))
        self.terminal.display_text(row, message)
        self.terminal.flush()

    def wait_for_key(self, *keys: str) -> str | None:
        """Block until one of *keys* is pressed.

        Returns ``None`` if an interrupt was requested while waiting.
        """
        while not self.interrupted():
            key = self.terminal.read_key_blocking()
            if key in keys:
                return key
        return None

    # --- lifecycle ---

    def reset(self, show_instructions: bool) -> None:
        """Start a fresh board.

        Walls the border, centres a new snake facing right, scatters food
        and hazards, then optionally shows the instructions and waits for
        the start key.
        """
        self.terminal.clear()
        self.score = 0

        for y in range(self.grid.height):
            for x in range(self.grid.width):
                cell = CellType.WALL if self.grid.is_border(x, y) else CellType.EMPTY
                self.draw(x, y, cell)

        start_x, start_y = self.config.start
        self.snake = Snake(start_x, start_y, self, Direction.RIGHT)

        self.food_placed = self._scatter(CellType.FOOD, self.config.food_count)
        self.hazards_placed = self._scatter(
            CellType.HAZARD,
            self.config.hazard_count,
            # Keep the snake's opening straight line clear.
            exclude=lambda x, y: y == self.snake.y and x >= self.snake.x,
        )
        logger.info(
            "Board reset: %d food, %d hazards, seed=%s.",
            self.food_placed, self.hazards_placed, self.config.seed,
        )

        if show_instructions:
            self.display_message(INSTRUCTIONS)
            if self.wait_for_key(KEY_PLAY) is not None:
                self.display_message("")

        self.display_score()

    def _scatter(
        self,
        cell: CellType,
        count: int,
        exclude: Callable[[int, int], bool] | None = None,
    ) -> int:
        """Place *count* items on distinct empty interior cells.

        Uses rejection sampling, giving up after
        ``config.max_placement_attempts`` tries for any single item.
        """
        placed = 0
        rejected = 0
        attempts = 0
        while placed < count:
            if attempts >= self.config.max_placement_attempts:
                raise PlacementError(
                    f"Could not place {cell.name} item {placed + 1} of {count} "
                    f"after {attempts} attempts."
                )
            attempts += 1
            x = int(self.rng.integers(1, self.grid.width - 1))
            y = int(self.rng.integers(1, self.grid.height - 1))
            if exclude is not None and exclude(x, y):
                rejected += 1
                continue
            if self.grid.get(x, y) != CellType.EMPTY:
                rejected += 1
                continue
            self.draw(x, y, cell)
            placed += 1
            attempts = 0
        logger.debug("Placed %d %s items, %d rejected draws.", placed, cell.name, rejected)
        return placed

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "score": self.score,
            "food": self.food_placed,
            "hazards": self.hazards_placed,
            "grid": self.grid.to_dict(),
            "snake": self.snake.to_dict() if self.snake is not None else None,
        }

"""Snake head representation and movement logic."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from console_snake.config import FOOD_BONUS
from console_snake.grid import CellType

if TYPE_CHECKING:
    from console_snake.game import GameState


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """The snake's head, moving over the board owned by a :class:`GameState`.

    Only the head is tracked. Every cell the head has visited stays marked
    as ``SNAKE`` on the grid until the next reset, so the trail itself is
    the body and it never shrinks.
    """

    def __init__(
        self,
        x: int,
        y: int,
        board: GameState,
        direction: Direction = Direction.RIGHT,
    ) -> None:
        self.x = x
        self.y = y
        self.direction = direction
        self.board = board
        board.draw(x, y, CellType.SNAKE)

    @property
    def head(self) -> tuple[int, int]:
        """Return the head coordinate."""
        return self.x, self.y

    def resolve(self, requested: Direction) -> Direction:
        """Return *requested*, or the current facing if it is a 180° reversal."""
        if _OPPOSITES[requested] == self.direction:
            return self.direction
        return requested

    def next_position(self, direction: Direction) -> tuple[int, int]:
        """Compute the cell one step away in *direction* without moving."""
        dx, dy = direction.value
        return self.x + dx, self.y + dy

    def move(self, requested: Direction) -> bool:
        """Move the head one step.

        Returns ``False`` on collision, leaving head and facing unchanged.
        """
        direction = self.resolve(requested)
        nx, ny = self.next_position(direction)
        target = self.board.get_symbol(nx, ny)

        if target not in (CellType.EMPTY, CellType.FOOD):
            return False

        if target == CellType.FOOD:
            self.board.score += FOOD_BONUS
        else:
            self.board.score += 1

        # The vacated cell keeps its SNAKE mark.
        self.board.draw(nx, ny, CellType.SNAKE)
        self.x, self.y = nx, ny
        self.direction = direction
        return True

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "head": [self.x, self.y],
            "direction": self.direction.name,
        }

"""Grid representation for the play area."""

from __future__ import annotations

import enum

import numpy as np


class CellType(enum.IntEnum):
    """Integer codes stored in the grid array."""

    EMPTY = 0
    WALL = 1
    SNAKE = 2
    FOOD = 3
    HAZARD = 4


# Glyph drawn on the terminal for each cell type.
GLYPHS: dict[CellType, str] = {
    CellType.EMPTY: " ",
    CellType.WALL: "x",
    CellType.SNAKE: "*",
    CellType.FOOD: "+",
    CellType.HAZARD: "@",
}


class Grid:
    """NumPy-backed play area addressed by ``(x, y)`` screen coordinates.

    ``x`` is the column and ``y`` the row, so the backing array has shape
    ``(height, width)`` and is indexed ``[y, x]``. Coordinates outside the
    grid are a caller error and raise :class:`IndexError`; negative values
    are never wrapped the way plain NumPy indexing would.
    """

    def __init__(self, width: int = 30, height: int = 30) -> None:
        if width < 3 or height < 3:
            raise ValueError("Grid dimensions must be at least 3×3.")
        self.width = width
        self.height = height
        self.cells = np.zeros((height, width), dtype=np.int8)

    def clear(self) -> None:
        """Reset all cells to empty."""
        self.cells[:] = CellType.EMPTY

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def is_border(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies on the outer ring."""
        return x in (0, self.width - 1) or y in (0, self.height - 1)

    @property
    def interior_capacity(self) -> int:
        """Number of cells inside the border."""
        return (self.width - 2) * (self.height - 2)

    def get(self, x: int, y: int) -> CellType:
        """Return the cell type at the given coordinate."""
        self._check(x, y)
        return CellType(self.cells[y, x])

    def set(self, x: int, y: int, cell_type: CellType) -> None:
        """Set the cell type at the given coordinate."""
        self._check(x, y)
        self.cells[y, x] = cell_type

    def count(self, cell_type: CellType) -> int:
        """Return how many cells hold *cell_type*."""
        return int(np.count_nonzero(self.cells == cell_type))

    def cells_of(self, cell_type: CellType) -> list[tuple[int, int]]:
        """Return the ``(x, y)`` coordinates of every cell holding *cell_type*."""
        ys, xs = np.where(self.cells == cell_type)
        return list(zip(xs.tolist(), ys.tolist(), strict=True))

    def render_rows(self) -> list[str]:
        """Return the grid as text, one string per row."""
        return [
            "".join(GLYPHS[CellType(v)] for v in row)
            for row in self.cells.tolist()
        ]

    def to_dict(self) -> dict:
        """Serialize grid state to a dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "cells": self.cells.tolist(),
        }

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(
                f"({x}, {y}) is outside the {self.width}×{self.height} grid."
            )

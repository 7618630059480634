"""Console Snake: terminal snake game engine."""

from console_snake.config import ConfigError, GameConfig
from console_snake.game import GameState, PlacementError
from console_snake.grid import CellType, Grid
from console_snake.loop import GameLoop, LoopState
from console_snake.snake import Direction, Snake

__all__ = [
    "CellType",
    "ConfigError",
    "Direction",
    "GameConfig",
    "GameLoop",
    "GameState",
    "Grid",
    "LoopState",
    "PlacementError",
    "Snake",
]

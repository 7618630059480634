"""Game configuration and fixed timing/scoring constants."""

from __future__ import annotations

from dataclasses import asdict, dataclass

# Score awarded for eating a food item.
FOOD_BONUS = 10

# Seconds between two snake steps.
STEP_INTERVAL = 0.1

# Seconds between two input polls.
POLL_INTERVAL = 0.005

# Size of the text area below the play area.
MESSAGE_WIDTH = 60
MESSAGE_HEIGHT = 10

DEFAULT_HAZARDS = 10
MORE_HAZARDS = 100

WINDOW_TITLE = "Snake Snake Snake"


class ConfigError(ValueError):
    """Raised when a :class:`GameConfig` cannot produce a playable board."""


@dataclass(frozen=True)
class GameConfig:
    """Board dimensions, item counts and placement settings."""

    width: int = 30
    height: int = 30
    food_count: int = 10
    hazard_count: int = DEFAULT_HAZARDS
    seed: int | None = None
    max_placement_attempts: int = 10_000

    def __post_init__(self) -> None:
        if self.width < 3 or self.height < 3:
            raise ConfigError("width and height must each be at least 3.")
        if self.food_count < 0 or self.hazard_count < 0:
            raise ConfigError("food_count and hazard_count must not be negative.")
        if self.max_placement_attempts < 1:
            raise ConfigError("max_placement_attempts must be at least 1.")

        if self.food_count > self.interior_cells - 1:
            raise ConfigError(
                f"food_count {self.food_count} does not fit the "
                f"{self.interior_cells - 1} free interior cells."
            )
        # Hazards may not use the snake's starting row segment, food may; the
        # bound below holds however the food happens to land.
        free = self.interior_cells - self.protected_cells
        if self.food_count + self.hazard_count > free:
            raise ConfigError(
                f"food_count + hazard_count ({self.food_count + self.hazard_count}) "
                f"exceeds the {free} cells available to them."
            )

    @property
    def start(self) -> tuple[int, int]:
        """The snake's starting cell at the centre of the grid."""
        return self.width // 2, self.height // 2

    @property
    def interior_cells(self) -> int:
        return (self.width - 2) * (self.height - 2)

    @property
    def protected_cells(self) -> int:
        """Interior cells on the start row at or right of the start column."""
        return (self.width - 1) - self.start[0]

    def to_dict(self) -> dict:
        return asdict(self)

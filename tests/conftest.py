"""Shared fixtures: a scripted terminal and a manual clock."""

from __future__ import annotations

from collections import deque

import pytest

from console_snake.config import GameConfig
from console_snake.game import GameState
from console_snake.grid import CellType


class FakeTerminal:
    """Records output and replays scripted key presses.

    ``polls`` is a queue of key batches returned by successive
    :meth:`read_available_keys` calls; ``blocking`` feeds
    :meth:`read_key_blocking`, which returns ``None`` once exhausted.
    """

    def __init__(self, width: int = 80, height: int = 50) -> None:
        self.size = (width, height)
        self.symbols: dict[tuple[int, int], CellType] = {}
        self.texts: list[tuple[int, str]] = []
        self.polls: deque[list[str]] = deque()
        self.blocking: deque[str] = deque()
        self.clears = 0
        self.cursor_visible = True
        self.title = ""
        self.resized_to: tuple[int, int] | None = None
        self.accept_resize = True
        self.flushes = 0

    def clear(self) -> None:
        self.clears += 1
        self.symbols.clear()

    def draw_symbol(self, x, y, cell) -> None:
        self.symbols[(x, y)] = cell

    def read_available_keys(self) -> list[str]:
        return self.polls.popleft() if self.polls else []

    def read_key_blocking(self) -> str | None:
        return self.blocking.popleft() if self.blocking else None

    def display_text(self, row, text) -> None:
        self.texts.append((row, text))

    def get_window_size(self) -> tuple[int, int]:
        return self.size

    def set_window_size(self, width, height) -> bool:
        self.resized_to = (width, height)
        if self.accept_resize:
            self.size = (width, height)
        return self.accept_resize

    def set_cursor_visible(self, visible) -> None:
        self.cursor_visible = visible

    def set_title(self, title) -> None:
        self.title = title

    def flush(self) -> None:
        self.flushes += 1

    def shown(self, fragment: str) -> bool:
        return any(fragment in text for _, text in self.texts)


class FakeClock:
    """Manual monotonic clock; ``sleep`` advances it."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def terminal() -> FakeTerminal:
    return FakeTerminal()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def game(terminal) -> GameState:
    """A reset 30×30 board with a fixed seed."""
    state = GameState(terminal, GameConfig(seed=0))
    state.reset(False)
    return state


@pytest.fixture
def blank_game(terminal) -> GameState:
    """A reset 30×30 board without food or hazards."""
    state = GameState(terminal, GameConfig(food_count=0, hazard_count=0, seed=0))
    state.reset(False)
    return state

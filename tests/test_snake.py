"""Tests for the Snake module."""

import pytest

from console_snake.grid import CellType
from console_snake.snake import Direction, Snake

OPPOSITE_PAIRS = [
    (Direction.UP, Direction.DOWN),
    (Direction.DOWN, Direction.UP),
    (Direction.LEFT, Direction.RIGHT),
    (Direction.RIGHT, Direction.LEFT),
]


class TestSnakeInit:
    def test_starts_centered_facing_right(self, blank_game):
        snake = blank_game.snake
        assert snake.head == (15, 15)
        assert snake.direction == Direction.RIGHT

    def test_start_cell_marked(self, blank_game):
        assert blank_game.get_symbol(15, 15) == CellType.SNAKE

    def test_custom_direction(self, blank_game):
        snake = Snake(5, 5, blank_game, Direction.UP)
        assert snake.direction == Direction.UP
        assert blank_game.get_symbol(5, 5) == CellType.SNAKE


class TestDirectionFilter:
    @pytest.mark.parametrize(("facing", "requested"), OPPOSITE_PAIRS)
    def test_reversal_resolves_to_facing(self, blank_game, facing, requested):
        snake = Snake(10, 10, blank_game, facing)
        assert snake.resolve(requested) == facing

    def test_perpendicular_turn_allowed(self, blank_game):
        snake = blank_game.snake
        assert snake.resolve(Direction.UP) == Direction.UP
        assert snake.resolve(Direction.DOWN) == Direction.DOWN

    @pytest.mark.parametrize(("facing", "requested"), OPPOSITE_PAIRS)
    def test_reversed_move_matches_straight_move(self, terminal, facing, requested):
        from console_snake.config import GameConfig
        from console_snake.game import GameState

        results = []
        for direction in (requested, facing):
            board = GameState(terminal, GameConfig(food_count=0, hazard_count=0))
            board.reset(False)
            snake = Snake(10, 10, board, facing)
            moved = snake.move(direction)
            results.append((moved, snake.head, snake.direction, board.score))
        assert results[0] == results[1]

    def test_left_while_facing_right(self, blank_game):
        snake = blank_game.snake
        assert snake.move(Direction.LEFT)
        assert snake.head == (16, 15)
        assert snake.direction == Direction.RIGHT


class TestSnakeMovement:
    def test_move_onto_empty(self, blank_game):
        snake = blank_game.snake
        assert snake.move(Direction.RIGHT)
        assert snake.head == (16, 15)
        assert blank_game.score == 1
        assert blank_game.get_symbol(16, 15) == CellType.SNAKE

    def test_turn_updates_direction(self, blank_game):
        snake = blank_game.snake
        assert snake.move(Direction.UP)
        assert snake.head == (15, 14)
        assert snake.direction == Direction.UP

    def test_move_onto_food(self, blank_game):
        blank_game.draw(16, 15, CellType.FOOD)
        assert blank_game.snake.move(Direction.RIGHT)
        assert blank_game.score == 10
        assert blank_game.get_symbol(16, 15) == CellType.SNAKE

    def test_trail_is_permanent(self, blank_game):
        snake = blank_game.snake
        for _ in range(3):
            snake.move(Direction.RIGHT)
        for x in range(15, 19):
            assert blank_game.get_symbol(x, 15) == CellType.SNAKE
        assert blank_game.grid.count(CellType.SNAKE) == 4

    def test_next_position(self, blank_game):
        snake = blank_game.snake
        assert snake.next_position(Direction.UP) == (15, 14)
        assert snake.next_position(Direction.DOWN) == (15, 16)
        assert snake.next_position(Direction.LEFT) == (14, 15)
        assert snake.next_position(Direction.RIGHT) == (16, 15)


class TestSnakeCollision:
    @pytest.mark.parametrize(
        "obstacle", [CellType.WALL, CellType.SNAKE, CellType.HAZARD],
    )
    def test_blocked_move_fails(self, blank_game, obstacle):
        blank_game.draw(15, 14, obstacle)
        snake = blank_game.snake
        assert not snake.move(Direction.UP)
        assert snake.head == (15, 15)
        assert snake.direction == Direction.RIGHT
        assert blank_game.score == 0
        assert blank_game.get_symbol(15, 14) == obstacle

    def test_runs_into_wall(self, blank_game):
        snake = blank_game.snake
        for _ in range(13):
            assert snake.move(Direction.RIGHT)
        assert snake.head == (28, 15)
        assert not snake.move(Direction.RIGHT)
        assert snake.head == (28, 15)
        assert blank_game.score == 13

    def test_runs_into_own_trail(self, blank_game):
        snake = blank_game.snake
        assert snake.move(Direction.UP)
        assert snake.move(Direction.LEFT)
        assert snake.move(Direction.DOWN)
        # (15, 15) is the starting cell, still marked.
        assert not snake.move(Direction.RIGHT)
        assert snake.head == (14, 15)
        assert snake.direction == Direction.DOWN


class TestSnakeSerialization:
    def test_to_dict(self, blank_game):
        assert blank_game.snake.to_dict() == {
            "head": [15, 15],
            "direction": "RIGHT",
        }

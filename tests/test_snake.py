"""Tests for the Snake module."""

import pytest

from grid_snake.direction import Direction
from grid_snake.grid import Grid
from grid_snake.snake import Snake


class TestSnakeInit:
    def test_spawn_centred_facing_right(self):
        snake = Snake.spawn(Grid())
        assert list(snake.body) == [(10, 10), (9, 10), (8, 10)]
        assert snake.head == (10, 10)
        assert snake.tail == (8, 10)

    def test_spawn_custom_length(self):
        snake = Snake.spawn(Grid(width=10, height=10), length=5)
        assert len(snake) == 5
        assert snake.tail == (1, 5)

    def test_spawn_minimum_length(self):
        with pytest.raises(ValueError, match="at least 3"):
            Snake.spawn(Grid(), length=2)

    def test_spawn_too_long_for_grid(self):
        with pytest.raises(ValueError, match="does not fit"):
            Snake.spawn(Grid(width=4, height=4), length=4)

    def test_empty_body_rejected(self):
        with pytest.raises(ValueError, match="at least 1"):
            Snake([])


class TestSnakeMovement:
    def test_next_head(self):
        snake = Snake([(10, 10), (9, 10), (8, 10)])
        assert snake.next_head(Direction.RIGHT) == (11, 10)
        assert snake.next_head(Direction.UP) == (10, 9)
        assert snake.next_head(Direction.DOWN) == (10, 11)

    def test_next_head_is_pure(self):
        snake = Snake([(10, 10), (9, 10), (8, 10)])
        snake.next_head(Direction.UP)
        assert list(snake.body) == [(10, 10), (9, 10), (8, 10)]

    def test_advance_without_growth(self):
        snake = Snake([(10, 10), (9, 10), (8, 10)])
        vacated = snake.advance((11, 10))
        assert list(snake.body) == [(11, 10), (10, 10), (9, 10)]
        assert vacated == (8, 10)

    def test_advance_with_growth(self):
        snake = Snake([(10, 10), (9, 10), (8, 10)])
        vacated = snake.advance((11, 10), grew=True)
        assert list(snake.body) == [(11, 10), (10, 10), (9, 10), (8, 10)]
        assert vacated is None


class TestSnakeCollision:
    def test_free_cell(self):
        snake = Snake([(10, 10), (9, 10), (8, 10)])
        assert not snake.will_collide((11, 10), Grid())

    def test_wall(self):
        snake = Snake([(19, 10), (18, 10), (17, 10)])
        grid = Grid()
        assert snake.will_collide((20, 10), grid)
        assert snake.will_collide((5, -1), grid)

    def test_body(self):
        snake = Snake([(5, 5), (5, 6), (6, 6), (6, 5), (6, 4)])
        assert snake.will_collide((6, 5), Grid())

    def test_tail_counts_as_occupied(self):
        # Head (5,5) moving down into the tail (5,6) of a 4-cell loop.
        snake = Snake([(5, 5), (4, 5), (4, 6), (5, 6)])
        assert snake.will_collide((5, 6), Grid())

    def test_has_duplicates(self):
        assert not Snake([(1, 1), (1, 2)]).has_duplicates()
        assert Snake([(1, 1), (1, 2), (1, 1)]).has_duplicates()

    def test_cells(self):
        snake = Snake([(1, 1), (1, 2)])
        assert snake.cells() == frozenset({(1, 1), (1, 2)})

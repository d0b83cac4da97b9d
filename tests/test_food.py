"""Tests for the FoodPlacer module."""

import numpy as np
import pytest

from grid_snake.food import FoodPlacer
from grid_snake.grid import Grid


class TestFoodPlacerInit:
    def test_invalid_max_attempts(self):
        with pytest.raises(ValueError, match="at least 1"):
            FoodPlacer(Grid(), max_attempts=0)


class TestFoodPlacement:
    def test_never_on_occupied_cell(self):
        grid = Grid(width=5, height=5)
        placer = FoodPlacer(grid, rng=np.random.default_rng(1))
        occupied = {(x, y) for x in range(5) for y in range(4)}
        for _ in range(50):
            cell = placer.place(occupied)
            assert cell is not None
            assert cell not in occupied
            assert grid.in_bounds(*cell)

    def test_single_free_cell_found(self):
        grid = Grid(width=4, height=4)
        placer = FoodPlacer(grid, rng=np.random.default_rng(7), max_attempts=1)
        occupied = {(x, y) for x in range(4) for y in range(4)} - {(2, 3)}
        assert placer.place(occupied) == (2, 3)

    def test_full_grid_returns_none(self):
        grid = Grid(width=4, height=4)
        placer = FoodPlacer(grid)
        occupied = {(x, y) for x in range(4) for y in range(4)}
        assert placer.place(occupied) is None

    def test_deterministic(self):
        """Same seed produces the same sequence of placements."""
        assert self._place_with_seed(42) == self._place_with_seed(42)

    def test_different_seeds(self):
        assert self._place_with_seed(1) != self._place_with_seed(2)

    def test_covers_every_free_cell(self):
        grid = Grid(width=4, height=4)
        placer = FoodPlacer(grid, rng=np.random.default_rng(3))
        occupied = {(0, 0), (1, 0), (2, 0)}
        seen = {placer.place(occupied) for _ in range(2000)}
        assert seen == set(grid.free_cells(occupied))

    @staticmethod
    def _place_with_seed(seed: int) -> list:
        placer = FoodPlacer(Grid(), rng=np.random.default_rng(seed))
        occupied = {(10, 10), (9, 10), (8, 10)}
        return [placer.place(occupied) for _ in range(5)]

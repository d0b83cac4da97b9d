"""Food placement logic."""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from grid_snake.grid import Cell, Grid

logger = logging.getLogger(__name__)


class FoodPlacer:
    """Picks an unoccupied cell uniformly at random.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    Rejection sampling is tried first; after ``max_attempts`` misses the
    placer draws from the enumerated free cells instead, which keeps the
    choice uniform on a crowded board.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
        max_attempts: int = 64,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts

    def place(self, occupied: Collection[Cell]) -> Cell | None:
        """Return a free cell, or ``None`` when the board is full."""
        if self.grid.free_count(occupied) == 0:
            logger.warning("No empty cells available for food placement.")
            return None

        for _ in range(self.max_attempts):
            cell = self.grid.random_cell(self.rng)
            if cell not in occupied:
                return cell

        free = self.grid.free_cells(occupied)
        return free[int(self.rng.integers(0, len(free)))]

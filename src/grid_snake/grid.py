"""Fixed-size grid geometry for the snake game."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

GRID_SIZE = 20

Cell = tuple[int, int]


class Grid:
    """Bounded 2D board with no wraparound.

    Cells are ``(x, y)`` pairs with ``0 <= x < width`` and
    ``0 <= y < height``. Free-cell queries go through a NumPy mask
    indexed ``[y, x]``.
    """

    def __init__(self, width: int = GRID_SIZE, height: int = GRID_SIZE) -> None:
        if width < 4 or height < 4:
            raise ValueError("Grid dimensions must be at least 4×4.")
        self.width = width
        self.height = height

    @property
    def area(self) -> int:
        return self.width * self.height

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def random_cell(self, rng: np.random.Generator) -> Cell:
        """Draw a uniformly random cell."""
        x = int(rng.integers(0, self.width))
        y = int(rng.integers(0, self.height))
        return x, y

    def occupancy_mask(self, occupied: Iterable[Cell]) -> np.ndarray:
        """Return a boolean ``(height, width)`` array, True where occupied."""
        mask = np.zeros((self.height, self.width), dtype=bool)
        for x, y in occupied:
            if self.in_bounds(x, y):
                mask[y, x] = True
        return mask

    def free_cells(self, occupied: Iterable[Cell]) -> list[Cell]:
        """Return every in-bounds cell not in *occupied*, row-major."""
        ys, xs = np.nonzero(~self.occupancy_mask(occupied))
        return list(zip(xs.tolist(), ys.tolist(), strict=True))

    def free_count(self, occupied: Iterable[Cell]) -> int:
        return self.area - int(self.occupancy_mask(occupied).sum())

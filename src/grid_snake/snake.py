"""Snake representation and movement logic."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from grid_snake.direction import Direction

if TYPE_CHECKING:
    from grid_snake.grid import Cell, Grid


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    def __init__(self, body: Iterable[Cell]) -> None:
        self.body: deque[Cell] = deque(tuple(cell) for cell in body)
        if not self.body:
            raise ValueError("Snake length must be at least 1.")

    @classmethod
    def spawn(cls, grid: Grid, length: int = 3) -> Snake:
        """Create a snake centred on *grid*, facing right."""
        if length < 3:
            raise ValueError("Initial snake length must be at least 3.")
        x, y = grid.width // 2, grid.height // 2
        if x - (length - 1) < 0:
            raise ValueError(
                "initial length does not fit the grid; "
                "increase grid width or reduce length.",
            )
        return cls((x - i, y) for i in range(length))

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.body)

    @property
    def head(self) -> Cell:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> Cell:
        return self.body[-1]

    def cells(self) -> frozenset[Cell]:
        """Return the set of occupied cells."""
        return frozenset(self.body)

    def next_head(self, direction: Direction) -> Cell:
        """Compute the next head position without moving."""
        x, y = self.head
        return x + direction.dx, y + direction.dy

    def will_collide(self, next_head: Cell, grid: Grid) -> bool:
        """Check a candidate head against the walls and the full body.

        The tail counts as occupied even though it would vacate this tick.
        """
        if not grid.in_bounds(*next_head):
            return True
        return next_head in self.body

    def advance(self, next_head: Cell, grew: bool = False) -> Cell | None:
        """Move the head to *next_head*.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.appendleft(next_head)
        if grew:
            return None
        return self.body.pop()

    def has_duplicates(self) -> bool:
        """Check whether any two body segments overlap."""
        return len(set(self.body)) != len(self.body)

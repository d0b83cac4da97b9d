"""Movement directions and the buffered direction queue."""

from __future__ import annotations

import enum
import logging
from collections import deque
from collections.abc import Iterator

logger = logging.getLogger(__name__)


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    Screen coordinates: ``y`` grows downward.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def is_opposite(self, other: Direction) -> bool:
        """True when the two vectors sum to (0, 0)."""
        return self.dx + other.dx == 0 and self.dy + other.dy == 0

    @classmethod
    def from_name(cls, name: str) -> Direction:
        """Parse an ``up|down|left|right`` intent name."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown direction {name!r}.") from None


class DirectionQueue:
    """Oldest-first buffer of pending direction changes.

    One entry is consumed per tick. The last remaining entry is sticky so
    the snake keeps moving without new input.
    """

    def __init__(self, initial: Direction = Direction.RIGHT) -> None:
        self._queue: deque[Direction] = deque([initial])

    def __len__(self) -> int:
        return len(self._queue)

    def __iter__(self) -> Iterator[Direction]:
        return iter(self._queue)

    @property
    def last(self) -> Direction:
        """The most recently enqueued direction."""
        return self._queue[-1]

    def enqueue(self, direction: Direction) -> bool:
        """Append *direction* unless it reverses the last queued one."""
        if direction.is_opposite(self.last):
            logger.debug(
                "Dropped %s: reverses queued %s.", direction.name, self.last.name,
            )
            return False
        self._queue.append(direction)
        return True

    def consume_one(self) -> Direction:
        """Return the oldest direction, advancing only if another remains."""
        if len(self._queue) > 1:
            return self._queue.popleft()
        return self._queue[0]

    def snapshot(self) -> tuple[Direction, ...]:
        return tuple(self._queue)

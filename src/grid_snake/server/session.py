"""Single-game session: engine ownership and snapshot fan-out."""

from __future__ import annotations

import asyncio
import logging

from grid_snake.clock import AsyncioClock
from grid_snake.config import GameSettings
from grid_snake.engine import ClockFactory, GameEngine, GameSnapshot
from grid_snake.storage import JsonFileStore, Preferences

logger = logging.getLogger(__name__)


class GameSession:
    """Owns one :class:`GameEngine` and the render subscribers watching it.

    The engine pushes every snapshot into :meth:`publish`, which copies it
    into a bounded queue per subscriber. When a subscriber falls behind,
    its oldest pending snapshot is dropped.
    """

    def __init__(
        self,
        settings: GameSettings | None = None,
        *,
        preferences: Preferences | None = None,
        clock_factory: ClockFactory = AsyncioClock,
    ) -> None:
        self.settings = settings if settings is not None else GameSettings()
        if preferences is None:
            preferences = Preferences(JsonFileStore(self.settings.prefs_path))
        self._subscribers: list[asyncio.Queue[GameSnapshot]] = []
        self.engine = GameEngine(
            self.settings,
            preferences=preferences,
            clock_factory=clock_factory,
            sinks=[self.publish],
        )

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self) -> asyncio.Queue[GameSnapshot]:
        """Register a subscriber primed with the current snapshot."""
        queue: asyncio.Queue[GameSnapshot] = asyncio.Queue(
            maxsize=self.settings.subscriber_queue_size,
        )
        queue.put_nowait(self.engine.snapshot())
        self._subscribers.append(queue)
        return queue

    def unsubscribe(self, queue: asyncio.Queue[GameSnapshot]) -> None:
        if queue in self._subscribers:
            self._subscribers.remove(queue)

    def publish(self, snapshot: GameSnapshot) -> None:
        """Render sink: fan a snapshot out to every subscriber."""
        for queue in self._subscribers:
            if queue.full():
                queue.get_nowait()
            queue.put_nowait(snapshot)

    def close(self) -> None:
        """Stop the clock and drop all subscribers."""
        self.engine.clock.stop()
        self._subscribers.clear()
        logger.info("Game session closed.")

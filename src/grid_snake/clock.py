"""Periodic tick schedulers driving the game engine."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

TickCallback = Callable[[], None]


class AsyncioClock:
    """Cancellable periodic task on the running asyncio loop.

    :meth:`start` always cancels the current task before arming a new one,
    so a period change takes effect immediately and the first tick fires
    one full period after the call.
    """

    def __init__(self, callback: TickCallback) -> None:
        self._callback = callback
        self._task: asyncio.Task | None = None
        self.period_ms: int | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, period_ms: int) -> None:
        """(Re)arm the clock at *period_ms*."""
        if period_ms < 1:
            raise ValueError("period_ms must be at least 1.")
        self.stop()
        self.period_ms = period_ms
        self._task = asyncio.get_running_loop().create_task(
            self._run(period_ms / 1000.0),
        )

    def stop(self) -> None:
        """Cancel the periodic task; pending ticks are discarded."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _run(self, interval: float) -> None:
        try:
            while True:
                await asyncio.sleep(interval)
                self._callback()
        except Exception:
            logger.exception("Tick callback failed; clock stopped.")


class ManualClock:
    """Synchronous clock for headless driving and tests.

    Records its arming state; :meth:`fire` runs the callback only while
    armed.
    """

    def __init__(self, callback: TickCallback) -> None:
        self._callback = callback
        self.period_ms: int | None = None
        self.running = False
        self.starts = 0

    def start(self, period_ms: int) -> None:
        if period_ms < 1:
            raise ValueError("period_ms must be at least 1.")
        self.period_ms = period_ms
        self.running = True
        self.starts += 1

    def stop(self) -> None:
        self.running = False

    def fire(self, times: int = 1) -> int:
        """Invoke the callback up to *times* times; return how many ran."""
        fired = 0
        for _ in range(times):
            if not self.running:
                break
            self._callback()
            fired += 1
        return fired


Clock = AsyncioClock | ManualClock

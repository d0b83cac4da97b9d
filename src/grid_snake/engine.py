"""Tick-driven game engine composing grid, snake, food, and clock."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

import numpy as np

from grid_snake.clock import AsyncioClock, Clock, TickCallback
from grid_snake.config import GameSettings
from grid_snake.difficulty import (
    DIFFICULTY_PROFILES,
    Difficulty,
    DifficultyProfile,
    next_tick_ms,
    parse_difficulty,
)
from grid_snake.direction import Direction, DirectionQueue
from grid_snake.food import FoodPlacer
from grid_snake.grid import Cell, Grid
from grid_snake.snake import Snake
from grid_snake.storage import Preferences

logger = logging.getLogger(__name__)

MSG_PAUSED = "Press space to resume"
MSG_GAME_OVER = "Press restart to play again"
MSG_WON = "Board cleared! Press restart to play again"


class Phase(str, enum.Enum):
    """Lifecycle states for a single game."""

    PAUSED = "paused"
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only copy of the game state handed to render sinks."""

    snake: tuple[Cell, ...]
    food: Cell | None
    score: int
    best: int
    phase: Phase
    tick_ms: int
    difficulty: Difficulty
    tick: int
    won: bool = False
    message: str = ""

    def to_dict(self) -> dict:
        """Return the snapshot as a JSON-serializable dict."""
        return {
            "snake": [list(cell) for cell in self.snake],
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "best": self.best,
            "phase": self.phase.value,
            "tick_ms": self.tick_ms,
            "difficulty": self.difficulty.value,
            "tick": self.tick,
            "won": self.won,
            "message": self.message,
        }


@dataclass
class GameState:
    """All mutable state for one game, owned by :class:`GameEngine`."""

    snake: Snake
    food: Cell | None
    directions: DirectionQueue
    difficulty: Difficulty
    tick_ms: int
    score: int = 0
    tick: int = 0
    phase: Phase = Phase.PAUSED
    won: bool = False
    message: str = MSG_PAUSED

    @property
    def profile(self) -> DifficultyProfile:
        return DIFFICULTY_PROFILES[self.difficulty]


RenderSink = Callable[[GameSnapshot], None]
ClockFactory = Callable[[TickCallback], Clock]


class GameEngine:
    """Single-snake game state machine.

    The engine owns the grid, the current :class:`GameState` and the
    clock. Each clock tick calls :meth:`step`, which advances the game by
    one cell while the phase is :attr:`Phase.RUNNING` and then pushes a
    :class:`GameSnapshot` to every registered sink.

    A freshly created or restarted game is paused; the clock is armed
    only by :meth:`resume`.
    """

    def __init__(
        self,
        settings: GameSettings | None = None,
        *,
        preferences: Preferences | None = None,
        clock_factory: ClockFactory = AsyncioClock,
        sinks: Iterable[RenderSink] = (),
        seed: int | None = None,
    ) -> None:
        self.settings = settings if settings is not None else GameSettings()
        self.preferences = preferences if preferences is not None else Preferences()
        self.grid = Grid(self.settings.grid_width, self.settings.grid_height)
        self.rng = np.random.default_rng(
            seed if seed is not None else self.settings.seed,
        )
        self.food_placer = FoodPlacer(self.grid, rng=self.rng)
        self.clock = clock_factory(self.step)
        self._sinks: list[RenderSink] = list(sinks)

        self.best = self.preferences.load_best()
        self.state = self._new_state(self.preferences.load_difficulty())
        logger.info(
            "Engine ready: %dx%d grid, difficulty=%s, best=%d.",
            self.grid.width, self.grid.height,
            self.state.difficulty.value, self.best,
        )
        self._emit()

    # --- sinks ---

    def add_sink(self, sink: RenderSink) -> None:
        self._sinks.append(sink)

    def remove_sink(self, sink: RenderSink) -> None:
        if sink in self._sinks:
            self._sinks.remove(sink)

    def _emit(self) -> None:
        snapshot = self.snapshot()
        for sink in list(self._sinks):
            sink(snapshot)

    def snapshot(self) -> GameSnapshot:
        """Return an immutable copy of the current state."""
        s = self.state
        return GameSnapshot(
            snake=tuple(s.snake),
            food=s.food,
            score=s.score,
            best=self.best,
            phase=s.phase,
            tick_ms=s.tick_ms,
            difficulty=s.difficulty,
            tick=s.tick,
            won=s.won,
            message=s.message,
        )

    @property
    def phase(self) -> Phase:
        return self.state.phase

    # --- lifecycle ---

    def _new_state(self, difficulty: Difficulty) -> GameState:
        snake = Snake.spawn(self.grid, self.settings.initial_length)
        profile = DIFFICULTY_PROFILES[difficulty]
        return GameState(
            snake=snake,
            food=self.food_placer.place(snake.cells()),
            directions=DirectionQueue(Direction.RIGHT),
            difficulty=difficulty,
            tick_ms=profile.initial_tick_ms,
        )

    def restart(self, difficulty: Difficulty | str | None = None) -> None:
        """Discard the current game and start a fresh, paused one."""
        self.clock.stop()
        chosen = (
            self.state.difficulty if difficulty is None
            else parse_difficulty(difficulty)
        )
        self.state = self._new_state(chosen)
        logger.info("Game restarted (difficulty=%s).", chosen.value)
        self._emit()

    def set_difficulty(self, difficulty: Difficulty | str) -> None:
        """Select a difficulty, persist it, and restart."""
        chosen = parse_difficulty(difficulty)
        if chosen != self.preferences.load_difficulty():
            self.preferences.save_difficulty(chosen)
            logger.info("Difficulty changed to %s.", chosen.value)
        self.restart(chosen)

    def resume(self) -> None:
        """Paused → running. No-op in any other phase."""
        if self.state.phase != Phase.PAUSED:
            return
        self.state.phase = Phase.RUNNING
        self.state.message = ""
        self.clock.start(self.state.tick_ms)
        self._emit()

    def pause(self) -> None:
        """Running → paused. No-op in any other phase."""
        if self.state.phase != Phase.RUNNING:
            return
        self.clock.stop()
        self.state.phase = Phase.PAUSED
        self.state.message = MSG_PAUSED
        self._emit()

    def toggle_pause(self) -> None:
        if self.state.phase == Phase.RUNNING:
            self.pause()
        else:
            self.resume()

    def queue_direction(self, direction: Direction | str) -> bool:
        """Buffer a direction intent; returns whether it was accepted."""
        if isinstance(direction, str):
            direction = Direction.from_name(direction)
        return self.state.directions.enqueue(direction)

    # --- simulation ---

    def step(self) -> GameSnapshot:
        """Advance the game by one tick.

        Does nothing unless the game is running. Returns the resulting
        snapshot.
        """
        s = self.state
        if s.phase != Phase.RUNNING:
            return self.snapshot()

        direction = s.directions.consume_one()
        next_head = s.snake.next_head(direction)

        if s.snake.will_collide(next_head, self.grid):
            self._end_game(won=False)
            return self.snapshot()

        grew = next_head == s.food
        s.snake.advance(next_head, grew)
        s.tick += 1

        if grew:
            s.score += 1
            if s.score > self.best:
                self.best = s.score
                self.preferences.save_best(self.best)
            self._apply_speed_curve()
            s.food = self.food_placer.place(s.snake.cells())
            if s.food is None:
                self._end_game(won=True)
                return self.snapshot()

        self._emit()
        return self.snapshot()

    def _apply_speed_curve(self) -> None:
        s = self.state
        new_tick = next_tick_ms(s.profile, s.score, s.tick_ms)
        if new_tick == s.tick_ms:
            return
        s.tick_ms = new_tick
        self.clock.start(new_tick)
        logger.info("Speed up at score %d: tick interval %d ms.", s.score, new_tick)

    def _end_game(self, *, won: bool) -> None:
        s = self.state
        self.clock.stop()
        s.phase = Phase.GAME_OVER
        s.won = won
        s.message = MSG_WON if won else MSG_GAME_OVER
        logger.info(
            "Game over at tick %d with score %d (won=%s).", s.tick, s.score, won,
        )
        self._emit()

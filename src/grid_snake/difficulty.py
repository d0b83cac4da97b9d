"""Difficulty presets and the tick-interval speed curve."""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import asdict, dataclass

logger = logging.getLogger(__name__)


class Difficulty(str, enum.Enum):
    """Named difficulty presets, selectable only between games."""

    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"
    INSANE = "insane"


DEFAULT_DIFFICULTY = Difficulty.NORMAL


@dataclass(frozen=True)
class DifficultyProfile:
    """Speed parameters for one :class:`Difficulty`."""

    initial_tick_ms: int
    speedup_food_interval: int
    speedup_factor: float
    min_tick_ms: int

    def __post_init__(self) -> None:
        if self.min_tick_ms < 1:
            raise ValueError("min_tick_ms must be at least 1.")
        if self.initial_tick_ms < self.min_tick_ms:
            raise ValueError("initial_tick_ms must be >= min_tick_ms.")
        if self.speedup_food_interval < 1:
            raise ValueError("speedup_food_interval must be at least 1.")
        if not 0.0 < self.speedup_factor <= 1.0:
            raise ValueError("speedup_factor must be in (0, 1].")

    def to_dict(self) -> dict:
        return asdict(self)


DIFFICULTY_PROFILES: dict[Difficulty, DifficultyProfile] = {
    Difficulty.EASY: DifficultyProfile(200, 5, 0.94, 90),
    Difficulty.NORMAL: DifficultyProfile(160, 4, 0.92, 60),
    Difficulty.HARD: DifficultyProfile(120, 3, 0.90, 50),
    Difficulty.INSANE: DifficultyProfile(90, 2, 0.88, 40),
}


def parse_difficulty(key: str | Difficulty | None) -> Difficulty:
    """Resolve a stored key, substituting the default for unknown values."""
    if isinstance(key, Difficulty):
        return key
    try:
        return Difficulty(str(key).strip().lower())
    except ValueError:
        logger.debug("Unknown difficulty %r; using %s.", key, DEFAULT_DIFFICULTY.value)
        return DEFAULT_DIFFICULTY


def next_tick_ms(profile: DifficultyProfile, score: int, tick_ms: int) -> int:
    """Return the tick interval after *score* foods have been eaten.

    Speeds up every ``speedup_food_interval`` foods, floored at
    ``min_tick_ms``. Any other score leaves the interval unchanged.
    """
    if score <= 0 or score % profile.speedup_food_interval != 0:
        return tick_ms
    return max(profile.min_tick_ms, math.floor(tick_ms * profile.speedup_factor))

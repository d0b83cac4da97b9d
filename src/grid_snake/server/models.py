"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from grid_snake.difficulty import Difficulty
from grid_snake.engine import GameSnapshot, Phase


class DirectionRequest(BaseModel):
    """Request body for POST /game/direction."""

    direction: Literal["up", "down", "left", "right"]


class DirectionResponse(BaseModel):
    accepted: bool


class DifficultyRequest(BaseModel):
    """Request body for PUT /game/difficulty."""

    difficulty: Difficulty


class DifficultyInfo(BaseModel):
    """One row of the difficulty table."""

    difficulty: Difficulty
    initial_tick_ms: int
    speedup_food_interval: int
    speedup_factor: float
    min_tick_ms: int


class GameStateResponse(BaseModel):
    """Snapshot of the running game."""

    snake: list[tuple[int, int]]
    food: tuple[int, int] | None
    score: int
    best: int
    phase: Phase
    tick_ms: int
    difficulty: Difficulty
    tick: int
    won: bool
    message: str

    @classmethod
    def from_snapshot(cls, snapshot: GameSnapshot) -> GameStateResponse:
        return cls(**snapshot.to_dict())


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    detail: str

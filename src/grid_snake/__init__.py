"""Grid Snake — tick-driven snake game engine."""

from grid_snake.clock import AsyncioClock, ManualClock
from grid_snake.config import GameSettings
from grid_snake.difficulty import DIFFICULTY_PROFILES, Difficulty, DifficultyProfile
from grid_snake.direction import Direction, DirectionQueue
from grid_snake.engine import GameEngine, GameSnapshot, Phase
from grid_snake.food import FoodPlacer
from grid_snake.grid import Grid
from grid_snake.snake import Snake
from grid_snake.storage import JsonFileStore, MemoryStore, Preferences

__all__ = [
    "DIFFICULTY_PROFILES",
    "AsyncioClock",
    "Difficulty",
    "DifficultyProfile",
    "Direction",
    "DirectionQueue",
    "FoodPlacer",
    "GameEngine",
    "GameSettings",
    "GameSnapshot",
    "Grid",
    "JsonFileStore",
    "ManualClock",
    "MemoryStore",
    "Phase",
    "Preferences",
    "Snake",
]

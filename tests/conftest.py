"""Shared fixtures."""

from __future__ import annotations

import pytest

from grid_snake.clock import ManualClock
from grid_snake.config import GameSettings
from grid_snake.engine import GameEngine
from grid_snake.storage import MemoryStore, Preferences


@pytest.fixture()
def settings(tmp_path):
    return GameSettings(seed=0, prefs_path=str(tmp_path / "prefs.json"))


@pytest.fixture()
def preferences():
    return Preferences(MemoryStore())


@pytest.fixture()
def engine(settings, preferences):
    """Paused engine on a 20×20 grid driven by a ManualClock."""
    return GameEngine(
        settings, preferences=preferences, clock_factory=ManualClock,
    )

"""Game and server configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path

from grid_snake.grid import GRID_SIZE

logger = logging.getLogger(__name__)


def _default_prefs_path() -> str:
    return str(Path.home() / ".grid_snake" / "preferences.json")


@dataclass(frozen=True)
class GameSettings:
    """Board and session configuration.

    Supports JSON serialization so a setup can be reproduced.
    """

    grid_width: int = GRID_SIZE
    grid_height: int = GRID_SIZE
    initial_length: int = 3
    seed: int | None = None

    # Persistence
    prefs_path: str = field(default_factory=_default_prefs_path)

    # Server
    subscriber_queue_size: int = 32

    def __post_init__(self) -> None:
        if self.grid_width < 4 or self.grid_height < 4:
            raise ValueError("grid_width and grid_height must each be at least 4.")
        if self.initial_length < 3:
            raise ValueError("initial_length must be at least 3.")
        if self.initial_length > self.grid_width // 2 + 1:
            raise ValueError(
                "initial_length does not fit the configured grid; "
                "increase grid_width or reduce length.",
            )
        if self.subscriber_queue_size < 1:
            raise ValueError("subscriber_queue_size must be at least 1.")

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write settings to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Settings saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameSettings:
        """Load settings from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)

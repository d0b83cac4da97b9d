"""Persistence for the best score and selected difficulty."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from grid_snake.difficulty import DEFAULT_DIFFICULTY, Difficulty, parse_difficulty

logger = logging.getLogger(__name__)

BEST_KEY = "snake_best"
DIFFICULTY_KEY = "snake_difficulty"


class MemoryStore:
    """In-process string key/value store."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """String key/value store persisted as one flat JSON object.

    A missing file reads as empty. A malformed file is logged and also
    read as empty; the next write replaces it.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text())
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable preferences file %s.", self.path)
            return {}
        if not isinstance(raw, dict):
            logger.warning("Ignoring malformed preferences file %s.", self.path)
            return {}
        return {str(k): str(v) for k, v in raw.items()}

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2))


class Preferences:
    """Typed view over a key/value store.

    Absent or invalid values fall back to a best score of 0 and the
    ``normal`` difficulty.
    """

    def __init__(self, store: MemoryStore | JsonFileStore | None = None) -> None:
        self.store = store if store is not None else MemoryStore()

    def load_best(self) -> int:
        raw = self.store.get(BEST_KEY)
        if raw is None:
            return 0
        try:
            best = int(raw.strip())
        except ValueError:
            logger.warning("Stored best score %r is not an integer; using 0.", raw)
            return 0
        return max(best, 0)

    def save_best(self, best: int) -> None:
        self.store.set(BEST_KEY, str(int(best)))

    def load_difficulty(self) -> Difficulty:
        raw = self.store.get(DIFFICULTY_KEY)
        if raw is None:
            return DEFAULT_DIFFICULTY
        return parse_difficulty(raw)

    def save_difficulty(self, difficulty: Difficulty) -> None:
        self.store.set(DIFFICULTY_KEY, difficulty.value)

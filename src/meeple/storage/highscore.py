"""
Durable storage for the best score.

The engine only needs ``get()`` and ``set()``. Reads never raise: a
missing or unreadable record counts as "no high score yet". Writes may
raise ``HighScoreStoreError``; callers decide whether that matters.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional
import json
import logging

logger = logging.getLogger(__name__)

DEFAULT_KEY = "meepleHS"


class HighScoreStoreError(Exception):
    """Persisting the high score failed."""


class HighScoreStore(ABC):
    """Key-value port holding a single integer."""

    @abstractmethod
    def get(self) -> Optional[int]:
        """Stored high score, or None when there is none."""
        ...

    @abstractmethod
    def set(self, value: int) -> None:
        """Persist a new high score."""
        ...


class MemoryHighScoreStore(HighScoreStore):
    """In-process store for tests and headless runs."""

    def __init__(self, value: Optional[int] = None):
        self._value = value

    def get(self) -> Optional[int]:
        return self._value

    def set(self, value: int) -> None:
        self._value = int(value)


class JsonHighScoreStore(HighScoreStore):
    """Stores ``{key: score}`` in a JSON file, keeping other keys intact."""

    def __init__(self, path: Path | str, key: str = DEFAULT_KEY):
        self.path = Path(path).expanduser()
        self.key = key

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object in {self.path}")
        return data

    def get(self) -> Optional[int]:
        try:
            value = self._load().get(self.key)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read high score from {self.path}: {e}")
            return None

        if value is None:
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring malformed high score {value!r}")
            return None

    def set(self, value: int) -> None:
        try:
            try:
                data = self._load()
            except ValueError:
                data = {}
            data[self.key] = int(value)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f)
            tmp_path.replace(self.path)
        except OSError as e:
            raise HighScoreStoreError(f"Could not save high score to {self.path}: {e}") from e
        logger.info(f"High score {value} saved to {self.path}")

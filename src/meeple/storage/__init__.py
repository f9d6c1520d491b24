"""High-score persistence for MEEPLE CATCHER."""

from meeple.storage.highscore import (
    HighScoreStore,
    HighScoreStoreError,
    JsonHighScoreStore,
    MemoryHighScoreStore,
)

__all__ = [
    "HighScoreStore",
    "HighScoreStoreError",
    "JsonHighScoreStore",
    "MemoryHighScoreStore",
]

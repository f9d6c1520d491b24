"""Per-session counters: score, lives, level, catches."""

from dataclasses import dataclass
from typing import Optional

START_LIVES = 3
CATCHES_PER_LEVEL = 6


def level_for(caught: int) -> int:
    """Difficulty tier for a cumulative catch count."""
    return caught // CATCHES_PER_LEVEL + 1


@dataclass(frozen=True)
class MissEvent:
    """An incomplete box was caught without its piece."""

    game_name: str
    piece_name: str
    piece_glyph: str


@dataclass
class SessionState:
    score: int = 0
    lives: int = START_LIVES
    level: int = 1
    caught: int = 0
    last_miss: Optional[MissEvent] = None
    new_high_score: bool = False

    def reset(self) -> None:
        self.score = 0
        self.lives = START_LIVES
        self.level = 1
        self.caught = 0
        self.last_miss = None
        self.new_high_score = False

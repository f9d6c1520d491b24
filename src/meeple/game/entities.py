"""Falling boxes and pieces."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar, Optional

from meeple.game.catalog import GameDefinition, PieceKind


class Lifecycle(Enum):
    """Where a falling entity is in its life."""

    SPAWNED = auto()   # Falling, can be caught
    DYING = auto()     # Caught or missed, playing its death animation
    REMOVED = auto()   # Animation finished, ready to purge


@dataclass
class _Falling:
    """Shared position and lifecycle bookkeeping."""

    DEATH_TICKS: ClassVar[int] = 16

    x: float
    y: float
    w: float
    h: float
    vy: float
    wobble: float = 0.0
    state: Lifecycle = Lifecycle.SPAWNED
    die_timer: int = 0

    @property
    def alive(self) -> bool:
        return self.state is Lifecycle.SPAWNED

    @property
    def dying(self) -> bool:
        return self.state is Lifecycle.DYING

    @property
    def removed(self) -> bool:
        return self.state is Lifecycle.REMOVED

    @property
    def center_x(self) -> float:
        return self.x + self.w / 2

    @property
    def center_y(self) -> float:
        return self.y + self.h / 2

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def death_progress(self) -> float:
        """0.0 when death starts, 1.0 when the entity is about to go."""
        return min(1.0, self.die_timer / self.DEATH_TICKS)

    def kill(self) -> None:
        """Start the death animation. No-op unless still falling."""
        if self.state is Lifecycle.SPAWNED:
            self.state = Lifecycle.DYING
            self.die_timer = 0

    def age(self) -> None:
        """Advance the death animation by one tick."""
        if self.state is not Lifecycle.DYING:
            return
        self.die_timer += 1
        if self.die_timer >= self.DEATH_TICKS:
            self.state = Lifecycle.REMOVED


@dataclass
class FallingBox(_Falling):
    """A board game box. Incomplete boxes need their piece from the bag."""

    DEATH_TICKS: ClassVar[int] = 16

    game: Optional[GameDefinition] = None
    incomplete: bool = False
    wobble_speed: float = 0.03
    inspected: bool = False

    def advance(self) -> None:
        self.y += self.vy
        self.wobble += self.wobble_speed


@dataclass
class FallingPiece(_Falling):
    """A collectible piece on its way to the bag."""

    DEATH_TICKS: ClassVar[int] = 14
    WOBBLE_SPEED: ClassVar[float] = 0.06

    kind: Optional[PieceKind] = None

    def advance(self) -> None:
        self.y += self.vy
        self.wobble += self.WOBBLE_SPEED

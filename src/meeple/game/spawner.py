"""Decides when new boxes and pieces appear and what they look like."""

import math
import random
from typing import List, Tuple
import logging

from meeple.game.catalog import GAMES, PIECES, PIECE_IDS
from meeple.game.entities import FallingBox, FallingPiece

logger = logging.getLogger(__name__)


class Spawner:
    """Two independent tick countdowns, one for boxes and one for pieces.

    All randomness comes from the injected ``rng`` so a seeded generator
    reproduces the same stream of entities.
    """

    BASE_SPAWN_INTERVAL = 105
    MIN_SPAWN_INTERVAL = 40
    SPAWN_INTERVAL_STEP = 9
    DOUBLE_SPAWN_LEVEL = 3
    DOUBLE_SPAWN_CHANCE = 0.3

    BOX_SIZE = 50
    BOX_SPAWN_Y = -54
    PIECE_SIZE = 26
    PIECE_SPAWN_Y = -28
    EDGE_MARGIN = 16
    BOX_X_INSET = 76  # box stays fully on screen
    PIECE_X_INSET = 36

    def __init__(self, width: int, rng: random.Random):
        self.width = width
        self.rng = rng
        self.spawn_interval = self.BASE_SPAWN_INTERVAL
        self.spawn_timer = 0
        self.piece_spawn_timer = 0

    def reset(self) -> None:
        self.spawn_interval = self.BASE_SPAWN_INTERVAL
        self.spawn_timer = 0
        self.piece_spawn_timer = 0

    def on_level_change(self, level: int) -> None:
        """Shorten the box cadence for the new level."""
        self.spawn_interval = max(
            self.MIN_SPAWN_INTERVAL,
            self.BASE_SPAWN_INTERVAL - level * self.SPAWN_INTERVAL_STEP,
        )
        logger.debug(f"Box spawn interval now {self.spawn_interval} ticks")

    @staticmethod
    def piece_interval(level: int) -> int:
        return max(85, 175 - level * 10)

    @staticmethod
    def incomplete_chance(level: int) -> float:
        return min(0.50, 0.25 + level * 0.025)

    def update(self, level: int) -> Tuple[List[FallingBox], List[FallingPiece]]:
        """Advance both countdowns by one tick and return what spawned."""
        boxes: List[FallingBox] = []
        pieces: List[FallingPiece] = []

        self.spawn_timer += 1
        if self.spawn_timer >= self.spawn_interval:
            boxes.append(self.spawn_box(level))
            self.spawn_timer = 0
            if level >= self.DOUBLE_SPAWN_LEVEL and self.rng.random() < self.DOUBLE_SPAWN_CHANCE:
                boxes.append(self.spawn_box(level))

        self.piece_spawn_timer += 1
        if self.piece_spawn_timer >= self.piece_interval(level):
            pieces.append(self.spawn_piece(level))
            self.piece_spawn_timer = 0

        return boxes, pieces

    def spawn_box(self, level: int) -> FallingBox:
        rng = self.rng
        game = GAMES[int(rng.random() * len(GAMES))]
        incomplete = rng.random() < self.incomplete_chance(level)
        span = max(0, self.width - self.BOX_X_INSET)
        box = FallingBox(
            x=self.EDGE_MARGIN + rng.random() * span,
            y=self.BOX_SPAWN_Y,
            w=self.BOX_SIZE,
            h=self.BOX_SIZE,
            vy=1.0 + level * 0.14 + rng.random() * 0.4,
            wobble=rng.random() * math.pi * 2,
            wobble_speed=0.03 + rng.random() * 0.02,
            game=game,
            incomplete=incomplete,
        )
        logger.debug(
            f"Spawned box {game.id} incomplete={incomplete} at x={box.x:.0f}"
        )
        return box

    def spawn_piece(self, level: int) -> FallingPiece:
        rng = self.rng
        kind = PIECES[PIECE_IDS[int(rng.random() * len(PIECE_IDS))]]
        span = max(0, self.width - self.PIECE_X_INSET)
        piece = FallingPiece(
            x=self.EDGE_MARGIN + rng.random() * span,
            y=self.PIECE_SPAWN_Y,
            w=self.PIECE_SIZE,
            h=self.PIECE_SIZE,
            vy=0.9 + level * 0.1 + rng.random() * 0.5,
            wobble=rng.random() * math.pi * 2,
            kind=kind,
        )
        logger.debug(f"Spawned piece {kind.id} at x={piece.x:.0f}")
        return piece

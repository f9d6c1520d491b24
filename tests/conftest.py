"""Shared fixtures for the MEEPLE CATCHER test suite."""

import random
from typing import List

import pytest

from meeple.core.events import Event, EventBus, EventType
from meeple.game.catalog import PIECES, get_game
from meeple.game.engine import MeepleCatcher
from meeple.game.entities import FallingBox, FallingPiece
from meeple.game.input import InputFrame
from meeple.storage.highscore import MemoryHighScoreStore

WIDTH = 340
HEIGHT = 560
CENTER = WIDTH / 2


class Recorder:
    """Collects every event published on a bus."""

    def __init__(self, bus: EventBus):
        self.events: List[Event] = []
        bus.subscribe_all(self.events.append)

    def of(self, event_type: EventType) -> List[Event]:
        return [e for e in self.events if e.type == event_type]

    def clear(self) -> None:
        self.events.clear()


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def recorder(bus: EventBus) -> Recorder:
    return Recorder(bus)


@pytest.fixture
def store() -> MemoryHighScoreStore:
    return MemoryHighScoreStore()


@pytest.fixture
def engine(bus: EventBus, store: MemoryHighScoreStore) -> MeepleCatcher:
    return MeepleCatcher(WIDTH, HEIGHT, rng=random.Random(1234), store=store, event_bus=bus)


@pytest.fixture
def playing(engine: MeepleCatcher, recorder: Recorder) -> MeepleCatcher:
    """An engine that has left the intro screen, with the recorder cleared."""
    engine.tick(InputFrame(CENTER, trigger=True))
    recorder.clear()
    return engine


def idle(target_x: float = CENTER) -> InputFrame:
    return InputFrame(target_x, trigger=False)


def box_at_meeple(game_id: str, incomplete: bool = False) -> FallingBox:
    """A box one tick away from landing on a centered meeple."""
    return FallingBox(
        x=CENTER - 25, y=430, w=50, h=50, vy=1.0,
        game=get_game(game_id), incomplete=incomplete,
    )


def box_leaving_screen(game_id: str, incomplete: bool = False) -> FallingBox:
    """A box far from the meeple that falls off the bottom on the next tick."""
    return FallingBox(
        x=5, y=HEIGHT + 10, w=50, h=50, vy=1.0,
        game=get_game(game_id), incomplete=incomplete,
    )


def piece_at_meeple(kind_id: str) -> FallingPiece:
    return FallingPiece(
        x=CENTER - 13, y=450, w=26, h=26, vy=1.0, kind=PIECES[kind_id],
    )

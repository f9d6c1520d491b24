import random

import pytest

from meeple.game.catalog import GAMES, PIECES
from meeple.game.spawner import Spawner


class FixedRandom(random.Random):
    """Always draws the same value."""

    def __init__(self, value: float):
        super().__init__()
        self.value = value

    def random(self) -> float:
        return self.value


def run(spawner: Spawner, ticks: int, level: int = 1):
    boxes, pieces = [], []
    for _ in range(ticks):
        new_boxes, new_pieces = spawner.update(level)
        boxes.extend(new_boxes)
        pieces.extend(new_pieces)
    return boxes, pieces


def test_first_box_after_base_interval():
    spawner = Spawner(340, random.Random(3))
    boxes, _ = run(spawner, 104)
    assert boxes == []
    boxes, _ = run(spawner, 1)
    assert len(boxes) == 1


def test_piece_interval_shrinks_with_level():
    assert Spawner.piece_interval(1) == 165
    assert Spawner.piece_interval(5) == 125
    assert Spawner.piece_interval(20) == 85

    spawner = Spawner(340, random.Random(3))
    _, pieces = run(spawner, 165)
    assert len(pieces) == 1


def test_incomplete_chance_is_capped():
    assert Spawner.incomplete_chance(1) == pytest.approx(0.275)
    assert Spawner.incomplete_chance(10) == pytest.approx(0.5)
    assert Spawner.incomplete_chance(40) == pytest.approx(0.5)


def test_level_change_shortens_box_cadence():
    spawner = Spawner(340, random.Random(3))
    spawner.on_level_change(2)
    assert spawner.spawn_interval == 87
    spawner.on_level_change(9)
    assert spawner.spawn_interval == 40

    spawner.reset()
    assert spawner.spawn_interval == 105


def test_double_spawn_from_level_three():
    low = Spawner(340, FixedRandom(0.0))
    low.spawn_timer = low.spawn_interval - 1
    boxes, _ = low.update(3)
    assert len(boxes) == 2

    below = Spawner(340, FixedRandom(0.0))
    below.spawn_timer = below.spawn_interval - 1
    boxes, _ = below.update(2)
    assert len(boxes) == 1

    high = Spawner(340, FixedRandom(0.99))
    high.spawn_timer = high.spawn_interval - 1
    boxes, _ = high.update(5)
    assert len(boxes) == 1


def test_box_attributes_follow_draws():
    box = Spawner(340, FixedRandom(0.0)).spawn_box(1)
    assert box.game is GAMES[0]
    assert box.incomplete
    assert box.x == 16
    assert box.y == -54
    assert box.vy == pytest.approx(1.14)

    box = Spawner(340, FixedRandom(0.999)).spawn_box(1)
    assert box.game is GAMES[-1]
    assert not box.incomplete
    assert box.x + box.w <= 340


def test_piece_attributes_follow_draws():
    piece = Spawner(340, FixedRandom(0.0)).spawn_piece(2)
    assert piece.kind is PIECES["red-station"]
    assert piece.y == -28
    assert piece.vy == pytest.approx(1.1)


def test_velocity_always_positive():
    spawner = Spawner(340, random.Random(11))
    for level in range(1, 15):
        assert spawner.spawn_box(level).vy > 0
        assert spawner.spawn_piece(level).vy > 0


def test_narrow_playfield_spawns_at_margin():
    box = Spawner(40, FixedRandom(0.7)).spawn_box(1)
    assert box.x == 16


def test_same_seed_same_stream():
    a = run(Spawner(340, random.Random(42)), 600, level=3)
    b = run(Spawner(340, random.Random(42)), 600, level=3)
    assert [(x.game.id, x.incomplete, x.x) for x in a[0]] == \
        [(x.game.id, x.incomplete, x.x) for x in b[0]]
    assert [p.kind.id for p in a[1]] == [p.kind.id for p in b[1]]

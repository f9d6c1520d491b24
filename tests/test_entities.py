from conftest import box_at_meeple, piece_at_meeple
from meeple.game.entities import FallingBox, Lifecycle


def test_death_progress_runs_from_zero_to_one():
    box = box_at_meeple("catan")
    assert box.death_progress == 0.0

    box.kill()
    for _ in range(8):
        box.age()
    assert box.death_progress == 0.5

    for _ in range(8):
        box.age()
    assert box.death_progress == 1.0
    assert box.state is Lifecycle.REMOVED


def test_piece_dies_faster_than_box():
    piece = piece_at_meeple("egg")
    piece.kill()
    for _ in range(7):
        piece.age()
    assert piece.death_progress == 0.5


def test_kill_only_affects_falling_entities():
    box = box_at_meeple("azul")
    box.kill()
    box.age()
    box.kill()
    assert box.die_timer == 1


def test_entity_without_catalog_entry():
    box = FallingBox(x=0, y=0, w=50, h=50, vy=1.0)
    assert box.game is None
    box.advance()
    assert box.y == 1.0

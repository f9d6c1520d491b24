import numpy as np

from conftest import HEIGHT, WIDTH, box_at_meeple, box_leaving_screen, idle, piece_at_meeple
from meeple.core.state import Phase
from meeple.graphics.primitives import draw_text, new_buffer, text_width
from meeple.graphics.renderer import BACKGROUND, GameRenderer


def differs_from_background(buffer) -> int:
    return int(np.any(buffer != np.array(BACKGROUND, dtype=np.uint8), axis=2).sum())


def test_intro_frame(engine):
    frame = GameRenderer(WIDTH, HEIGHT, seed=1).render(engine)
    assert frame.shape == (HEIGHT, WIDTH, 3)
    assert frame.dtype == np.uint8
    assert differs_from_background(frame) > 0


def test_playing_frame_with_entities(playing):
    playing.boxes.append(box_at_meeple("azul", incomplete=True))
    playing.pieces.append(piece_at_meeple("egg"))
    renderer = GameRenderer(WIDTH, HEIGHT, seed=1)

    frame = renderer.render(playing)
    assert frame.shape == (HEIGHT, WIDTH, 3)
    assert differs_from_background(frame) > 0

    # Buffer is reused between frames
    assert renderer.render(playing) is frame


def test_game_over_frame(playing):
    for _ in range(playing.lives):
        playing.boxes.append(box_leaving_screen("dixit"))
        playing.tick(idle())
    assert playing.phase is Phase.GAMEOVER

    frame = GameRenderer(WIDTH, HEIGHT, seed=1).render(playing)
    assert frame.shape == (HEIGHT, WIDTH, 3)
    assert differs_from_background(frame) > 0


def test_draw_text_reports_width():
    buffer = new_buffer(64, 16)
    width = draw_text(buffer, "Bœuf", 1, 1, (255, 255, 255))
    assert width == text_width("Bœuf") == 19
    assert buffer.any()

    assert draw_text(buffer, "", 0, 0, (255, 255, 255)) == 0


def test_draw_text_clips_at_edges():
    buffer = new_buffer(8, 8)
    draw_text(buffer, "SCORE", -4, 5, (255, 0, 0), scale=2)
    assert buffer.shape == (8, 8, 3)


def test_dying_entities_and_sparkles_render(playing):
    box = box_at_meeple("splendor")
    piece = piece_at_meeple("gold-token")
    box.kill()
    piece.kill()
    for _ in range(10):
        box.age()
        piece.age()
    playing.boxes.append(box)
    playing.pieces.append(piece)
    playing.effects.gold_burst(100, 100)
    assert any(p.star for p in playing.effects.particles)

    frame = GameRenderer(WIDTH, HEIGHT, seed=1).render(playing)
    assert tuple(frame[100, 100]) != BACKGROUND

import pygame
import pytest

from conftest import CENTER, box_at_meeple, idle
from meeple.core.events import EventType
from meeple.simulator.window import SimulatorWindow, WindowConfig


@pytest.fixture
def window(engine) -> SimulatorWindow:
    return SimulatorWindow(engine, WindowConfig(scale=2))


def feed(window: SimulatorWindow, *events: pygame.event.Event) -> None:
    for event in events:
        window._handle_event(event)


def test_click_within_one_frame_triggers(window):
    feed(
        window,
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10)),
        pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(10, 10)),
    )
    assert window.input.sample().trigger
    assert not window.input.held


def test_key_tap_within_one_frame_triggers(window):
    feed(
        window,
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE),
        pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE),
    )
    assert window.input.sample().trigger


def test_holding_button_fires_once(window):
    feed(window, pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)))
    assert window.input.sample().trigger
    assert not window.input.sample().trigger

    # Key released while the mouse is still down keeps the button held
    feed(
        window,
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN),
        pygame.event.Event(pygame.KEYUP, key=pygame.K_RETURN),
    )
    assert window.input.held
    assert not window.input.sample().trigger


def test_right_button_is_not_a_trigger(window):
    feed(window, pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(0, 0)))
    assert not window.input.sample().trigger


def test_mouse_position_is_divided_by_scale(window):
    feed(window, pygame.event.Event(pygame.MOUSEMOTION, pos=(100, 40), rel=(0, 0), buttons=(0, 0, 0)))
    assert window.input.sample().target_x == 50


def test_arrow_keys_nudge_pointer(window):
    feed(window, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT))
    assert window.input.pointer_x == CENTER - SimulatorWindow.KEY_NUDGE
    assert not window.input.sample().trigger


def test_quit_stops_loop(window, recorder):
    feed(window, pygame.event.Event(pygame.QUIT))
    assert not window.loop.step()
    assert len(recorder.of(EventType.SHUTDOWN)) == 1


def test_miss_shows_in_status_line(window, playing):
    playing.boxes.append(box_at_meeple("hanabi", incomplete=True))
    playing.tick(idle())
    assert "Hanabi" in window._status
    assert "Feu d'artifice" in window._status

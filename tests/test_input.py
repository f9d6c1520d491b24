import pytest

from meeple.game.input import InputAdapter


def test_trigger_fires_once_per_press():
    adapter = InputAdapter(340)
    assert not adapter.sample().trigger

    adapter.set_held(True)
    assert adapter.sample().trigger
    assert not adapter.sample().trigger  # still held

    adapter.set_held(False)
    assert not adapter.sample().trigger
    adapter.set_held(True)
    assert adapter.sample().trigger


def test_tap_between_samples_is_not_lost():
    adapter = InputAdapter(340)
    adapter.set_held(True)
    adapter.set_held(False)
    assert adapter.sample().trigger


def test_repeated_held_reports_do_not_retrigger():
    adapter = InputAdapter(340)
    adapter.set_held(True)
    adapter.sample()
    adapter.set_held(True)
    assert not adapter.sample().trigger


def test_pointer_is_clamped():
    adapter = InputAdapter(340)
    assert adapter.sample().target_x == 170

    adapter.set_pointer(-20)
    assert adapter.sample().target_x == 0
    adapter.set_pointer(9999)
    assert adapter.sample().target_x == 340
    adapter.set_pointer(42.5)
    assert adapter.sample().target_x == 42.5


def test_width_must_be_positive():
    with pytest.raises(ValueError):
        InputAdapter(0)

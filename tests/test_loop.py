import asyncio

import pytest

from conftest import WIDTH
from meeple.core.events import EventType
from meeple.core.state import Phase
from meeple.game.input import InputAdapter
from meeple.game.loop import GameLoop


@pytest.fixture
def adapter() -> InputAdapter:
    return InputAdapter(WIDTH)


def test_rejects_bad_fps(engine, adapter):
    with pytest.raises(ValueError):
        GameLoop(engine, adapter, fps=0)


def test_run_stops_after_max_ticks(engine, adapter, recorder):
    loop = GameLoop(engine, adapter, fps=1000)
    asyncio.run(loop.run(max_ticks=5))

    assert loop.ticks == 5
    assert engine.frame == 5
    assert not loop.is_running
    assert [e.data["frame"] for e in recorder.of(EventType.TICK)] == [1, 2, 3, 4, 5]


def test_input_is_sampled_each_step(engine, adapter):
    loop = GameLoop(engine, adapter)
    adapter.set_held(True)
    loop.step()
    assert engine.phase is Phase.PLAYING

    adapter.set_pointer(0)
    loop.step()
    assert engine.meeple_x < WIDTH / 2


def test_stop_from_frame_callback(engine, adapter, recorder):
    def on_frame(_engine):
        if loop.ticks == 3:
            loop.stop()

    loop = GameLoop(engine, adapter, fps=1000, on_frame=on_frame)
    asyncio.run(loop.run())

    assert loop.ticks == 3
    assert engine.frame == 3
    assert len(recorder.of(EventType.SHUTDOWN)) == 1


def test_no_ticks_after_stop(engine, adapter, recorder):
    loop = GameLoop(engine, adapter)
    assert loop.step()
    loop.stop()
    loop.stop()

    assert not loop.step()
    assert engine.frame == 1
    shutdowns = recorder.of(EventType.SHUTDOWN)
    assert len(shutdowns) == 1
    assert shutdowns[0].data == {"ticks": 1}

"""Cooperative frame loop driving the engine at a fixed rate."""

from typing import Callable, Optional
import asyncio
import logging

from meeple.core.events import Event, EventType, tick_event
from meeple.game.engine import MeepleCatcher
from meeple.game.input import InputAdapter

logger = logging.getLogger(__name__)

FrameCallback = Callable[[MeepleCatcher], None]


class GameLoop:
    """
    One engine tick per frame.

    Input is sampled at the start of each frame, so events arriving
    mid-frame apply on the next tick. ``stop()`` is final: once it
    returns the engine is never ticked again by this loop.
    """

    def __init__(
        self,
        engine: MeepleCatcher,
        input_adapter: InputAdapter,
        fps: int = 60,
        on_frame: Optional[FrameCallback] = None,
    ):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.engine = engine
        self.input = input_adapter
        self.fps = fps
        self.on_frame = on_frame
        self._running = False
        self._stopped = False
        self._ticks = 0

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def ticks(self) -> int:
        return self._ticks

    def step(self) -> bool:
        """Run a single frame. Returns False once the loop is stopped."""
        if self._stopped:
            return False

        self.engine.tick(self.input.sample())
        self._ticks += 1
        self.engine.event_bus.emit(tick_event(self._ticks))

        if self.on_frame:
            self.on_frame(self.engine)
        return True

    async def run(self, max_ticks: Optional[int] = None) -> None:
        """Tick until stopped, or until ``max_ticks`` frames have run.

        The desktop window renders from ``on_frame``; the time that takes
        counts against the frame budget.
        """
        self._running = True
        frame_time = 1.0 / self.fps
        clock = asyncio.get_running_loop()
        logger.info(f"Game loop started at {self.fps} fps")

        try:
            while self._running and not self._stopped:
                if max_ticks is not None and self._ticks >= max_ticks:
                    break
                started = clock.time()
                self.step()
                elapsed = clock.time() - started
                await asyncio.sleep(max(0.0, frame_time - elapsed))
        finally:
            self._running = False
            logger.info(f"Game loop ended after {self._ticks} ticks")

    def stop(self) -> None:
        """Halt scheduling for good."""
        if self._stopped:
            return
        self._stopped = True
        self._running = False
        self.engine.event_bus.emit(
            Event(EventType.SHUTDOWN, data={"ticks": self._ticks}, source="loop")
        )
        logger.info("Game loop stopped")

"""
Desktop window for MEEPLE CATCHER using pygame.

Mouse x steers the meeple, SPACE or the left mouse button is the
trigger (start, inspect, replay).
"""

import logging
from dataclasses import dataclass

import numpy as np
import pygame

from ..core.events import Event, EventType
from ..game.engine import MeepleCatcher
from ..game.input import InputAdapter
from ..game.loop import GameLoop
from ..graphics.renderer import GameRenderer

logger = logging.getLogger(__name__)


@dataclass
class WindowConfig:
    """Simulator window configuration."""
    title: str = "Meeple Catcher"
    fps: int = 60
    scale: int = 2

    # Status strip under the playfield
    status_height: int = 28
    bg_color: tuple[int, int, int] = (20, 20, 30)
    text_color: tuple[int, int, int] = (200, 200, 220)
    miss_color: tuple[int, int, int] = (249, 115, 22)


class SimulatorWindow:
    """
    pygame host around the headless engine.

    Keyboard Mapping:
        SPACE / RETURN: Trigger
        LEFT / RIGHT: Nudge the pointer
        ESC / Q: Quit
    """

    KEY_NUDGE = 24
    TRIGGER_KEYS = frozenset({pygame.K_SPACE, pygame.K_RETURN})

    def __init__(
        self,
        engine: MeepleCatcher,
        config: WindowConfig | None = None,
    ) -> None:
        self.config = config or WindowConfig()
        self.engine = engine
        self.input = InputAdapter(engine.width)
        self.renderer = GameRenderer(engine.width, engine.height)
        self.loop = GameLoop(engine, self.input, fps=self.config.fps,
                             on_frame=self._on_frame)

        self._screen: pygame.Surface | None = None
        self._font: pygame.font.Font | None = None
        self._status = ""
        self._status_color = self.config.text_color
        self._keys_held: set[int] = set()
        self._mouse_held = False

        bus = engine.event_bus
        self._unsubscribers = [
            bus.subscribe(EventType.PIECE_MISSING, self._on_piece_missing),
            bus.subscribe(EventType.PHASE_CHANGED, self._on_phase_changed),
        ]

        logger.info("SimulatorWindow created")

    @property
    def _size(self) -> tuple[int, int]:
        scale = self.config.scale
        return (
            self.engine.width * scale,
            self.engine.height * scale + self.config.status_height,
        )

    def _init_pygame(self) -> None:
        pygame.init()
        pygame.display.set_caption(self.config.title)
        self._screen = pygame.display.set_mode(self._size, pygame.DOUBLEBUF)
        pygame.font.init()
        self._font = pygame.font.SysFont(None, 20)
        logger.info(f"Pygame initialized: {self._size[0]}x{self._size[1]}")

    # -------------------------------------------------------------------------
    # Event bus listeners
    # -------------------------------------------------------------------------

    def _on_piece_missing(self, event: Event) -> None:
        self._status = (
            f"{event.data['game_name']}: manque {event.data['piece_glyph']} "
            f"{event.data['piece_name']}"
        )
        self._status_color = self.config.miss_color

    def _on_phase_changed(self, event: Event) -> None:
        if event.data["phase"] == "gameover":
            self._status = f"Record: {self.engine.high_score}"
            self._status_color = self.config.text_color
        elif event.data["phase"] == "playing":
            self._status = ""

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            self._handle_event(event)

    def _handle_event(self, event: pygame.event.Event) -> None:
        # Each press and release is forwarded as it arrives
        if event.type == pygame.QUIT:
            self.loop.stop()

        elif event.type == pygame.MOUSEMOTION:
            self.input.set_pointer(event.pos[0] / self.config.scale)

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._mouse_held = True
            self._sync_held()

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._mouse_held = False
            self._sync_held()

        elif event.type == pygame.KEYDOWN:
            self._handle_keydown(event.key)

        elif event.type == pygame.KEYUP:
            self._keys_held.discard(event.key)
            self._sync_held()

    def _sync_held(self) -> None:
        self.input.set_held(self._mouse_held or bool(self._keys_held & self.TRIGGER_KEYS))

    def _handle_keydown(self, key: int) -> None:
        if key in (pygame.K_ESCAPE, pygame.K_q):
            self.loop.stop()
        elif key == pygame.K_LEFT:
            self.input.set_pointer(self.input.pointer_x - self.KEY_NUDGE)
        elif key == pygame.K_RIGHT:
            self.input.set_pointer(self.input.pointer_x + self.KEY_NUDGE)
        else:
            self._keys_held.add(key)
            self._sync_held()

    # -------------------------------------------------------------------------
    # Drawing
    # -------------------------------------------------------------------------

    def _render(self) -> None:
        if not self._screen:
            return

        self._screen.fill(self.config.bg_color)

        buffer = self.renderer.render(self.engine)
        surface = pygame.surfarray.make_surface(np.ascontiguousarray(buffer.swapaxes(0, 1)))
        if self.config.scale != 1:
            surface = pygame.transform.scale(
                surface,
                (self.engine.width * self.config.scale, self.engine.height * self.config.scale),
            )
        self._screen.blit(surface, (0, 0))

        if self._font and self._status:
            text = self._font.render(self._status, True, self._status_color)
            self._screen.blit(text, (8, self.engine.height * self.config.scale + 6))

        pygame.display.flip()

    # -------------------------------------------------------------------------
    # Main loop
    # -------------------------------------------------------------------------

    def _on_frame(self, engine: MeepleCatcher) -> None:
        self._render()
        # Input gathered here is sampled at the start of the next tick
        self._handle_events()

    async def run(self) -> None:
        """Main window loop, paced by the game loop."""
        self._init_pygame()
        logger.info("Simulator started")

        try:
            self._handle_events()
            await self.loop.run()
        finally:
            self.loop.stop()
            self._cleanup()

    def _cleanup(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        pygame.quit()
        logger.info("Simulator stopped")


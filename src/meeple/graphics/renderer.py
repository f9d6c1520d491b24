"""Paints the engine state onto a numpy RGB buffer every frame."""

from dataclasses import dataclass
from typing import List
import math
import random

import numpy as np
from numpy.typing import NDArray

from meeple.core.state import Phase
from meeple.game.catalog import PIECES, hex_to_rgb, piece_for
from meeple.game.engine import MeepleCatcher
from meeple.game.entities import FallingBox, FallingPiece
from meeple.graphics.primitives import (
    Color,
    blend_rect,
    draw_circle,
    draw_rect,
    draw_text,
    draw_text_centered,
    fill,
    new_buffer,
)

# =============================================================================
# Palette
# =============================================================================

BACKGROUND = (15, 15, 26)
PANEL = (15, 15, 26)
GROUND = (30, 27, 75)
GROUND_EDGE = (49, 46, 129)
GROUND_STUD = (67, 56, 202)
INDIGO = (99, 102, 241)
INDIGO_LIGHT = (165, 180, 252)
INDIGO_MID = (129, 140, 248)
INDIGO_DARK = (67, 56, 202)
HAPPY_BODY = (165, 243, 252)
HAPPY_DARK = (8, 145, 178)
SAD_BODY = (252, 165, 165)
SAD_DARK = (220, 38, 38)
GOLD = (253, 230, 138)
RED = (239, 68, 68)
ORANGE = (249, 115, 22)
OK_GREEN = (22, 163, 74)
HAS_PIECE = (6, 95, 70)
HEART_OFF = (55, 65, 81)
MUTED = (75, 85, 99)
WHITE = (255, 255, 255)
STAR = (165, 180, 252)

HUD_HEIGHT = 34
BAG_BAR_HEIGHT = 36
GROUND_HEIGHT = 48
BAG_SLOT = 24
BAG_SLOT_GAP = 4


@dataclass
class Star:
    x: int
    y: int
    size: int
    flicker: float


def _scale(color: Color, factor: float) -> Color:
    return tuple(int(c * factor) for c in color)


class GameRenderer:
    """Draws a ``MeepleCatcher`` at native playfield resolution."""

    def __init__(self, width: int, height: int, seed: int | None = None):
        self.width = width
        self.height = height
        self.buffer: NDArray[np.uint8] = new_buffer(width, height)

        rng = random.Random(seed)
        self.stars: List[Star] = [
            Star(
                x=int(rng.random() * width),
                y=int(rng.random() * height * 0.7),
                size=max(1, round((rng.random() * 1.3 + 0.3) * 2)),
                flicker=rng.random() * 100,
            )
            for _ in range(50)
        ]

    def render(self, engine: MeepleCatcher) -> NDArray[np.uint8]:
        """Render the current frame and return the buffer (reused each call)."""
        buf = self.buffer
        fill(buf, BACKGROUND)
        self._draw_stars(engine.frame)

        if engine.phase is Phase.INTRO:
            self._draw_intro(engine)
        elif engine.phase is Phase.PLAYING:
            self._draw_ground()
            for piece in engine.pieces:
                self._draw_piece(piece)
            for box in engine.boxes:
                self._draw_box(box, engine)
            self._draw_meeple(engine.meeple_x, engine.meeple_y, engine)
            self._draw_effects(engine)
            self._draw_hud(engine)
            self._draw_bag_bar(engine)
            self._draw_flash(engine)
        else:
            self._draw_effects(engine)
            self._draw_game_over(engine)

        return buf

    # -------------------------------------------------------------------------
    # Scenery
    # -------------------------------------------------------------------------

    def _draw_stars(self, frame: int) -> None:
        for star in self.stars:
            f = 0.5 + 0.5 * math.sin(frame * 0.04 + star.flicker)
            draw_rect(self.buffer, star.x, star.y, star.size, star.size,
                      _scale(STAR, 0.15 + f * 0.3))

    def _draw_ground(self) -> None:
        gy = self.height - GROUND_HEIGHT
        draw_rect(self.buffer, 0, gy, self.width, GROUND_HEIGHT, GROUND)
        draw_rect(self.buffer, 0, gy, self.width, 2, GROUND_EDGE)
        for x in range(4, self.width, 12):
            draw_rect(self.buffer, x, gy + 2, 4, 2, GROUND_STUD)

    # -------------------------------------------------------------------------
    # Entities
    # -------------------------------------------------------------------------

    def _draw_box(self, box: FallingBox, engine: MeepleCatcher) -> None:
        buf = self.buffer
        color = hex_to_rgb(box.game.color)
        edge = ORANGE if box.incomplete else color
        background = hex_to_rgb(box.game.background)

        shrink = 1.0
        alpha = 1.0
        wobble_x = 0.0
        if box.dying:
            shrink = max(0.01, 1 - box.death_progress)
            alpha = 1 - box.death_progress
        else:
            wobble_x = math.sin(box.wobble) * 1.8

        w = max(1, int(box.w * shrink))
        h = max(1, int(box.h * shrink))
        x = int(box.center_x + wobble_x - w / 2)
        y = int(box.center_y - h / 2)

        draw_rect(buf, x, y, w, h, _scale(background, alpha))
        draw_rect(buf, x, y, w, h, _scale(edge, alpha), filled=False)
        if shrink < 0.6:
            return

        draw_text_centered(buf, box.game.short, y + h - 10, _scale(color, alpha),
                           center_x=x + w // 2)

        cx, cy = x + w // 2, y + h // 2
        if box.incomplete:
            piece = piece_for(box.game)
            has_piece = engine.bag.contains(piece.id)
            draw_rect(buf, cx - 14, cy - 5, 28, 10, HAS_PIECE if has_piece else SAD_DARK)
            draw_circle(buf, cx - 6, cy, 3, hex_to_rgb(piece.color))
            draw_text(buf, "OK" if has_piece else "?", cx + 2, cy - 2, WHITE)
        else:
            draw_rect(buf, cx - 11, cy - 5, 22, 10, OK_GREEN)
            draw_text_centered(buf, "OK", cy - 2, WHITE, center_x=cx)

    def _draw_piece(self, piece: FallingPiece) -> None:
        color = hex_to_rgb(piece.kind.color)
        radius = piece.w / 2
        alpha = 1.0
        if piece.dying:
            radius *= max(0.01, 1 - piece.death_progress)
            alpha = 1 - piece.death_progress
        cx = int(piece.center_x + math.sin(piece.wobble) * 2)
        cy = int(piece.center_y)
        r = max(1, int(radius))
        draw_circle(self.buffer, cx, cy, r, color, alpha=0.2 * alpha)
        draw_circle(self.buffer, cx, cy, r, color, filled=False, alpha=alpha)
        draw_circle(self.buffer, cx, cy, max(1, r // 3), color, alpha=alpha)

    def _draw_meeple(self, mx: float, my: float, engine: MeepleCatcher) -> None:
        buf = self.buffer
        x = int(mx)
        y = int(my)
        if engine.happy > 0:
            y -= int(abs(math.sin(engine.happy * 0.15)) * 5)
            body, dark = HAPPY_BODY, HAPPY_DARK
        elif engine.sad > 0:
            x += int(math.sin(engine.sad * 0.4) * 3)
            body, dark = SAD_BODY, SAD_DARK
        else:
            body, dark = INDIGO, INDIGO_DARK

        draw_circle(buf, x, y - 13, 7, body)          # head
        draw_rect(buf, x - 4, y - 15, 2, 2, dark)     # eyes
        draw_rect(buf, x + 2, y - 15, 2, 2, dark)
        draw_rect(buf, x - 3, y - 11, 6, 1, dark)     # mouth
        draw_rect(buf, x - 3, y - 6, 6, 4, body)      # neck
        draw_rect(buf, x - 10, y - 2, 20, 9, body)    # torso
        draw_rect(buf, x - 13, y - 1, 5, 5, body)     # arms
        draw_rect(buf, x + 9, y - 1, 5, 5, body)
        draw_rect(buf, x - 7, y + 7, 5, 7, body)      # legs
        draw_rect(buf, x + 2, y + 7, 5, 7, body)
        draw_rect(buf, x - 9, y + 12, 7, 3, dark)     # feet
        draw_rect(buf, x + 2, y + 12, 7, 3, dark)

    def _draw_effects(self, engine: MeepleCatcher) -> None:
        for p in engine.effects.particles:
            alpha = max(0.0, min(1.0, p.life))
            x, y, r = int(p.x), int(p.y), max(1, int(p.radius))
            if p.star:
                # Four-point sparkle
                color = _scale(p.color, alpha)
                draw_rect(self.buffer, x - r - 1, y, 2 * r + 3, 1, color)
                draw_rect(self.buffer, x, y - r - 1, 1, 2 * r + 3, color)
                draw_rect(self.buffer, x - 1, y - 1, 3, 3, color)
            else:
                draw_circle(self.buffer, x, y, r, p.color, alpha=alpha)
        for t in engine.effects.float_texts:
            alpha = max(0.0, min(1.0, t.life))
            draw_text_centered(self.buffer, t.text, int(t.y), _scale(t.color, alpha),
                               center_x=int(t.x))

    # -------------------------------------------------------------------------
    # Overlays
    # -------------------------------------------------------------------------

    def _draw_hud(self, engine: MeepleCatcher) -> None:
        buf = self.buffer
        blend_rect(buf, 0, 0, self.width, HUD_HEIGHT, PANEL, 0.9)
        draw_text(buf, "SCORE", 8, 4, INDIGO)
        draw_text(buf, f"{engine.score:05d}", 8, 14, INDIGO_LIGHT, scale=2)
        draw_text_centered(buf, f"LVL {engine.level}", 9, INDIGO_MID)
        for i in range(3):
            heart = RED if i < engine.lives else HEART_OFF
            draw_circle(buf, self.width - 16 - i * 16, 12, 5, heart)
        draw_rect(buf, 0, HUD_HEIGHT, self.width, 1, GROUND_EDGE)

    def _draw_bag_bar(self, engine: MeepleCatcher) -> None:
        buf = self.buffer
        by = self.height - BAG_BAR_HEIGHT
        blend_rect(buf, 0, by, self.width, BAG_BAR_HEIGHT, PANEL, 0.9)
        draw_rect(buf, 0, by, self.width, 1, GROUND_EDGE)
        draw_text(buf, "BESACE:", 8, by + 14, INDIGO)

        held = engine.bag.items()
        for i in range(engine.bag.capacity):
            sx = 74 + i * (BAG_SLOT + BAG_SLOT_GAP)
            sy = by + 6
            draw_rect(buf, sx, sy, BAG_SLOT, BAG_SLOT, GROUND)
            draw_rect(buf, sx, sy, BAG_SLOT, BAG_SLOT, GROUND_EDGE, filled=False)
            if i < len(held):
                color = hex_to_rgb(PIECES[held[i]].color)
                draw_circle(buf, sx + BAG_SLOT // 2, sy + BAG_SLOT // 2, 7, color)

    def _draw_flash(self, engine: MeepleCatcher) -> None:
        flash = engine.effects.flash
        if flash is None:
            return
        alpha = flash.alpha
        top = int(self.height / 2 - 62 - flash.rise)
        for i, line in enumerate(flash.lines):
            color = flash.color if i == 0 else (WHITE if i == 1 else INDIGO_LIGHT)
            draw_text_centered(self.buffer, line, top + i * 13, _scale(color, alpha),
                               scale=2)

    def _blink(self, engine: MeepleCatcher) -> bool:
        return (engine.frame // 28) % 2 == 0

    def _draw_intro(self, engine: MeepleCatcher) -> None:
        buf = self.buffer
        w, h = self.width, self.height
        draw_text_centered(buf, "MEEPLE", 58, INDIGO_LIGHT, scale=5)
        draw_text_centered(buf, "CATCHER", 90, INDIGO_MID, scale=4)
        self._draw_meeple(w / 2, h / 2 - 18, engine)
        draw_text_centered(buf, "ATTRAPE LES JEUX", h // 2 + 50, INDIGO)
        draw_text_centered(buf, "COLLECTE LES PIECES", h // 2 + 64, INDIGO)
        draw_text_centered(buf, "COMPLETE LES INCOMPLETS", h // 2 + 78, MUTED)
        draw_text_centered(buf, "POUR UN BONUS !", h // 2 + 91, MUTED)
        if self._blink(engine):
            draw_text_centered(buf, "APPUIE SUR ESPACE", h - 72, GOLD, scale=2)
        if engine.high_score > 0:
            draw_text_centered(buf, f"RECORD: {engine.high_score}", h - 50, INDIGO)

    def _draw_game_over(self, engine: MeepleCatcher) -> None:
        buf = self.buffer
        h = self.height
        blend_rect(buf, 0, 0, self.width, h, PANEL, 0.8)
        draw_text_centered(buf, "GAME", h // 2 - 90, RED, scale=5)
        draw_text_centered(buf, "OVER", h // 2 - 62, RED, scale=5)
        draw_text_centered(buf, f"SCORE: {engine.score}", h // 2 - 24, INDIGO_LIGHT, scale=2)
        if engine.session.new_high_score:
            draw_text_centered(buf, "NOUVEAU RECORD !", h // 2 + 2, GOLD)
        else:
            draw_text_centered(buf, f"RECORD: {engine.high_score}", h // 2 + 2, INDIGO)
        draw_text_centered(buf, f"NIVEAU: {engine.level}", h // 2 + 20, INDIGO_MID)
        draw_text_centered(buf, f"JEUX: {engine.caught}", h // 2 + 36, MUTED)
        if self._blink(engine):
            draw_text_centered(buf, "ESPACE = REJOUER", h - 65, GOLD, scale=2)

"""Graphics module for MEEPLE CATCHER rendering."""

from meeple.graphics.renderer import GameRenderer
from meeple.graphics.primitives import (
    blend_rect,
    draw_circle,
    draw_rect,
    draw_text,
    draw_text_centered,
    fill,
    new_buffer,
    text_width,
)

__all__ = [
    "GameRenderer",
    "blend_rect",
    "draw_circle",
    "draw_rect",
    "draw_text",
    "draw_text_centered",
    "fill",
    "new_buffer",
    "text_width",
]

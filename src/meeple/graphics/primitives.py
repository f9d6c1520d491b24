"""Basic drawing primitives on (height, width, 3) uint8 numpy buffers."""

from typing import Dict, List, Tuple
import unicodedata

import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Buffer = NDArray[np.uint8]

GLYPH_WIDTH = 3
GLYPH_HEIGHT = 5


def new_buffer(width: int, height: int) -> Buffer:
    return np.zeros((height, width, 3), dtype=np.uint8)


def fill(buffer: Buffer, color: Color) -> None:
    """Fill entire buffer with color."""
    buffer[:, :] = color


def _clip(buffer: Buffer, x: int, y: int, width: int, height: int) -> Tuple[int, int, int, int]:
    h, w = buffer.shape[:2]
    return (
        max(0, min(x, w)),
        max(0, min(y, h)),
        max(0, min(x + width, w)),
        max(0, min(y + height, h)),
    )


def draw_rect(
    buffer: Buffer,
    x: int,
    y: int,
    width: int,
    height: int,
    color: Color,
    filled: bool = True,
) -> None:
    """Draw a rectangle, clipped to the buffer.

    Args:
        buffer: Target numpy array (height, width, 3)
        x: Left edge x coordinate
        y: Top edge y coordinate
        width: Rectangle width
        height: Rectangle height
        color: RGB color tuple
        filled: If False, draw a one pixel outline only
    """
    x1, y1, x2, y2 = _clip(buffer, x, y, width, height)
    if x2 <= x1 or y2 <= y1:
        return

    if filled:
        buffer[y1:y2, x1:x2] = color
        return

    h, w = buffer.shape[:2]
    if 0 <= y < h:
        buffer[y, x1:x2] = color
    if 0 <= y + height - 1 < h:
        buffer[y + height - 1, x1:x2] = color
    if 0 <= x < w:
        buffer[y1:y2, x] = color
    if 0 <= x + width - 1 < w:
        buffer[y1:y2, x + width - 1] = color


def blend_rect(
    buffer: Buffer,
    x: int,
    y: int,
    width: int,
    height: int,
    color: Color,
    alpha: float,
) -> None:
    """Alpha-blend a solid rectangle over the buffer."""
    x1, y1, x2, y2 = _clip(buffer, x, y, width, height)
    if x2 <= x1 or y2 <= y1 or alpha <= 0:
        return
    region = buffer[y1:y2, x1:x2].astype(np.float32)
    region = region * (1 - alpha) + np.array(color, dtype=np.float32) * alpha
    buffer[y1:y2, x1:x2] = region.astype(np.uint8)


def draw_circle(
    buffer: Buffer,
    cx: int,
    cy: int,
    radius: int,
    color: Color,
    filled: bool = True,
    alpha: float = 1.0,
) -> None:
    """Draw a circle using a distance mask over its bounding box.

    Args:
        buffer: Target numpy array (height, width, 3)
        cx: Center x coordinate
        cy: Center y coordinate
        radius: Circle radius in pixels
        color: RGB color tuple
        filled: If False, draw a one pixel ring only
        alpha: Blend factor against what is already drawn
    """
    if radius <= 0 or alpha <= 0:
        return
    x1, y1, x2, y2 = _clip(buffer, cx - radius, cy - radius, 2 * radius + 1, 2 * radius + 1)
    if x2 <= x1 or y2 <= y1:
        return

    ys, xs = np.ogrid[y1:y2, x1:x2]
    dist_sq = (xs - cx) ** 2 + (ys - cy) ** 2
    mask = dist_sq <= radius ** 2
    if not filled:
        mask &= dist_sq >= (radius - 1) ** 2

    region = buffer[y1:y2, x1:x2]
    if alpha >= 1.0:
        region[mask] = color
    else:
        blended = region[mask] * (1 - alpha) + np.array(color) * alpha
        region[mask] = blended.astype(np.uint8)


# 3x5 bitmap font, one string per row
_FONT_ROWS: Dict[str, List[str]] = {
    'A': ["010", "101", "111", "101", "101"],
    'B': ["110", "101", "110", "101", "110"],
    'C': ["011", "100", "100", "100", "011"],
    'D': ["110", "101", "101", "101", "110"],
    'E': ["111", "100", "110", "100", "111"],
    'F': ["111", "100", "110", "100", "100"],
    'G': ["011", "100", "101", "101", "011"],
    'H': ["101", "101", "111", "101", "101"],
    'I': ["111", "010", "010", "010", "111"],
    'J': ["001", "001", "001", "101", "010"],
    'K': ["101", "101", "110", "101", "101"],
    'L': ["100", "100", "100", "100", "111"],
    'M': ["101", "111", "101", "101", "101"],
    'N': ["110", "101", "101", "101", "101"],
    'O': ["010", "101", "101", "101", "010"],
    'P': ["110", "101", "110", "100", "100"],
    'Q': ["010", "101", "101", "111", "011"],
    'R': ["110", "101", "110", "101", "101"],
    'S': ["011", "100", "010", "001", "110"],
    'T': ["111", "010", "010", "010", "010"],
    'U': ["101", "101", "101", "101", "111"],
    'V': ["101", "101", "101", "010", "010"],
    'W': ["101", "101", "101", "111", "101"],
    'X': ["101", "101", "010", "101", "101"],
    'Y': ["101", "101", "010", "010", "010"],
    'Z': ["111", "001", "010", "100", "111"],
    '0': ["111", "101", "101", "101", "111"],
    '1': ["010", "110", "010", "010", "111"],
    '2': ["110", "001", "010", "100", "111"],
    '3': ["110", "001", "010", "001", "110"],
    '4': ["101", "101", "111", "001", "001"],
    '5': ["111", "100", "110", "001", "110"],
    '6': ["011", "100", "111", "101", "111"],
    '7': ["111", "001", "010", "010", "010"],
    '8': ["111", "101", "111", "101", "111"],
    '9': ["111", "101", "111", "001", "110"],
    '!': ["010", "010", "010", "000", "010"],
    '?': ["110", "001", "010", "000", "010"],
    '.': ["000", "000", "000", "000", "010"],
    ',': ["000", "000", "000", "010", "100"],
    ':': ["000", "010", "000", "010", "000"],
    '-': ["000", "000", "111", "000", "000"],
    '+': ["000", "010", "111", "010", "000"],
    "'": ["010", "010", "000", "000", "000"],
    '/': ["001", "001", "010", "100", "100"],
    '#': ["101", "111", "101", "111", "101"],
}

FONT: Dict[str, NDArray[np.bool_]] = {
    char: np.array([[c == "1" for c in row] for row in rows], dtype=bool)
    for char, rows in _FONT_ROWS.items()
}


def _fold(text: str) -> str:
    """Uppercase and strip accents so French labels use the ASCII glyphs."""
    text = text.upper().replace("Œ", "OE")
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def text_width(text: str, scale: int = 1) -> int:
    """Width in pixels of ``text`` as drawn by ``draw_text``."""
    if not text:
        return 0
    return len(_fold(text)) * (GLYPH_WIDTH + 1) * scale - scale


def draw_text(
    buffer: Buffer,
    text: str,
    x: int,
    y: int,
    color: Color,
    scale: int = 1,
) -> int:
    """Draw text with the built-in 3x5 font.

    Characters without a glyph (emoji included) leave a blank cell.

    Returns:
        Width of the rendered text in pixels
    """
    h, w = buffer.shape[:2]
    cursor_x = x
    for char in _fold(text):
        glyph = FONT.get(char)
        if glyph is not None:
            mask = np.kron(glyph, np.ones((scale, scale), dtype=bool)) if scale > 1 else glyph
            gx1, gy1 = max(0, cursor_x), max(0, y)
            gx2 = min(w, cursor_x + mask.shape[1])
            gy2 = min(h, y + mask.shape[0])
            if gx2 > gx1 and gy2 > gy1:
                sub = mask[gy1 - y:gy2 - y, gx1 - cursor_x:gx2 - cursor_x]
                buffer[gy1:gy2, gx1:gx2][sub] = color
        cursor_x += (GLYPH_WIDTH + 1) * scale
    return max(0, cursor_x - x - scale)


def draw_text_centered(
    buffer: Buffer,
    text: str,
    y: int,
    color: Color,
    scale: int = 1,
    center_x: int | None = None,
) -> int:
    """Draw text horizontally centered on ``center_x`` (buffer middle by default)."""
    if center_x is None:
        center_x = buffer.shape[1] // 2
    x = center_x - text_width(text, scale) // 2
    return draw_text(buffer, text, x, y, color, scale)

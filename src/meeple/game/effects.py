"""Cosmetic feedback: particles, floating texts and the flash banner.

Nothing here feeds back into scoring. Effects draw from their own random
generator so gameplay spawning stays reproducible under a fixed seed.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import math
import random

Color = Tuple[int, int, int]

GOLD = (253, 230, 138)
AMBER = (245, 158, 11)


@dataclass
class Particle:
    """A single burst particle, measured in ticks rather than milliseconds."""

    x: float
    y: float
    vx: float
    vy: float
    color: Color
    decay: float
    radius: float = 2.0
    star: bool = False
    life: float = 1.0

    GRAVITY = 0.1

    @property
    def is_dead(self) -> bool:
        return self.life <= 0

    def update(self) -> None:
        self.x += self.vx
        self.y += self.vy
        self.vy += self.GRAVITY
        self.life -= self.decay


@dataclass
class FloatText:
    """Short label rising from where something was caught."""

    text: str
    x: float
    y: float
    color: Color
    vy: float = -1.4
    decay: float = 0.02
    life: float = 1.0

    @property
    def is_dead(self) -> bool:
        return self.life <= 0

    def update(self) -> None:
        self.y += self.vy
        self.life -= self.decay


@dataclass
class FlashMessage:
    """Centered banner; the first line is drawn in ``color``."""

    lines: List[str]
    color: Color
    timer: int
    duration: int = field(init=False)

    def __post_init__(self) -> None:
        self.duration = self.timer

    @property
    def alpha(self) -> float:
        return min(1.0, self.timer / 12)

    @property
    def rise(self) -> float:
        return (self.duration - self.timer) * 0.8


class Effects:
    """Owns every cosmetic effect alive in the playfield."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.particles: List[Particle] = []
        self.float_texts: List[FloatText] = []
        self.flash: Optional[FlashMessage] = None

    def clear(self) -> None:
        self.particles.clear()
        self.float_texts.clear()
        self.flash = None

    def burst(self, x: float, y: float, color: Color, count: int = 12) -> None:
        rng = self.rng
        for i in range(count):
            angle = (math.pi * 2 * i) / count + rng.random() * 0.5
            speed = 1.5 + rng.random() * 3
            self.particles.append(Particle(
                x=x, y=y,
                vx=math.cos(angle) * speed,
                vy=math.sin(angle) * speed - 2,
                color=color,
                decay=0.028 + rng.random() * 0.02,
                radius=2 + rng.random() * 3,
            ))

    def gold_burst(self, x: float, y: float) -> None:
        rng = self.rng
        for i in range(22):
            angle = rng.random() * math.pi * 2
            speed = 1 + rng.random() * 5
            self.particles.append(Particle(
                x=x, y=y,
                vx=math.cos(angle) * speed,
                vy=math.sin(angle) * speed - 3,
                color=GOLD if i % 2 == 0 else AMBER,
                decay=0.018,
                radius=2.5,
                star=True,
            ))

    def float_text(self, text: str, x: float, y: float, color: Color) -> None:
        self.float_texts.append(FloatText(text=text, x=x, y=y, color=color))

    def flash_message(self, lines: List[str], color: Color, timer: int) -> None:
        self.flash = FlashMessage(lines=list(lines), color=color, timer=timer)

    def update(self) -> None:
        for particle in self.particles:
            particle.update()
        self.particles = [p for p in self.particles if not p.is_dead]

        for text in self.float_texts:
            text.update()
        self.float_texts = [t for t in self.float_texts if not t.is_dead]

        if self.flash is not None:
            self.flash.timer -= 1
            if self.flash.timer <= 0:
                self.flash = None

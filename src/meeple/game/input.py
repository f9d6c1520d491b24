"""
Input adapter: pointer position plus one held button.

The host feeds raw events in whenever they arrive; the game loop calls
``sample()`` once at the start of every tick.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class InputFrame:
    """Input as seen by a single tick."""

    target_x: float
    trigger: bool = False  # True only on the tick the button went down


class InputAdapter:
    """Turns a continuous pointer and a held button into tick inputs."""

    def __init__(self, width: int):
        if width <= 0:
            raise ValueError(f"Playfield width must be positive, got {width}")
        self.width = width
        self._pointer_x = width / 2
        self._held = False
        self._pressed = False  # latched until the next sample

    @property
    def held(self) -> bool:
        return self._held

    @property
    def pointer_x(self) -> float:
        return self._pointer_x

    def set_pointer(self, x: float) -> None:
        """Set the pointer x in playfield coordinates; clamped, never rejected."""
        self._pointer_x = max(0.0, min(float(self.width), float(x)))

    def set_held(self, held: bool) -> None:
        held = bool(held)
        if held and not self._held:
            self._pressed = True
        self._held = held

    def sample(self) -> InputFrame:
        """Consume the current input state for one tick."""
        trigger = self._pressed
        self._pressed = False
        return InputFrame(target_x=self._pointer_x, trigger=trigger)

"""
Phase machine for a MEEPLE CATCHER session.

Phases:
    INTRO: Title screen, waiting for the first trigger
    PLAYING: Boxes and pieces are falling
    GAMEOVER: Lives exhausted, waiting for a trigger to replay
"""

from enum import Enum
from typing import Callable
import logging

logger = logging.getLogger(__name__)


class Phase(Enum):
    """Session lifecycle phases."""
    INTRO = "intro"
    PLAYING = "playing"
    GAMEOVER = "gameover"


PhaseListener = Callable[[Phase, Phase], None]


class PhaseMachine:
    """
    Tracks the current phase and rejects transitions the game never makes.

    Listeners are notified after every successful transition; a failing
    listener is logged and does not stop the others.
    """

    VALID_TRANSITIONS: list[tuple[Phase, Phase]] = [
        (Phase.INTRO, Phase.PLAYING),
        (Phase.PLAYING, Phase.GAMEOVER),
        (Phase.GAMEOVER, Phase.PLAYING),  # Play again
    ]

    def __init__(self, initial_phase: Phase = Phase.INTRO) -> None:
        self._phase = initial_phase
        self._listeners: list[PhaseListener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.debug(f"PhaseMachine initialized with phase: {initial_phase.name}")

    @property
    def phase(self) -> Phase:
        """Get current phase."""
        return self._phase

    def can_transition(self, to_phase: Phase) -> bool:
        """Check if transition to given phase is valid."""
        return (self._phase, to_phase) in self._valid_transitions

    def transition(self, to_phase: Phase) -> bool:
        """
        Attempt to transition to a new phase.

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_phase):
            logger.warning(
                f"Invalid transition: {self._phase.name} -> {to_phase.name}"
            )
            return False

        old_phase = self._phase
        self._phase = to_phase
        logger.info(f"Phase transition: {old_phase.name} -> {to_phase.name}")

        for listener in self._listeners:
            try:
                listener(old_phase, to_phase)
            except Exception as e:
                logger.error(f"Error in phase listener: {e}")

        return True

    def add_listener(self, callback: PhaseListener) -> None:
        """Add a phase change listener."""
        self._listeners.append(callback)

"""
Event bus system for MEEPLE CATCHER.

The game engine publishes score, lives, level, phase, bag and miss
notifications here; the host window and tests subscribe to them.
Handlers run synchronously from inside a tick.
"""

from dataclasses import dataclass, field
from typing import Any, Callable
from enum import Enum, auto
import logging
import time
from collections import defaultdict

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Built-in event types."""
    # Session counters
    SCORE_CHANGED = auto()
    LIVES_CHANGED = auto()
    LEVEL_CHANGED = auto()
    PHASE_CHANGED = auto()
    BAG_CHANGED = auto()

    # Catch outcomes
    BOX_CAUGHT = auto()
    BOX_COMPLETED = auto()   # incomplete box finished with a bag piece
    PIECE_MISSING = auto()   # incomplete box caught without its piece
    PIECE_CAUGHT = auto()
    BAG_FULL = auto()
    BOX_INSPECTED = auto()
    LIFE_LOST = auto()
    HIGH_SCORE = auto()

    # System events
    TICK = auto()  # Frame tick
    SHUTDOWN = auto()


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: Event type (EventType enum or custom string)
        data: Event payload
        source: Component that emitted the event
        timestamp: When event was created
    """
    type: EventType | str
    data: dict[str, Any] = field(default_factory=dict)
    source: str = "system"
    timestamp: float = field(default_factory=time.time)


Handler = Callable[[Event], None]


class EventBus:
    """
    Central event bus for component communication.

    Handlers run synchronously, in subscription order, from inside the
    tick that emitted the event. Type-specific handlers run before
    handlers subscribed to everything.
    """

    def __init__(self) -> None:
        self._handlers: dict[EventType | str, list[Handler]] = defaultdict(list)
        self._global_handlers: list[Handler] = []

    def subscribe(
        self,
        event_type: EventType | str,
        handler: Handler
    ) -> Callable[[], None]:
        """
        Subscribe to an event type.

        Args:
            event_type: Type of event to listen for
            handler: Callback function

        Returns:
            Unsubscribe function
        """
        self._handlers[event_type].append(handler)
        logger.debug(f"Handler subscribed to {event_type}")

        def unsubscribe() -> None:
            if handler in self._handlers[event_type]:
                self._handlers[event_type].remove(handler)
                logger.debug(f"Handler unsubscribed from {event_type}")

        return unsubscribe

    def subscribe_all(self, handler: Handler) -> Callable[[], None]:
        """Subscribe to all events. Returns an unsubscribe function."""
        self._global_handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._global_handlers:
                self._global_handlers.remove(handler)

        return unsubscribe

    def emit(self, event: Event) -> None:
        """Deliver an event to its handlers now."""
        handlers = self._handlers.get(event.type, []) + self._global_handlers

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in event handler: {e}")


def tick_event(frame: int) -> Event:
    """Create a frame tick event."""
    return Event(EventType.TICK, data={"frame": frame}, source="loop")

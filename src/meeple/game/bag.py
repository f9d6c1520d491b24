"""Bounded inventory of caught pieces."""

from typing import Iterator, List
import logging

logger = logging.getLogger(__name__)

BAG_CAPACITY = 5


class Bag:
    """Ordered piece inventory with a fixed capacity.

    Duplicates are allowed. Removal takes the leftmost matching entry so
    the remaining pieces keep their insertion order.
    """

    def __init__(self, capacity: int = BAG_CAPACITY):
        if capacity <= 0:
            raise ValueError(f"Bag capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._items: List[str] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def __contains__(self, kind: str) -> bool:
        return kind in self._items

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def contains(self, kind: str) -> bool:
        return kind in self._items

    def items(self) -> List[str]:
        """Copy of the held piece kinds, oldest first."""
        return list(self._items)

    def add(self, kind: str) -> bool:
        """Append a piece kind. Returns False (and changes nothing) when full."""
        if self.is_full:
            return False
        self._items.append(kind)
        logger.debug(f"Bag + {kind} ({len(self._items)}/{self.capacity})")
        return True

    def remove(self, kind: str) -> bool:
        """Remove the leftmost ``kind``. Returns False when absent."""
        try:
            self._items.remove(kind)
        except ValueError:
            return False
        logger.debug(f"Bag - {kind} ({len(self._items)}/{self.capacity})")
        return True

    def clear(self) -> None:
        self._items.clear()

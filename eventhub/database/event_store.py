"""Process-wide store of deletable event identifiers.

The store lives only in memory: a restart brings back the seed records.
"""

import threading
from abc import ABC, abstractmethod
from collections.abc import Callable

from eventhub.database.sample_data import seed_event_records
from eventhub.models.event import EventRecord


class EventStore(ABC):
    @abstractmethod
    def list(self) -> list[EventRecord]:
        """Return a copy of the stored records in insertion order."""

    @abstractmethod
    def delete(self, event_id: str) -> int:
        """Remove every record whose id equals `event_id` and return how many were removed."""

    @abstractmethod
    def reset(self) -> None:
        """Restore the seed records."""


class InMemoryEventStore(EventStore):
    """
    List-backed store guarded by a single lock.

    Each operation runs under the lock, so a delete replaces the list in one
    step and readers never observe a half-filtered state.
    """

    def __init__(
        self, seed: Callable[[], list[EventRecord]] = seed_event_records
    ) -> None:
        self._seed = seed
        self._lock = threading.Lock()
        self._events: list[EventRecord] = seed()

    def list(self) -> list[EventRecord]:
        with self._lock:
            return list(self._events)

    def delete(self, event_id: str) -> int:
        with self._lock:
            remaining = [event for event in self._events if event.id != event_id]
            removed = len(self._events) - len(remaining)
            self._events = remaining
            return removed

    def reset(self) -> None:
        with self._lock:
            self._events = self._seed()


event_store = InMemoryEventStore()


def get_event_store() -> EventStore:
    """
    Provide the process-wide event store.

    Returns:
        EventStore: The shared in-memory store.
    """
    return event_store

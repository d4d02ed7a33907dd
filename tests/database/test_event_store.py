"""Tests for the in-memory event store."""

import threading

from eventhub.database import event_store as store_module
from eventhub.database.event_store import EventStore, InMemoryEventStore, get_event_store
from eventhub.models.event import EventRecord


class TestInMemoryEventStore:
    def test_seeded_with_two_events(self, event_store):
        assert event_store.list() == [EventRecord(id="1"), EventRecord(id="2")]

    def test_list_returns_copy(self, event_store):
        events = event_store.list()
        events.clear()
        assert len(event_store.list()) == 2

    def test_delete_is_idempotent(self, event_store):
        assert event_store.delete("1") == 1
        assert event_store.delete("1") == 0
        assert event_store.list() == [EventRecord(id="2")]

    def test_reset_restores_seed(self, event_store):
        event_store.delete("1")
        event_store.delete("2")
        assert event_store.list() == []

        event_store.reset()

        assert [e.id for e in event_store.list()] == ["1", "2"]

    def test_concurrent_deletes_lose_nothing(self):
        """Parallel deletes of distinct ids never resurrect an already deleted record."""
        ids = [str(i) for i in range(200)]
        store = InMemoryEventStore(seed=lambda: [EventRecord(id=i) for i in ids])

        threads = [threading.Thread(target=store.delete, args=(i,)) for i in ids[:100]]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert [e.id for e in store.list()] == ids[100:]


class TestGetEventStore:
    def test_returns_process_wide_store(self):
        assert get_event_store() is store_module.event_store
        assert isinstance(get_event_store(), EventStore)

"""Admin router for deleting events from the in-memory event store."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from eventhub.database.event_store import EventStore, get_event_store
from eventhub.models.event import EventDeleted, EventRecord
from eventhub.services import events as event_service

router = APIRouter(prefix="/api/admin/events", tags=["Admin Events"])


@router.get("", response_model=list[EventRecord])
def list_events(
    store: Annotated[EventStore, Depends(get_event_store)],
) -> list[EventRecord]:
    """
    List the events currently held by the store.

    Returns:
        `list[EventRecord]`: Stored events in insertion order.
    """
    return store.list()


@router.delete("", response_model=EventDeleted)
def delete_event(
    store: Annotated[EventStore, Depends(get_event_store)],
    event_ids: Annotated[list[str], Query(alias="id")] = [],
) -> EventDeleted:
    """
    Delete an event identified by the `id` query parameter.

    Every stored event with that identifier is removed. Unknown identifiers
    still answer with success. When `id` is repeated only the first value is
    used.

    Example:
        DELETE /api/admin/events?id=1 -> {"message": "Event deleted"}

    Errors:
        400 `{"error": "Event ID is required"}` when `id` is missing or empty.
    """
    event_service.delete_event(store, event_ids[0] if event_ids else None)
    return EventDeleted()


@router.delete("/{event_id}", response_model=EventDeleted)
def delete_event_by_path(
    event_id: str,
    store: Annotated[EventStore, Depends(get_event_store)],
) -> EventDeleted:
    """
    Delete an event identified by the path segment.

    Same semantics as `DELETE /api/admin/events?id=...`; the path segment
    takes precedence over any `id` query parameter.
    """
    event_service.delete_event(store, event_id)
    return EventDeleted()

"""Event deletion service."""

from loguru import logger

from eventhub.database.event_store import EventStore
from eventhub.exceptions import ValidationError


def delete_event(store: EventStore, event_id: str | None) -> int:
    """
    Delete every event whose identifier equals `event_id`.

    Deleting an identifier that is not stored is not an error: the store is
    left unchanged and the call still succeeds.

    Parameters:
        store: The event store to delete from.
        event_id: Identifier of the event(s) to remove.

    Returns:
        int: Number of removed events (0 when nothing matched).

    Raises:
        ValidationError: If `event_id` is missing or empty; the store is left untouched.
    """
    if not event_id:
        raise ValidationError("Event ID is required", field="id")

    removed = store.delete(event_id)
    logger.info(f"Delete event '{event_id}': {removed} record(s) removed.")
    return removed

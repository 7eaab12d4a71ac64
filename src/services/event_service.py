from __future__ import annotations

from src.domain.events import EVENT_CREATED, Event
from src.settings.logger import logger
from src.storage.event_store import EventStore


class EventService:
    def __init__(self, store: EventStore):
        self.store = store

    def list_events(self) -> list[Event]:
        events = self.store.all()
        logger.debug(f"[EVENTS] listed {len(events)} event(s)")
        return events

    def append_event(self, payload: Event) -> str:
        """Payload is stored as-is, whatever its shape."""
        self.store.append(payload)
        logger.debug(f"[EVENTS] appended, store size={self.store.count()}")
        return EVENT_CREATED

import threading

from src.domain.events import Event


class EventStore:
    """
    In-memory, append-only sequence of events for the lifetime of the process.
    Nothing is written to disk.
    """

    def __init__(self):
        self._events: list[Event] = []
        self._lock = threading.Lock()

    def append(self, event: Event) -> None:
        with self._lock:
            self._events.append(event)

    def all(self) -> list[Event]:
        """Snapshot of every event in insertion order."""
        with self._lock:
            return list(self._events)

    def count(self) -> int:
        with self._lock:
            return len(self._events)

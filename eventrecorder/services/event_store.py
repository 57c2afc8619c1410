"""In-memory, append-only event store."""
import asyncio
from typing import Any, Dict, List
import structlog
from ..event_models import Event

log = structlog.get_logger()


class EventStore:
    """
    Ordered, append-only collection of recorded events.

    Appends are serialized so that every event's id is its position in
    the store, also when many requests complete at once. Contents live
    for the lifetime of the store object.
    """

    def __init__(self):
        self._events: List[Event] = []
        self._lock = asyncio.Lock()

    async def append(self, name: str, timestamp: Dict[str, Any]) -> Event:
        """
        Append a new event.

        Args:
            name: Event name
            timestamp: Decoded time service payload

        Returns:
            The stored event with its positional id
        """
        async with self._lock:
            event = Event(id=len(self._events), name=name, timestamp=timestamp)
            self._events.append(event)
        log.debug("store.appended", id=event.id, name=name)
        return event

    def snapshot(self) -> List[Event]:
        """Copy of the current contents, oldest first."""
        return list(self._events)

    def clear(self):
        self._events.clear()
        log.info("store.cleared")

    def __len__(self) -> int:
        return len(self._events)

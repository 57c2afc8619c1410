"""Records events stamped with the time reported by the time source."""
from typing import Any, Dict, List
import time
import orjson
import structlog
from .event_store import EventStore
from ..errors import TimeSourceError, TimestampDecodeError
from ..event_models import Event
from ..metrics import Metrics
from ..time_source import TimeSource

log = structlog.get_logger()


class EventRecorder:
    """
    Stamps events with the current time and appends them to the store.

    An event is appended only once its timestamp has been obtained and
    decoded; on any failure the store is left untouched.
    """

    def __init__(self, store: EventStore, time_source: TimeSource, metrics: Metrics | None = None):
        """
        Args:
            store: Store the events are appended to
            time_source: Where timestamps come from
            metrics: Optional Prometheus metrics to update
        """
        self.store = store
        self.time_source = time_source
        self.metrics = metrics

    async def record(self, name: str) -> List[Event]:
        """
        Record an event named ``name``.

        Returns:
            The whole store after the append, oldest first

        Raises:
            TimeSourceError: If the time source call failed
            TimestampDecodeError: If the time source payload is not a JSON object
        """
        log.info("time.requested", name=name)
        start_time = time.time()
        try:
            payload = await self.time_source.current_time()
        except TimeSourceError as e:
            log.error("time_source.failed", name=name, error=e.message)
            self._failure("unavailable")
            raise
        finally:
            if self.metrics:
                self.metrics.time_source_latency.observe(time.time() - start_time)

        timestamp = self._decode(payload)
        event = await self.store.append(name, timestamp)
        stored = len(self.store)
        log.info("event.recorded", id=event.id, name=name, stored=stored)
        if self.metrics:
            self.metrics.record_event(name, stored)
        return self.store.snapshot()

    def _decode(self, payload: bytes) -> Dict[str, Any]:
        try:
            timestamp = orjson.loads(payload)
        except orjson.JSONDecodeError as e:
            log.error("time_source.invalid_payload", error=str(e))
            self._failure("invalid_json")
            raise TimestampDecodeError("Time service payload is not valid JSON", cause=e) from e

        if not isinstance(timestamp, dict):
            log.error("time_source.invalid_payload", error="not an object", type=type(timestamp).__name__)
            self._failure("not_an_object")
            raise TimestampDecodeError("Time service payload is not a JSON object")
        return timestamp

    def _failure(self, reason: str):
        if self.metrics:
            self.metrics.record_time_source_failure(reason)

"""Shared fixtures."""
import asyncio
import random
import pytest
import orjson
from eventrecorder.config import Settings
from eventrecorder.errors import TimeSourceError
from eventrecorder.main import create_app
from eventrecorder.services.event_store import EventStore
from eventrecorder.time_source import TimeSource


class FakeTimeSource(TimeSource):
    """Time source answering with canned payloads."""

    def __init__(self, payload=None, raw: bytes | None = None, error: Exception | None = None, jitter: float = 0.0):
        self.payload = payload if payload is not None else {"now": 1000}
        self.raw = raw
        self.error = error
        self.jitter = jitter
        self.calls = 0
        self.healthy = True
        self.closed = False

    async def current_time(self) -> bytes:
        self.calls += 1
        if self.jitter:
            await asyncio.sleep(random.uniform(0, self.jitter))
        if self.error is not None:
            raise self.error
        if self.raw is not None:
            return self.raw
        return orjson.dumps(self.payload)

    async def health_check(self) -> bool:
        return self.healthy

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def settings():
    return Settings(TIME_SOURCE="local", LOG_JSON=False)


@pytest.fixture
def store():
    return EventStore()


@pytest.fixture
def time_source():
    return FakeTimeSource()


@pytest.fixture
def failing_time_source():
    return FakeTimeSource(error=TimeSourceError("Time service at http://time unreachable: boom"))


@pytest.fixture
def app(settings, store, time_source):
    return create_app(settings, store=store, time_source=time_source)

"""Tests for the record operation."""
import pytest
from conftest import FakeTimeSource
from eventrecorder.errors import TimeSourceError, TimestampDecodeError
from eventrecorder.metrics import Metrics
from eventrecorder.services.event_store import EventStore
from eventrecorder.services.recorder import EventRecorder


@pytest.mark.asyncio
async def test_record_returns_whole_store():
    store = EventStore()
    recorder = EventRecorder(store, FakeTimeSource({"now": 1000}))

    await recorder.record("GET")
    events = await recorder.record("custom")

    assert [e.model_dump() for e in events] == [
        {"id": 0, "name": "GET", "timestamp": {"now": 1000}},
        {"id": 1, "name": "custom", "timestamp": {"now": 1000}},
    ]


@pytest.mark.asyncio
async def test_record_time_source_failure_leaves_store_unchanged(failing_time_source):
    store = EventStore()
    recorder = EventRecorder(store, failing_time_source)

    with pytest.raises(TimeSourceError):
        await recorder.record("GET")

    assert len(store) == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("raw", [b"not json", b"", b"[1, 2, 3]", b"42"])
async def test_record_invalid_payload_leaves_store_unchanged(raw):
    """Payloads that are not a JSON object are rejected."""
    store = EventStore()
    recorder = EventRecorder(store, FakeTimeSource(raw=raw))

    with pytest.raises(TimestampDecodeError):
        await recorder.record("GET")

    assert len(store) == 0


@pytest.mark.asyncio
async def test_record_updates_metrics(failing_time_source):
    metrics = Metrics()
    store = EventStore()

    await EventRecorder(store, FakeTimeSource(), metrics=metrics).record("GET")
    with pytest.raises(TimeSourceError):
        await EventRecorder(store, failing_time_source, metrics=metrics).record("GET")

    registry = metrics.registry
    assert registry.get_sample_value("eventrecorder_events_recorded_total", {"name": "GET"}) == 1.0
    assert registry.get_sample_value("eventrecorder_events_stored") == 1.0
    assert registry.get_sample_value(
        "eventrecorder_time_source_failures_total", {"reason": "unavailable"}
    ) == 1.0
    assert registry.get_sample_value("eventrecorder_time_source_latency_seconds_count") == 2.0

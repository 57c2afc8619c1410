"""Tests for middleware components."""
import pytest
from httpx import AsyncClient, ASGITransport
from eventrecorder.config import Settings
from eventrecorder.main import create_app


@pytest.mark.asyncio
async def test_correlation_id_generated(app):
    """Correlation ID is generated if not provided."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/")
        assert response.status_code == 200
        assert response.headers["X-Correlation-ID"]


@pytest.mark.asyncio
async def test_correlation_id_preserved(app):
    """Provided correlation ID is echoed back."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        correlation_id = "test-correlation-123"
        response = await client.post(
            "/",
            json={"name": "custom"},
            headers={"X-Correlation-ID": correlation_id}
        )
        assert response.status_code == 200
        assert response.headers["X-Correlation-ID"] == correlation_id


@pytest.mark.asyncio
async def test_payload_too_large_rejection(store, time_source):
    """Oversized payloads are rejected before recording."""
    settings = Settings(TIME_SOURCE="local", MAX_EVENT_SIZE=256)
    app = create_app(settings, store=store, time_source=time_source)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post("/", json={"name": "x" * 1000})
        assert response.status_code == 413
        data = response.json()
        assert data["error"] == "PayloadTooLarge"
        assert data["max_size"] == 256
    assert len(store) == 0
    assert time_source.calls == 0


@pytest.mark.asyncio
async def test_invalid_json_rejection(app, store):
    """Invalid JSON is rejected with a structured 400."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post(
            "/",
            content=b"{invalid json}",
            headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json()["error"] == "InvalidJSON"
    assert len(store) == 0


@pytest.mark.asyncio
async def test_unexpected_error_is_structured(app, time_source):
    """Errors outside the recorder taxonomy become a structured 500."""
    time_source.error = RuntimeError("boom")
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/", headers={"X-Correlation-ID": "corr-500"})
        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "InternalServerError"
        assert data["correlation_id"] == "corr-500"


@pytest.mark.asyncio
async def test_error_responses_counted(failing_time_source, settings, store):
    app = create_app(settings, store=store, time_source=failing_time_source)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        await client.get("/")

    registry = app.state.metrics.registry
    assert registry.get_sample_value(
        "http_requests_total",
        {"service": "eventrecorder", "method": "GET", "path": "/", "status": "502"},
    ) == 1.0

"""
Event Recorder - records events stamped with the time reported by a time service.

Features:
- Structured logging with correlation IDs
- Prometheus metrics
- Health checks (liveness and readiness)
- Event recording and listing
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from prometheus_client import make_asgi_app
from .config import Settings, get_settings
from .logging import setup_logging, get_logger
from .api.router import router
from .middleware import (
    CorrelationIdMiddleware,
    ErrorHandlerMiddleware,
    MetricsMiddleware,
    ValidationMiddleware,
)
from .metrics import Metrics
from .health import HealthChecker
from .services.event_store import EventStore
from .services.recorder import EventRecorder
from .time_source import TimeSource, create_time_source

SERVICE_NAME = "eventrecorder"
VERSION = "0.1.0"

logger = get_logger()


def create_app(
    settings: Settings | None = None,
    store: EventStore | None = None,
    time_source: TimeSource | None = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Configuration (defaults to environment settings)
        store: Event store to record into (defaults to a fresh, empty store)
        time_source: Time source (defaults to the configured one)
    """
    settings = settings or get_settings()
    store = store if store is not None else EventStore()
    time_source = time_source or create_time_source(settings)

    metrics = Metrics(service_name=SERVICE_NAME, version=VERSION)
    health_checker = HealthChecker(time_source, service_name=SERVICE_NAME, version=VERSION)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "service_starting",
            version=VERSION,
            env=settings.ENV,
            time_source=type(time_source).__name__,
        )
        yield
        logger.info("service_stopping")
        metrics.app_up.labels(service=SERVICE_NAME, version=VERSION).set(0)
        await time_source.aclose()

    app = FastAPI(
        title="Event Recorder",
        version=VERSION,
        description="Records events stamped by a remote time service",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.store = store
    app.state.time_source = time_source
    app.state.metrics = metrics
    app.state.recorder = EventRecorder(store, time_source, metrics=metrics)

    # Last added runs first: correlation ID, metrics, validation, error handling
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(ValidationMiddleware, max_size=settings.MAX_EVENT_SIZE)
    app.add_middleware(MetricsMiddleware, metrics=metrics)
    app.add_middleware(CorrelationIdMiddleware)

    app.include_router(router)

    app.mount("/metrics", make_asgi_app(registry=metrics.registry))

    @app.get("/health")
    async def health():
        """Liveness probe. Returns 200 if the service is running."""
        logger.debug("health_check_liveness")
        return health_checker.liveness()

    @app.get("/health/ready")
    async def health_ready():
        """
        Readiness probe.

        Returns:
            200: Time source reachable, service can record events
            503: Service is not ready
        """
        logger.debug("health_check_readiness")
        result = await health_checker.readiness()
        status_code = 200 if result["status"] == "ready" else 503
        return JSONResponse(result, status_code=status_code)

    return app


settings = get_settings()
setup_logging(json_output=settings.LOG_JSON, service_name=SERVICE_NAME)

app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "eventrecorder.main:app",
        host="0.0.0.0",
        port=settings.SERVICE_PORT,
        reload=True,
    )

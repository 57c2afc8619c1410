"""Correlation ID middleware for request tracing."""
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
import structlog
import uuid
from contextvars import ContextVar

# Correlation ID of the request being handled
correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")

CORRELATION_HEADER = "X-Correlation-ID"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """
    Adds a correlation ID to every request.

    - Takes it from the X-Correlation-ID header if present, else generates one
    - Binds it to the structlog context together with method and path
    - Echoes it in the response headers
    """

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())

        correlation_id_var.set(correlation_id)
        request.state.correlation_id = correlation_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            correlation_id=correlation_id,
            http_method=request.method,
            http_path=request.url.path,
        )

        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


def get_correlation_id() -> str:
    """Get the current correlation ID from context."""
    return correlation_id_var.get()

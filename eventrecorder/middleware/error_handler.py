"""Structured error response middleware."""
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
import structlog
from .correlation import get_correlation_id
from ..errors import RecorderError

log = structlog.get_logger()


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Turns exceptions escaping the routes into structured JSON responses."""

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except RecorderError as exc:
            correlation_id = get_correlation_id()
            log.warning(
                "recorder.error",
                error=exc.error_code,
                status_code=exc.status_code,
                detail=exc.message,
                cause=type(exc.cause).__name__ if exc.cause else None,
                path=request.url.path,
            )
            return JSONResponse(
                status_code=exc.status_code,
                content={
                    "error": exc.error_code,
                    "message": exc.message,
                    "status_code": exc.status_code,
                    "correlation_id": correlation_id,
                    "path": str(request.url.path),
                },
            )
        except Exception as exc:
            correlation_id = get_correlation_id()
            log.error(
                "unhandled.exception",
                error=str(exc),
                error_type=exc.__class__.__name__,
                path=request.url.path,
                exc_info=True,
            )
            return JSONResponse(
                status_code=500,
                content={
                    "error": "InternalServerError",
                    "message": "An unexpected error occurred",
                    "status_code": 500,
                    "correlation_id": correlation_id,
                    "path": str(request.url.path),
                },
            )

"""HTTP middleware for the event recorder service."""
from .correlation import CorrelationIdMiddleware, get_correlation_id
from .error_handler import ErrorHandlerMiddleware
from .metrics import MetricsMiddleware
from .validation import ValidationMiddleware

__all__ = [
    "CorrelationIdMiddleware",
    "ErrorHandlerMiddleware",
    "MetricsMiddleware",
    "ValidationMiddleware",
    "get_correlation_id",
]

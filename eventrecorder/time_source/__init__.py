"""Time sources and their selection from configuration."""
import structlog
from .base import TimeSource
from .http import HttpTimeSource
from .local import LocalTimeSource
from ..config import Settings

log = structlog.get_logger()

__all__ = ["TimeSource", "HttpTimeSource", "LocalTimeSource", "create_time_source"]


def create_time_source(settings: Settings) -> TimeSource:
    """
    Create the time source selected by configuration.

    Returns:
        TimeSource instance based on the TIME_SOURCE setting
    """
    if settings.TIME_SOURCE == "http":
        urls = settings.time_service_urls
        if not urls:
            log.warning(
                "time_source.fallback",
                requested="http",
                actual="local",
                reason="TIME_SERVICE_URLS not configured",
            )
            return LocalTimeSource()

        log.info("time_source.selected", type="http", urls=urls)
        return HttpTimeSource(urls, timeout=settings.TIME_SERVICE_TIMEOUT)
    else:
        log.info("time_source.selected", type="local")
        return LocalTimeSource()

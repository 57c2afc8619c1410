"""
Structured logging configuration using structlog.

Log line format:
{
    "ts": "2025-11-18T04:30:00.123456Z",
    "level": "info",
    "service": "eventrecorder",
    "correlation_id": "uuid-v4",
    "event": "event.recorded",
    "module": "eventrecorder.services.recorder",
    "function": "record",
    "line": 42,
    ...additional context...
}
"""
import structlog
import logging
from typing import Any, Callable


def service_name_adder(service_name: str) -> Callable[[Any, str, dict], dict]:
    """Build a processor that stamps every entry with the service name."""

    def add_service_name(logger: Any, method_name: str, event_dict: dict) -> dict:
        event_dict["service"] = service_name
        return event_dict

    return add_service_name


def add_module_info(logger: Any, method_name: str, event_dict: dict) -> dict:
    """Add module, function, and line number to log entries."""
    # skip this module so the frame found is the one that logged
    frame = structlog._frames._find_first_app_frame_and_name(additional_ignores=[__name__])[0]
    if frame:
        event_dict["module"] = frame.f_globals.get("__name__", "unknown")
        event_dict["function"] = frame.f_code.co_name
        event_dict["line"] = frame.f_lineno
    return event_dict


def setup_logging(json_output: bool = True, service_name: str = "eventrecorder"):
    """
    Configure structured logging.

    Args:
        json_output: If True, output JSON logs. If False, use console format.
        service_name: Value of the ``service`` field on every entry.
    """
    shared_processors = [
        # correlation_id and request info bound by the middleware
        structlog.contextvars.merge_contextvars,
        service_name_adder(service_name),
        structlog.processors.TimeStamper(fmt="iso", key="ts"),
        structlog.processors.add_log_level,
        add_module_info,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_output:
        processors = shared_processors + [structlog.processors.JSONRenderer()]
    else:
        processors = shared_processors + [structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=logging.INFO,
    )

    # uvicorn would otherwise log every request a second time
    logging.getLogger("uvicorn.error").handlers = []
    logging.getLogger("uvicorn.access").handlers = []


def get_logger():
    """Get a configured structlog logger."""
    return structlog.get_logger()

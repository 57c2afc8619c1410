"""
Prometheus metrics for the event recorder service.
"""
from prometheus_client import Counter, Histogram, Gauge, Info, CollectorRegistry


class Metrics:
    """
    Centralized metrics for the event recorder service.
    """

    def __init__(self, service_name: str = "eventrecorder", version: str = "0.1.0", registry=None):
        self.service_name = service_name
        self.version = version
        self.registry = registry or CollectorRegistry()

        # HTTP Metrics
        self.http_requests_total = Counter(
            "http_requests_total",
            "Total HTTP requests",
            ["service", "method", "path", "status"],
            registry=self.registry,
        )

        self.http_request_duration = Histogram(
            "http_request_duration_seconds",
            "HTTP request duration in seconds",
            ["service", "method", "path"],
            registry=self.registry,
        )

        self.http_requests_active = Gauge(
            "http_requests_active",
            "Number of active HTTP requests",
            ["service"],
            registry=self.registry,
        )
        self.http_requests_active.labels(service=service_name).set(0)

        # Application Info
        self.app_info = Info(
            "app",
            "Application information",
            registry=self.registry,
        )
        self.app_info.info({"service": service_name, "version": version})

        self.app_up = Gauge(
            "app_up",
            "Application up status (1=up, 0=down)",
            ["service", "version"],
            registry=self.registry,
        )
        self.app_up.labels(service=service_name, version=version).set(1)

        # Recorder metrics
        self.events_recorded_total = Counter(
            "eventrecorder_events_recorded_total",
            "Total events recorded",
            ["name"],
            registry=self.registry,
        )

        self.events_stored = Gauge(
            "eventrecorder_events_stored",
            "Number of events currently held in the store",
            registry=self.registry,
        )

        self.time_source_failures_total = Counter(
            "eventrecorder_time_source_failures_total",
            "Failed attempts to obtain a timestamp",
            ["reason"],
            registry=self.registry,
        )

        self.time_source_latency = Histogram(
            "eventrecorder_time_source_latency_seconds",
            "Time spent waiting on the time source",
            registry=self.registry,
        )

    def record_event(self, name: str, stored: int):
        """Record a successfully stored event."""
        self.events_recorded_total.labels(name=name).inc()
        self.events_stored.set(stored)

    def record_time_source_failure(self, reason: str):
        self.time_source_failures_total.labels(reason=reason).inc()

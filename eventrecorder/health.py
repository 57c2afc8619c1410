"""
Health checks for liveness and readiness probes.
"""
from datetime import datetime, timezone
from typing import Dict, Any
import time
import psutil
from .logging import get_logger
from .time_source import TimeSource

logger = get_logger()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class HealthChecker:
    """
    Health checker for the event recorder service.

    Provides:
    - Liveness checks (is the service running?)
    - Readiness checks (can the service record events?)
    """

    def __init__(self, time_source: TimeSource, service_name: str = "eventrecorder", version: str = "0.1.0"):
        self.time_source = time_source
        self.service_name = service_name
        self.version = version

    def liveness(self) -> Dict[str, Any]:
        """
        Liveness check - basic health check.

        Returns:
            dict: Health status with service info and timestamp
        """
        return {
            "status": "ok",
            "service": self.service_name,
            "version": self.version,
            "timestamp": _now(),
        }

    async def readiness(self) -> Dict[str, Any]:
        """
        Readiness check.

        Checks:
        - Time source reachability
        - Memory availability

        Returns:
            dict: Readiness status with detailed check results
        """
        checks = {}
        overall_status = "ready"

        time_check = await self._check_time_source()
        checks["time_source"] = time_check
        if time_check["status"] == "error":
            overall_status = "not_ready"

        memory_check = self._check_memory()
        checks["memory"] = memory_check
        if memory_check["status"] == "error":
            overall_status = "not_ready"

        return {
            "status": overall_status,
            "service": self.service_name,
            "version": self.version,
            "timestamp": _now(),
            "checks": checks,
        }

    async def _check_time_source(self) -> Dict[str, Any]:
        start = time.time()
        healthy = await self.time_source.health_check()
        latency_ms = round((time.time() - start) * 1000, 2)
        if not healthy:
            logger.warning("time_source_health_check_failed", source=type(self.time_source).__name__)
            return {
                "status": "error",
                "source": type(self.time_source).__name__,
                "latency_ms": latency_ms,
            }
        return {
            "status": "ok",
            "source": type(self.time_source).__name__,
            "latency_ms": latency_ms,
        }

    def _check_memory(self, threshold_mb: float = 50.0) -> Dict[str, Any]:
        """
        Check available memory.

        Args:
            threshold_mb: Minimum available memory in MB (default: 50.0)

        Returns:
            dict: Memory health check result
        """
        try:
            memory = psutil.virtual_memory()
        except (OSError, RuntimeError) as e:
            logger.warning("memory_health_check_failed", error=str(e))
            return {
                "status": "error",
                "error": str(e),
            }

        available_mb = memory.available / (1024**2)
        if available_mb < threshold_mb:
            status = "error"
        elif available_mb < threshold_mb * 2:
            status = "warning"
        else:
            status = "ok"

        return {
            "status": status,
            "available_mb": round(available_mb, 2),
            "total_mb": round(memory.total / (1024**2), 2),
            "used_percent": memory.percent,
        }

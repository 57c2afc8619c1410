"""Base interface for time sources."""
from abc import ABC, abstractmethod


class TimeSource(ABC):
    """Abstract interface for services that report the current time."""

    @abstractmethod
    async def current_time(self) -> bytes:
        """
        Ask for the current time.

        Returns:
            Raw payload, the bytes of a JSON object

        Raises:
            TimeSourceError: If the time could not be obtained
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check if the time source is reachable.

        Returns:
            True if healthy, False otherwise
        """
        pass

    async def aclose(self) -> None:
        """Release any held resources."""
        return None

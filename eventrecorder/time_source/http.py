"""HTTP time service client."""
import itertools
from typing import Iterable
import httpx
import structlog
from .base import TimeSource
from ..errors import TimeSourceError

log = structlog.get_logger()


class HttpTimeSource(TimeSource):
    """Fetches the current time from one of several time service instances.

    Instances are picked in round-robin order, one per call. A failed call
    is reported as is; the next call moves on to the next instance.
    """

    def __init__(
        self,
        urls: Iterable[str],
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the time service client.

        Args:
            urls: Time service endpoints
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests inject a MockTransport)
        """
        self.urls = list(urls)
        if not self.urls:
            raise ValueError("HttpTimeSource needs at least one URL")
        self.timeout = timeout
        self._transport = transport
        self._cycle = itertools.cycle(self.urls)
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                follow_redirects=True,
            )
        return self._client

    def next_url(self) -> str:
        return next(self._cycle)

    async def current_time(self) -> bytes:
        """
        GET the current time from the next time service instance.

        Raises:
            TimeSourceError: On transport errors and non-2xx responses
        """
        url = self.next_url()
        try:
            response = await self._get_client().get(url, headers={"Accept": "application/json"})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TimeSourceError(
                f"Time service at {url} answered {e.response.status_code}", cause=e
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TimeSourceError(f"Time service at {url} unreachable: {e}", cause=e) from e

        log.debug("time_source.response", url=url, status=response.status_code, size=len(response.content))
        return response.content

    async def health_check(self) -> bool:
        """Healthy if any instance answers with a 2xx status."""
        client = self._get_client()
        for url in self.urls:
            try:
                response = await client.get(url)
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                log.warning("time_source.health_check_failed", url=url, error=str(e))
                continue
            if response.is_success:
                return True
            log.warning("time_source.health_check_failed", url=url, status=response.status_code)
        return False

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

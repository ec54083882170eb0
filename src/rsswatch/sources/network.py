"""HTTP(S) feed source implementation."""

import httpx
import structlog

from rsswatch.exceptions import AcquisitionError
from rsswatch.utils.http_client import create_http_client

logger = structlog.get_logger()


class NetworkSource:
    """Feed source fetched with a blocking-per-call HTTP GET.

    A fresh client is opened for every fetch and always closed before
    returning, on success and on failure.
    """

    def __init__(
        self,
        url: str,
        timeout: float | None = None,
        user_agent: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize network feed source.

        Args:
            url: Feed URL.
            timeout: Request timeout in seconds. Defaults to settings.
            user_agent: User-Agent header. Defaults to settings.
            transport: Optional httpx transport, mainly for tests.
        """
        self._url = url
        self._timeout = timeout
        self._user_agent = user_agent
        self._transport = transport

    @property
    def source_id(self) -> str:
        return self._url

    @property
    def url(self) -> str:
        """Feed URL."""
        return self._url

    async def fetch_raw(self) -> bytes:
        """Fetch the feed document.

        Returns:
            Raw response body.

        Raises:
            AcquisitionError: When the request fails or returns a non-2xx status.
        """
        try:
            async with create_http_client(
                timeout=self._timeout,
                user_agent=self._user_agent,
                transport=self._transport,
            ) as client:
                response = await client.get(self._url)
                response.raise_for_status()
                logger.debug("Feed fetched", source_id=self._url, size=len(response.content))
                return response.content
        except httpx.TimeoutException as e:
            raise AcquisitionError(self._url, f"Request timed out: {e}") from e
        except httpx.HTTPStatusError as e:
            raise AcquisitionError(
                self._url, f"HTTP {e.response.status_code}: {e.response.text[:200]}"
            ) from e
        except httpx.RequestError as e:
            raise AcquisitionError(self._url, f"Request failed: {e}") from e

    def __repr__(self) -> str:
        return f"NetworkSource({self._url!r})"

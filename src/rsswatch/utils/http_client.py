"""HTTP client utilities.

Provides a configured HTTP client for network feed sources.
"""

import httpx

from rsswatch.config.settings import settings


def create_http_client(
    timeout: float | None = None,
    user_agent: str | None = None,
    follow_redirects: bool | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create a configured async HTTP client.

    Unset arguments fall back to the values in ``settings``.

    Args:
        timeout: Request timeout in seconds.
        user_agent: User-Agent header value.
        follow_redirects: Whether to follow redirects.
        transport: Optional transport override (e.g. ``httpx.MockTransport``).

    Returns:
        Configured httpx.AsyncClient. The caller owns it and must close it.
    """
    return httpx.AsyncClient(
        timeout=settings.fetch_timeout if timeout is None else timeout,
        headers={"User-Agent": user_agent or settings.user_agent},
        follow_redirects=(
            settings.follow_redirects if follow_redirects is None else follow_redirects
        ),
        transport=transport,
    )

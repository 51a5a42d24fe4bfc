"""Fetching appcast content over HTTP."""

import httpx
import structlog

from appcast.core.config import get_config
from appcast.core.errors import FetchError

logger = structlog.get_logger()


def fetch_bytes(url: str, client: httpx.Client | None = None) -> bytes:
    """Download the raw content at url.

    Args:
        url: URL to download from
        client: Optional client to reuse (defaults to a one-off client)

    Returns:
        Response body bytes

    Raises FetchError on transport errors and non-200 responses.
    """
    config = get_config()
    headers = {"User-Agent": config.user_agent}

    try:
        if client is None:
            response = httpx.get(
                url, headers=headers, follow_redirects=True, timeout=config.timeout
            )
        else:
            response = client.get(url, headers=headers, follow_redirects=True)
    except httpx.HTTPError as e:
        raise FetchError(f"Failed to fetch {url}: {e}") from e

    if response.status_code != 200:
        raise FetchError(f"Failed to fetch {url}: HTTP {response.status_code}")

    logger.debug("appcast_fetched", url=url, size=len(response.content))
    return response.content

"""
URL service - reachability checks for recipe source links.
"""

from typing import Optional, Tuple

import httpx

from neweats.config.settings import settings
from neweats.shared.core.logging import logger


class URLService:
    """Service for URL operations."""

    @staticmethod
    async def check_url(
        url: str,
        client: Optional[httpx.AsyncClient] = None,
    ) -> Tuple[bool, Optional[str]]:
        """
        Send a HEAD request to a URL.

        Redirects are followed; any non-2xx final status, timeout or
        connection error counts as unreachable.

        Returns: (reachable, error message or None)
        """
        owns_client = client is None
        if client is None:
            client = httpx.AsyncClient(
                timeout=settings.URL_CHECK_TIMEOUT_SECONDS,
                follow_redirects=True,
            )

        try:
            response = await client.head(url)
            response.raise_for_status()
            return True, None
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("URL check failed", url=url, error=str(e))
            return False, str(e)
        finally:
            if owns_client:
                await client.aclose()

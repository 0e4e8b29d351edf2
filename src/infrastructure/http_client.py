"""Async HTTP client for authenticated page requests."""

from curl_cffi.requests import AsyncSession
from loguru import logger

from .errors import PageFetchError


class AsyncHTTPClient:
    """Fetches page text with the member's session cookies."""

    def __init__(self, timeout: float = 30.0, impersonate: str = "chrome"):
        """
        Initialize client.

        Args:
            timeout: Request timeout in seconds
            impersonate: Browser fingerprint used by curl_cffi
        """
        self.timeout = timeout
        self.impersonate = impersonate

    async def get_text(self, url: str, cookies: str) -> str:
        """
        GET a page and return its body.

        Raises:
            PageFetchError: If the request fails or the status is not 200
        """
        logger.debug(f"GET {url}")

        try:
            async with AsyncSession(impersonate=self.impersonate) as session:
                response = await session.get(
                    url,
                    headers={"Cookie": cookies},
                    timeout=self.timeout,
                    allow_redirects=False,
                )
        except Exception as e:
            logger.error(f"Request to {url} failed: {e}")
            raise PageFetchError(url, reason=str(e)) from e

        if response.status_code != 200:
            logger.warning(f"GET {url} returned {response.status_code}")
            raise PageFetchError(url, response.status_code)

        return response.text

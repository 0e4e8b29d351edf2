"""Protocol interfaces for page access."""

from typing import Protocol


class PageFetcherProtocol(Protocol):
    """Protocol for fetching authenticated pages."""

    async def get_text(self, url: str, cookies: str) -> str:
        """Get page text from URL using the given cookie header."""
        ...

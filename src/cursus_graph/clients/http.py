"""HTTP client for downloading remote cursus documents."""

from typing import Any, Dict, Optional

import aiohttp


class HTTPClient:
    """Async HTTP client for fetching curriculum documents.

    Must be used as an async context manager, which owns the underlying
    aiohttp session.
    """

    DEFAULT_TIMEOUT = 30
    DEFAULT_HEADERS = {
        "User-Agent": "cursus-graph",
        "Accept": "application/xml,text/xml;q=0.9,*/*;q=0.8",
    }

    def __init__(
        self,
        timeout: int = DEFAULT_TIMEOUT,
        headers: Optional[Dict[str, str]] = None,
    ):
        """Initialize HTTP client.

        Args:
            timeout: Request timeout in seconds
            headers: Optional custom headers to merge with defaults
        """
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = {**self.DEFAULT_HEADERS, **(headers or {})}
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        """Async context manager entry."""
        self._session = aiohttp.ClientSession(
            timeout=self.timeout,
            headers=self.headers,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._session:
            await self._session.close()
            self._session = None

    async def get(self, url: str, params: Optional[Dict[str, Any]] = None, **kwargs) -> str:
        """Perform GET request and return response text.

        Args:
            url: Target URL
            params: Query parameters
            **kwargs: Additional arguments for aiohttp request

        Returns:
            Response text content

        Raises:
            RuntimeError: If called outside the async context manager
            aiohttp.ClientError: On network or HTTP errors
        """
        if not self._session:
            raise RuntimeError("HTTPClient must be used as async context manager")

        async with self._session.get(url, params=params, **kwargs) as response:
            response.raise_for_status()
            return await response.text()

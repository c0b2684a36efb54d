"""Async HTTP client for fetching Codeforces pages."""

from typing import Any, Optional

from curl_cffi.requests import AsyncSession
from loguru import logger

from domain.exceptions import FetchError

from .rate_limiter import AsyncRateLimiter

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
}


class AsyncHTTPClient:
    """Rate-limited HTTP client. Every request goes to the origin, never a cache."""

    def __init__(
        self,
        rate_limiter: Optional[AsyncRateLimiter] = None,
        timeout: float = 30.0,
        session: Optional[Any] = None,
        impersonate: str = "chrome",
    ):
        """
        Initialize HTTP client.

        Args:
            rate_limiter: Limiter acquired before each request (default 5 per second)
            timeout: Per-request timeout in seconds
            session: Existing curl_cffi AsyncSession (created lazily if None)
            impersonate: Browser fingerprint used by curl_cffi
        """
        self.rate_limiter = rate_limiter or AsyncRateLimiter()
        self.timeout = timeout
        self.impersonate = impersonate
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> "AsyncHTTPClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _get_session(self) -> Any:
        if self._session is None:
            self._session = AsyncSession(impersonate=self.impersonate)
        return self._session

    async def get_text(self, url: str) -> str:
        """
        Perform a single GET request and return the body as text.

        Args:
            url: URL to fetch

        Returns:
            Response body

        Raises:
            FetchError: On transport failure or non-2xx status
        """
        await self.rate_limiter.acquire()

        logger.debug(f"GET {url}")

        try:
            response = await self._get_session().get(
                url,
                headers=NO_CACHE_HEADERS,
                timeout=self.timeout,
            )
        except Exception as e:
            logger.debug(f"Request to {url} failed: {e}")
            raise FetchError(url, e) from e

        if not 200 <= response.status_code < 300:
            raise FetchError(url, f"HTTP {response.status_code}")

        try:
            return response.text
        except Exception as e:
            raise FetchError(url, e) from e

    async def close(self) -> None:
        """Close the underlying session if this client created it."""
        if self._session is not None and self._owns_session:
            await self._session.close()
            self._session = None

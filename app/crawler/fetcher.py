"""HTTP fetcher for company web pages."""

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from app.config import settings

logger = logging.getLogger(__name__)


@dataclass
class FetchResult:
    """Result of a fetch operation."""

    url: str
    content: Optional[str] = None
    status_code: int = 0
    content_type: Optional[str] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.content is not None and 200 <= self.status_code < 400


class Fetcher:
    """Fetch HTML pages from a company website."""

    def __init__(
        self,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.user_agent = user_agent or settings.user_agent
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(
                connect=settings.connect_timeout,
                read=settings.read_timeout,
                write=settings.read_timeout,
                pool=settings.connect_timeout,
            ),
            follow_redirects=True,
            transport=self._transport,
            headers={
                "User-Agent": self.user_agent,
                "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
                "Accept-Language": "en-US,en;q=0.5",
            },
        )

    async def fetch(self, url: str) -> FetchResult:
        """Fetch a single URL."""
        async with self._client() as client:
            return await self._do_fetch(client, url)

    async def fetch_pages(
        self,
        base_url: str,
        paths: list[str],
    ) -> dict[str, FetchResult]:
        """Fetch several pages of one site, in order, over one client."""
        results = {}

        async with self._client() as client:
            for path in paths:
                if path.startswith("http"):
                    url = path
                else:
                    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
                results[url] = await self._do_fetch(client, url)

        return results

    async def _do_fetch(self, client: httpx.AsyncClient, url: str) -> FetchResult:
        try:
            response = await client.get(url)
        except httpx.TimeoutException:
            logger.warning(f"Timeout fetching {url}")
            return FetchResult(url=url, error="Timeout")
        except httpx.RequestError as e:
            logger.warning(f"Request error fetching {url}: {e}")
            return FetchResult(url=url, error=str(e))

        content_type = response.headers.get("content-type", "")

        if response.status_code >= 400:
            return FetchResult(
                url=url,
                status_code=response.status_code,
                content_type=content_type,
                error=f"HTTP {response.status_code}",
            )

        if "text/" not in content_type and "html" not in content_type:
            return FetchResult(
                url=url,
                status_code=response.status_code,
                content_type=content_type,
                error=f"Non-text content type: {content_type}",
            )

        return FetchResult(
            url=url,
            content=response.text,
            status_code=response.status_code,
            content_type=content_type,
        )

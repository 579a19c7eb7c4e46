"""Evidence gathered from the company's own website."""

import logging
from typing import Optional

import httpx

from app.config import settings
from app.crawler import ContentExtractor, Fetcher
from .base import EvidenceProvider

logger = logging.getLogger(__name__)


class WebsiteEvidenceProvider(EvidenceProvider):
    """Fetch a handful of pages from the company website and keep their text."""

    name = "website"

    def __init__(
        self,
        pages: Optional[list[str]] = None,
        max_page_chars: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.pages = settings.evidence_pages if pages is None else pages
        self.max_page_chars = max_page_chars or settings.max_page_chars
        self.fetcher = Fetcher(transport=transport)
        self.extractor = ContentExtractor()

    async def gather(self, company_name: str, website: str) -> dict:
        results = await self.fetcher.fetch_pages(website, self.pages)

        pages = []
        errors = []
        for url, result in results.items():
            if not result.success:
                errors.append({"url": url, "error": result.error or f"HTTP {result.status_code}"})
                continue

            summary = self.extractor.summarize(result.content, url)
            pages.append({
                "url": url,
                "status_code": result.status_code,
                "title": summary.title,
                "description": summary.description,
                "text": summary.text[:self.max_page_chars],
            })

        logger.info(f"Gathered {len(pages)} page(s) for {company_name} ({len(errors)} failed)")
        return {"source": self.name, "pages": pages, "errors": errors}

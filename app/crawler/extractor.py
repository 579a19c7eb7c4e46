"""HTML content extraction."""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from bs4 import BeautifulSoup, Comment

logger = logging.getLogger(__name__)


@dataclass
class PageSummary:
    """Readable parts of one HTML page."""

    title: Optional[str]
    description: Optional[str]
    text: str


class ContentExtractor:
    """Turn company web pages into plain-text evidence."""

    # Boilerplate that never carries company facts
    DROP_TAGS = [
        "script", "style", "noscript", "iframe", "svg",
        "nav", "footer", "header", "aside", "form",
    ]

    def summarize(self, html: str, url: Optional[str] = None) -> PageSummary:
        """Extract title, meta description and body text from HTML."""
        if not html:
            return PageSummary(title=None, description=None, text="")

        soup = BeautifulSoup(html, "lxml")

        title_tag = soup.find("title")
        title = title_tag.get_text(strip=True) if title_tag else None

        description = None
        for attrs in ({"name": "description"}, {"property": "og:description"}):
            meta = soup.find("meta", attrs=attrs)
            if meta and meta.get("content"):
                description = meta["content"].strip()
                break

        text = self.extract(soup)
        if not text and url:
            logger.debug(f"No readable text on {url}")

        return PageSummary(title=title, description=description, text=text)

    def extract(self, soup: BeautifulSoup) -> str:
        """Visible text of the main content area, one block per line."""
        for tag in soup.find_all(self.DROP_TAGS):
            tag.decompose()
        for comment in soup.find_all(string=lambda s: isinstance(s, Comment)):
            comment.extract()

        root = soup.find("main") or soup.find("article") or soup.find("body") or soup
        raw = root.get_text(separator="\n")

        lines = (re.sub(r"\s+", " ", line).strip() for line in raw.splitlines())
        return "\n".join(line for line in lines if line)

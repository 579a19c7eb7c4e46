"""Web crawler components for fetching company pages as evidence."""

from .fetcher import Fetcher, FetchResult
from .extractor import ContentExtractor, PageSummary

__all__ = ["Fetcher", "FetchResult", "ContentExtractor", "PageSummary"]

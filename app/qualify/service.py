"""Qualification orchestration: validate, choose stub or live path, map failures."""

import logging
from typing import Any, Optional
from urllib.parse import urlparse

from app.evidence import EvidenceProvider, StubEvidenceProvider
from .errors import AnalysisError, InputError
from .extractor import extract_qualification
from .prompts import build_request
from .provider import ProviderAdapter
from .stub import build_stub_result

logger = logging.getLogger(__name__)


def derive_company_name(website: str) -> str:
    """Use the URL hostname as a fallback company name."""
    try:
        hostname = urlparse(website).hostname
    except ValueError:
        hostname = None
    if not hostname:
        raise InputError("invalid url")
    return hostname


class QualificationService:
    """Screen one company against the RobCo criteria per call.

    With an empty ``api_key`` every call takes the stub path and no provider
    or evidence source is contacted.
    """

    def __init__(
        self,
        api_key: str,
        adapter: Optional[ProviderAdapter] = None,
        evidence_provider: Optional[EvidenceProvider] = None,
    ):
        self.api_key = api_key
        self.adapter = adapter
        self.evidence_provider = evidence_provider or StubEvidenceProvider()

        if self.api_key and self.adapter is None:
            raise ValueError("A provider adapter is required when an API key is configured")

    @property
    def stub_mode(self) -> bool:
        return not self.api_key

    async def analyze(self, website: Any, company_name: Optional[str] = None) -> Any:
        """
        Qualify a company.

        Args:
            website: Company website URL (required)
            company_name: Display name; defaults to the URL hostname

        Returns:
            The qualification result, a stub result, or a raw-tagged envelope

        Raises:
            InputError: if the url is missing or malformed
            AnalysisError: if the live pipeline fails
        """
        if not isinstance(website, str) or not website.strip():
            raise InputError("missing url")

        company_name = company_name or derive_company_name(website)

        if self.stub_mode:
            logger.warning(f"No provider credential configured; returning stub for {website}")
            return build_stub_result(company_name, website)

        logger.info(f"Analyzing {company_name} ({website}) via {self.adapter.name}")
        try:
            evidence = await self.evidence_provider.gather(company_name, website)
            request = build_request(company_name, website, evidence)
            envelope = await self.adapter.complete(request)
        except Exception as e:
            logger.error(f"Analysis failed for {website}: {e}")
            raise AnalysisError(str(e)) from e

        result = extract_qualification(envelope)
        logger.info(f"Finished analysis of {company_name}")
        return result

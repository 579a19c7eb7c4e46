"""Placeholder evidence provider."""

from .base import EvidenceProvider


class StubEvidenceProvider(EvidenceProvider):
    """Returns a fixed bundle that only restates the inputs."""

    name = "stub"

    async def gather(self, company_name: str, website: str) -> dict:
        return {
            "company_name": company_name,
            "website": website,
            "note": "No evidence sources configured; judge from the name and website only.",
        }

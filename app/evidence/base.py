"""Abstract base class for evidence providers."""

from abc import ABC, abstractmethod
from typing import Any


class EvidenceProvider(ABC):
    """Abstract interface for sources of company evidence."""

    name: str = "base"

    @abstractmethod
    async def gather(self, company_name: str, website: str) -> Any:
        """
        Collect evidence about a company.

        Args:
            company_name: Name of the company being screened
            website: Company website URL

        Returns:
            A JSON-serialisable evidence bundle
        """
        pass

"""Evidence providers feeding the qualification pipeline."""

from .base import EvidenceProvider
from .stub import StubEvidenceProvider
from .website import WebsiteEvidenceProvider

__all__ = [
    "EvidenceProvider",
    "StubEvidenceProvider",
    "WebsiteEvidenceProvider",
    "get_evidence_provider",
]

_PROVIDERS = {
    StubEvidenceProvider.name: StubEvidenceProvider,
    WebsiteEvidenceProvider.name: WebsiteEvidenceProvider,
}


def get_evidence_provider(name: str) -> EvidenceProvider:
    """Instantiate the evidence provider registered under ``name``."""
    try:
        return _PROVIDERS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown evidence provider {name!r}; expected one of {sorted(_PROVIDERS)}"
        ) from None

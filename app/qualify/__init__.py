"""Structured RobCo qualification pipeline."""

from .errors import AnalysisError, InputError, ProviderError, QualificationError
from .extractor import extract_qualification
from .prompts import ProviderRequest, build_request
from .provider import OpenAIResponsesAdapter, ProviderAdapter
from .service import QualificationService, derive_company_name
from .stub import build_stub_result

__all__ = [
    "AnalysisError",
    "InputError",
    "ProviderError",
    "QualificationError",
    "extract_qualification",
    "ProviderRequest",
    "build_request",
    "OpenAIResponsesAdapter",
    "ProviderAdapter",
    "QualificationService",
    "derive_company_name",
    "build_stub_result",
]

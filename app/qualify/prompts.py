"""Provider request construction for RobCo screening."""

import json
from dataclasses import dataclass, field
from typing import Any, Optional

from app.config import settings
from app.models import SCHEMA_NAME, qualification_schema

SYSTEM_PROMPT = (
    "You are an M&A analyst. Evaluate targets strictly against RobCo criteria "
    "(size >$3M rev, >15y, >30 FTE; alignment to VBU; EU/NA with English operations; "
    ">50% recurring; owns IP; buy-and-hold understood; no broker; valuation not key; "
    "founder >50%; debt/investment <1x revenue). Use only the inputs provided. "
    "If a field is unknown, set it to null and explain uncertainties in notes. "
    "Return JSON EXACTLY matching the JSON Schema."
)


@dataclass
class ProviderRequest:
    """Everything a provider needs to answer, independent of its wire format."""

    system: str
    user_parts: list[str]
    schema_name: str = SCHEMA_NAME
    schema: dict[str, Any] = field(default_factory=qualification_schema)


def serialize_evidence(evidence: Any, max_chars: Optional[int] = None) -> str:
    """Serialise evidence compactly and cut it to a fixed prefix."""
    limit = settings.max_evidence_chars if max_chars is None else max_chars
    text = json.dumps(evidence, separators=(",", ":"), ensure_ascii=False, default=str)
    return text[:limit]


def build_request(company_name: str, website: str, evidence: Any) -> ProviderRequest:
    """Build the qualification request for one company."""
    return ProviderRequest(
        system=SYSTEM_PROMPT,
        user_parts=[
            f"company_name: {company_name}",
            f"website: {website}",
            f"evidence: {serialize_evidence(evidence)}",
        ],
    )

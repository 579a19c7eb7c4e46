"""Stub qualification used when no provider credential is configured."""

from app.models import Attributes, CriteriaFlags, Metrics, QualificationResult

STUB_REASON = "No OPENAI_API_KEY configured; analysis was not performed."
STUB_NOTES = (
    "Stub response: no LLM provider credential is configured, so the company was "
    "not evaluated. All metrics, attributes and criteria flags are unknown (null). "
    "Set OPENAI_API_KEY to enable live analysis."
)


def _all_null(model: type) -> dict:
    return {name: None for name in model.model_fields}


def build_stub_result(company_name: str, website: str) -> dict:
    """Return a schema-valid result with every fact unknown and verdict 'review'."""
    result = QualificationResult(
        company_name=company_name,
        website=website,
        verdict="review",
        reasons=[STUB_REASON],
        metrics=Metrics(**_all_null(Metrics)),
        attributes=Attributes(**_all_null(Attributes)),
        criteria_flags=CriteriaFlags(**_all_null(CriteriaFlags)),
        notes=STUB_NOTES,
        sources_used=[],
    )
    return result.model_dump()

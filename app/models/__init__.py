"""Data models for RobCo qualification."""

from .qualification import (
    Attributes,
    CriteriaFlags,
    Metrics,
    QualificationResult,
    Verdict,
)
from .schema import (
    QUALIFICATION_SCHEMA,
    SCHEMA_NAME,
    is_qualification_result,
    qualification_schema,
)

__all__ = [
    "Attributes",
    "CriteriaFlags",
    "Metrics",
    "QualificationResult",
    "Verdict",
    "QUALIFICATION_SCHEMA",
    "SCHEMA_NAME",
    "is_qualification_result",
    "qualification_schema",
]

"""Exceptions raised by the qualification pipeline."""

import json
from typing import Any


class QualificationError(Exception):
    """Base class for qualification failures."""


class InputError(QualificationError):
    """The caller supplied an unusable request (missing or malformed url)."""


class ProviderError(QualificationError):
    """The LLM provider answered with a non-success HTTP status."""

    def __init__(self, status_code: int, payload: Any):
        self.status_code = status_code
        self.payload = payload
        detail = payload if isinstance(payload, str) else json.dumps(payload)
        super().__init__(f"Provider error {status_code}: {detail}")


class AnalysisError(QualificationError):
    """The live pipeline could not produce an answer."""

"""Strict JSON Schema for qualification results, derived from the pydantic models."""

import copy
import json
from typing import Any

from .qualification import QualificationResult

SCHEMA_NAME = "qualification_output"


def _to_strict(node: Any, defs: dict[str, Any]) -> Any:
    """Inline $refs, drop titles and close every object schema."""
    if isinstance(node, list):
        return [_to_strict(item, defs) for item in node]
    if not isinstance(node, dict):
        return node

    if "$ref" in node:
        name = node["$ref"].rsplit("/", 1)[-1]
        siblings = {k: v for k, v in node.items() if k != "$ref"}
        return {**_to_strict(defs[name], defs), **_to_strict(siblings, defs)}

    strict = {
        key: _to_strict(value, defs)
        for key, value in node.items()
        if key != "$defs" and not (key == "title" and isinstance(value, str))
    }

    if strict.get("type") == "object" and "properties" in strict:
        # Structured outputs require every property listed and no extras
        strict["required"] = list(strict["properties"])
        strict["additionalProperties"] = False

    return strict


def build_json_schema() -> dict[str, Any]:
    """Generate the provider-facing schema from QualificationResult."""
    raw = QualificationResult.model_json_schema()
    return _to_strict(raw, raw.get("$defs", {}))


QUALIFICATION_SCHEMA: dict[str, Any] = build_json_schema()


def qualification_schema() -> dict[str, Any]:
    """Return a private copy of the canonical schema."""
    return copy.deepcopy(QUALIFICATION_SCHEMA)


def is_qualification_result(value: Any) -> bool:
    """Check a decoded JSON value against the schema contract.

    Validation runs in strict JSON mode so that, for example, ``"true"`` is
    not accepted for a boolean flag. Anything that fails (including values
    that cannot be serialised) is reported as not conforming.
    """
    try:
        QualificationResult.model_validate_json(json.dumps(value), strict=True)
    except (TypeError, ValueError):
        return False
    return True

"""Tests for the qualification schema contract."""

import json

from app.models import (
    QUALIFICATION_SCHEMA,
    SCHEMA_NAME,
    is_qualification_result,
    qualification_schema,
)
from conftest import make_result

TOP_LEVEL_FIELDS = {
    "company_name", "website", "verdict", "reasons", "metrics",
    "attributes", "criteria_flags", "notes", "sources_used",
}


def walk_objects(node):
    """Yield every object schema in the tree."""
    if isinstance(node, dict):
        if node.get("type") == "object":
            yield node
        for value in node.values():
            yield from walk_objects(value)
    elif isinstance(node, list):
        for item in node:
            yield from walk_objects(item)


class TestJsonSchema:
    """Tests for the provider-facing JSON Schema."""

    def test_top_level_fields_are_required(self):
        assert SCHEMA_NAME == "qualification_output"
        assert QUALIFICATION_SCHEMA["type"] == "object"
        assert set(QUALIFICATION_SCHEMA["properties"]) == TOP_LEVEL_FIELDS
        assert set(QUALIFICATION_SCHEMA["required"]) == TOP_LEVEL_FIELDS

    def test_every_object_is_closed_and_fully_required(self):
        objects = list(walk_objects(QUALIFICATION_SCHEMA))
        assert len(objects) == 4
        for obj in objects:
            assert obj["additionalProperties"] is False
            assert set(obj["required"]) == set(obj["properties"])

    def test_refs_and_titles_are_inlined_away(self):
        text = json.dumps(QUALIFICATION_SCHEMA)
        assert "$ref" not in text
        assert "$defs" not in text
        assert '"title"' not in text

    def test_verdict_enum(self):
        verdict = QUALIFICATION_SCHEMA["properties"]["verdict"]
        assert verdict["enum"] == ["qualify", "review", "disqualify"]

    def test_nested_field_counts(self):
        props = QUALIFICATION_SCHEMA["properties"]
        assert len(props["metrics"]["properties"]) == 7
        assert len(props["attributes"]["properties"]) == 12
        assert len(props["criteria_flags"]["properties"]) == 14
        assert "auto_filter_disqualify" in props["criteria_flags"]["properties"]

    def test_nested_fields_are_nullable(self):
        props = QUALIFICATION_SCHEMA["properties"]
        for section in ("metrics", "attributes", "criteria_flags"):
            for name, field in props[section]["properties"].items():
                types = [option.get("type") for option in field["anyOf"]]
                assert "null" in types, f"{section}.{name} is not nullable"

    def test_flag_types(self):
        props = QUALIFICATION_SCHEMA["properties"]
        headcount = props["metrics"]["properties"]["headcount"]
        assert {"type": "integer"} in headcount["anyOf"]
        flag = props["criteria_flags"]["properties"]["no_broker"]
        assert {"type": "boolean"} in flag["anyOf"]

    def test_copies_do_not_leak(self):
        copy = qualification_schema()
        copy["properties"].pop("notes")
        assert "notes" in QUALIFICATION_SCHEMA["properties"]


class TestIsQualificationResult:
    """Tests for validating decoded results against the contract."""

    def test_accepts_complete_result(self):
        assert is_qualification_result(make_result())

    def test_rejects_missing_field(self):
        result = make_result()
        del result["sources_used"]
        assert not is_qualification_result(result)

    def test_rejects_extra_top_level_property(self):
        assert not is_qualification_result(make_result(confidence=0.9))

    def test_rejects_extra_nested_property(self):
        result = make_result()
        result["metrics"]["ebitda_usd"] = 1_000_000
        assert not is_qualification_result(result)

    def test_rejects_unknown_verdict(self):
        assert not is_qualification_result(make_result(verdict="maybe"))

    def test_rejects_stringly_typed_flag(self):
        result = make_result()
        result["criteria_flags"]["no_broker"] = "true"
        assert not is_qualification_result(result)

    def test_rejects_missing_nested_field(self):
        result = make_result()
        del result["attributes"]["vertical"]
        assert not is_qualification_result(result)

    def test_rejects_raw_tagged_value(self):
        assert not is_qualification_result({"raw": {}, "note": "Could not parse JSON; see raw."})

    def test_rejects_non_objects(self):
        assert not is_qualification_result(None)
        assert not is_qualification_result("qualify")
        assert not is_qualification_result([make_result()])

"""Shared fixtures for qualification tests."""

import json

import pytest
from fastapi.testclient import TestClient

from app.api.main import app
from app.api.routes import get_qualification_service
from app.qualify import QualificationService


def make_result(**overrides) -> dict:
    """A complete, schema-valid qualification result."""
    result = {
        "company_name": "Acme",
        "website": "https://acme.com",
        "verdict": "qualify",
        "reasons": ["Revenue above $3M", "Founder owns 80%"],
        "metrics": {
            "revenue_usd": 12_000_000,
            "recurring_revenue_pct": 72.5,
            "headcount": 85,
            "founded_year": 1998,
            "funding_total_usd": None,
            "funding_to_revenue_ratio": None,
            "debt_to_revenue_ratio": 0.2,
        },
        "attributes": {
            "geography": "Germany",
            "english_operations": True,
            "vms": True,
            "b2b": True,
            "software": True,
            "owns_ip": True,
            "mission_critical": True,
            "founder_majority_owned": True,
            "private_company": True,
            "broker_involved": False,
            "valuation_not_key": None,
            "vertical": "Logistics",
        },
        "criteria_flags": {
            "revenue_over_3m": True,
            "age_over_15y": True,
            "headcount_over_30": True,
            "vbu_alignment": True,
            "eu_na_geography": True,
            "english_operations": True,
            "recurring_over_50pct": True,
            "owns_ip": True,
            "buy_and_hold_fit": None,
            "no_broker": True,
            "valuation_not_key": None,
            "founder_over_50pct": True,
            "leverage_under_1x": True,
            "auto_filter_disqualify": False,
        },
        "notes": "Valuation posture not discussed in the evidence.",
        "sources_used": ["https://acme.com/about"],
    }
    result.update(overrides)
    return result


def make_envelope(text: str) -> dict:
    """A Responses API reply whose only output is a text message."""
    return {
        "id": "resp_123",
        "object": "response",
        "output": [
            {
                "type": "message",
                "role": "assistant",
                "content": [{"type": "output_text", "text": text, "annotations": []}],
            }
        ],
    }


@pytest.fixture
def valid_result() -> dict:
    return make_result()


@pytest.fixture
def text_envelope(valid_result) -> dict:
    return make_envelope(json.dumps(valid_result))


@pytest.fixture
def client():
    """Test client whose service can be swapped through ``client.use``."""
    test_client = TestClient(app)

    def use(service: QualificationService):
        app.dependency_overrides[get_qualification_service] = lambda: service

    use(QualificationService(api_key=""))
    test_client.use = use
    yield test_client
    app.dependency_overrides.clear()

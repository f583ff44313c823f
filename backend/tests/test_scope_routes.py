"""Scope API tests: request validation, generation, export placeholder, health.

The simulated model latency dependency is overridden to zero so requests
return immediately.
"""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from fastapi.testclient import TestClient

from briefly.agents.scope_agent import Archetype
from briefly.config import get_simulated_latency
from briefly.constants import EXPORT_PLACEHOLDER_MESSAGE, TECH_STACKS
from briefly.main import app

client = TestClient(app)


@pytest.fixture(autouse=True)
def no_latency():
    """Skip the simulated model delay for every request."""
    app.dependency_overrides[get_simulated_latency] = lambda: 0.0
    yield
    app.dependency_overrides.pop(get_simulated_latency, None)


def _payload(**overrides):
    data = {
        "clientName": "ABC Marketing Agency",
        "clientDescription": "A booking portal for a chain of yoga studios",
        "references": "",
        "sellingPoint": "Two-tap booking",
        "projectGoal": "Replace phone bookings",
        "preferredStack": "",
    }
    data.update(overrides)
    return data


# ---------------------------------------------------------------------------
# Tests: generation
# ---------------------------------------------------------------------------

class TestGenerateScope:
    def test_pet_boarding_brief(self):
        res = client.post(
            "/scope/generate",
            json=_payload(clientDescription="Need a pet boarding app for busy owners"),
        )
        assert res.status_code == 200, res.text
        data = res.json()
        assert data["success"] is True
        assert data["clientName"] == "ABC Marketing Agency"
        assert data["archetype"] == "pet_care_marketplace"
        assert "PostGIS" in data["scope"]["techStack"]["database"]
        names = [entry["name"] for entry in data["scope"]["businessLookalikes"]]
        assert "Rover.com" in names
        assert "generatedAt" in data

    def test_generic_brief_with_references(self):
        res = client.post(
            "/scope/generate",
            json=_payload(references="airbnb.com, Rover.com", preferredStack="Django + React"),
        )
        assert res.status_code == 200, res.text
        scope = res.json()["scope"]
        assert res.json()["archetype"] == "generic_web_application"
        assert scope["techStack"]["frontend"].startswith("React")
        assert scope["techStack"]["backend"].startswith("Django")
        assert [entry["name"] for entry in scope["businessLookalikes"]] == [
            "Airbnb (Client Reference 1)",
            "Rover (Client Reference 2)",
        ]
        assert scope["businessLookalikes"][0]["url"] == "https://airbnb.com"

    def test_accepts_snake_case_keys(self):
        res = client.post(
            "/scope/generate",
            json={
                "client_name": "Acme",
                "client_description": "Inventory dashboard for a warehouse",
                "selling_point": "Live stock levels",
                "project_goal": "Cut stock-outs in half",
            },
        )
        assert res.status_code == 200, res.text
        assert len(res.json()["scope"]["businessLookalikes"]) == 3

    def test_gap_warning_present(self):
        res = client.post("/scope/generate", json=_payload())
        assert res.json()["scope"]["scopeGapWarning"]

    def test_same_brief_same_scope(self):
        first = client.post("/scope/generate", json=_payload()).json()
        second = client.post("/scope/generate", json=_payload()).json()
        assert first["scope"] == second["scope"]

    def test_archetype_matches_generated_template(self, monkeypatch):
        monkeypatch.setattr(
            "briefly.agents.scope_agent.generator.classify",
            lambda description: Archetype.PET_CARE_MARKETPLACE,
        )
        res = client.post("/scope/generate", json=_payload())
        assert res.status_code == 200, res.text
        assert res.json()["archetype"] == "pet_care_marketplace"
        assert "PostGIS" in res.json()["scope"]["techStack"]["database"]


class TestRequestValidation:
    @pytest.mark.parametrize(
        "field, value",
        [
            ("clientName", ""),
            ("clientDescription", "too short"),
            ("sellingPoint", "abc"),
            ("projectGoal", "go"),
        ],
    )
    def test_form_minimums_enforced(self, field, value):
        res = client.post("/scope/generate", json=_payload(**{field: value}))
        assert res.status_code == 422

    def test_unknown_stack_rejected(self):
        res = client.post("/scope/generate", json=_payload(preferredStack="COBOL + CICS"))
        assert res.status_code == 422

    def test_whitespace_only_goal_rejected_by_generator(self):
        res = client.post("/scope/generate", json=_payload(projectGoal="      "))
        assert res.status_code == 400
        assert "project_goal" in res.json()["detail"]

    def test_missing_body_field(self):
        payload = _payload()
        del payload["clientName"]
        res = client.post("/scope/generate", json=payload)
        assert res.status_code == 422


# ---------------------------------------------------------------------------
# Tests: export, stacks, health
# ---------------------------------------------------------------------------

class TestExportScope:
    def test_export_not_implemented(self):
        res = client.post("/scope/export")
        assert res.status_code == 501
        assert res.json()["detail"] == EXPORT_PLACEHOLDER_MESSAGE


class TestMetadataEndpoints:
    def test_stacks(self):
        res = client.get("/scope/stacks")
        assert res.status_code == 200
        assert res.json()["stacks"] == TECH_STACKS

    def test_scope_health(self):
        res = client.get("/scope/health")
        assert res.json() == {"status": "healthy", "service": "scope-generator"}

    def test_global_health(self):
        res = client.get("/health")
        assert res.status_code == 200
        assert res.json()["status"] == "healthy"

    def test_root_lists_endpoints(self):
        res = client.get("/")
        assert "generate" in res.json()["endpoints"]


# ---------------------------------------------------------------------------
# Tests: unhandled errors
# ---------------------------------------------------------------------------

def _failing_latency():
    raise RuntimeError("latency settings unavailable")


class TestGlobalExceptionHandler:
    @pytest.fixture
    def failing_client(self):
        app.dependency_overrides[get_simulated_latency] = _failing_latency
        return TestClient(app, raise_server_exceptions=False)

    def test_detail_hidden_without_debug(self, failing_client, monkeypatch):
        monkeypatch.setenv("DEBUG", "false")
        res = failing_client.post("/scope/generate", json=_payload())
        assert res.status_code == 500
        assert res.json() == {
            "success": False,
            "error": "Internal server error",
            "detail": "An unexpected error occurred",
        }

    def test_detail_shown_in_debug(self, failing_client, monkeypatch):
        monkeypatch.setenv("DEBUG", "true")
        res = failing_client.post("/scope/generate", json=_payload())
        assert res.status_code == 500
        assert res.json()["detail"] == "latency settings unavailable"

"""Tests for the intake readiness API routes."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from intake_readiness.main import app

client = TestClient(app)

FILING_SECTION = {
    "id": "building_and_scope",
    "title": "Building Details & Scope of Work",
    "fields": [
        {"id": "filing_type", "label": "Filing Type", "type": "select"},
        {"id": "directive_14", "label": "Directive 14?", "type": "select"},
    ],
}


class TestReadinessEndpoint:
    def test_returns_camel_case_report(self):
        response = client.post(
            "/v1/intake/readiness",
            json={"template": {"sections": [FILING_SECTION]}, "responses": {"filing_type": "Plan Exam"}},
        )
        assert response.status_code == 200
        assert response.json() == {
            "totalFields": 2,
            "completedFields": 1,
            "missingFields": ["Directive 14?"],
            "missingBySection": {"Building Details & Scope of Work": ["Directive 14?"]},
        }

    def test_responses_default_to_empty(self):
        response = client.post("/v1/intake/readiness", json={"template": {"sections": []}})
        assert response.status_code == 200
        assert response.json()["totalFields"] == 7

    def test_missing_template_is_rejected(self):
        response = client.post("/v1/intake/readiness", json={"responses": {}})
        assert response.status_code == 422

    def test_failure_returns_500(self):
        with patch(
            "intake_readiness.api.intake.compute_intake_readiness",
            side_effect=RuntimeError("boom"),
        ):
            response = client.post("/v1/intake/readiness", json={"template": {"sections": []}})
        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to compute intake readiness"

    def test_logs_counts_with_context(self):
        with patch("intake_readiness.api.intake.log_with_context") as mock_log:
            response = client.post(
                "/v1/intake/readiness",
                json={"template": {"sections": [FILING_SECTION]}, "responses": {}},
            )
        assert response.status_code == 200
        mock_log.assert_called_once()
        args, kwargs = mock_log.call_args
        assert args[2] == "Computed intake readiness: 0/2"
        assert kwargs == {"missing": 2}


class TestPisStatusEndpoint:
    def test_returns_status(self):
        response = client.post(
            "/v1/intake/pis-status",
            json={
                "id": "rfi-1",
                "sections": [FILING_SECTION],
                "responses": {},
                "created_at": "2026-02-05T10:00:00Z",
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["sentDate"] == "02/05/2026"
        assert data["totalFields"] == 2
        assert data["completedFields"] == 0

    def test_empty_record(self):
        response = client.post("/v1/intake/pis-status", json={})
        assert response.status_code == 200
        assert response.json()["totalFields"] == 7
        assert response.json()["sentDate"] is None


class TestDefaultTemplateEndpoint:
    def test_returns_default_pis_sections(self):
        response = client.get("/v1/intake/templates/default")
        assert response.status_code == 200
        sections = response.json()["sections"]
        assert [s["id"] for s in sections] == [
            "building_and_scope",
            "applicant_and_owner",
            "contractors_inspections",
        ]

"""
API Tests for the prediction endpoint and health checks.
"""
import pytest
from fastapi.testclient import TestClient

from cardiorisk import main
from cardiorisk.core.errors import RiskCalculationError
from cardiorisk.main import app

PREDICT_URL = "/api/v1/predict"


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestHealth:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health(self, client):
        data = client.get("/health").json()
        assert data["components"]["who_region"] == "north_america_high_income"
        assert "timestamp" in data


class TestPredict:
    """Tests for POST /api/v1/predict."""

    def test_success_envelope(self, client, valid_form_dict):
        response = client.post(PREDICT_URL, json=valid_form_dict)
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        data = body["data"]
        assert [c["id"] for c in data["top3"]] == ["framingham_10yr_chd", "bp_category", "ascvd_10yr"]
        assert len(data["allRisks"]) == 5
        assert data["errors"] == []

    def test_empty_candidate_lists_omitted(self, client, valid_form_dict):
        data = client.post(PREDICT_URL, json=valid_form_dict).json()["data"]
        bp = next(c for c in data["allRisks"] if c["id"] == "bp_category")
        assert "warnings" not in bp
        assert bp["value"]["diastolic"] is None

    def test_numeric_values_accepted(self, client, valid_form_dict):
        valid_form_dict.update(age=55, systolicBp=150, totalCholesterol=240, hdlCholesterol=45)
        data = client.post(PREDICT_URL, json=valid_form_dict).json()["data"]
        assert data["errors"] == []
        assert len(data["top3"]) == 3

    def test_validation_failure_is_data(self, client, valid_form_dict):
        del valid_form_dict["age"]
        response = client.post(PREDICT_URL, json=valid_form_dict)
        assert response.status_code == 200
        assert response.json()["data"] == {
            "top3": [], "allRisks": [], "errors": ["Age is required"], "warnings": [],
        }

    def test_normalization_error_is_400(self, client, valid_form_dict):
        valid_form_dict["smokingStatus"] = "sometimes"
        response = client.post(PREDICT_URL, json=valid_form_dict)
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": {
                "code": "DATA_NORMALIZATION_ERROR",
                "message": "Invalid value for smokingStatus: 'sometimes'",
                "field": "smokingStatus",
            },
        }

    def test_calculation_error_is_500(self, client, valid_form_dict, monkeypatch):
        def _fail(patient):
            raise RiskCalculationError("No risk factors could be calculated")

        monkeypatch.setattr(main._assessment_service, "assess", _fail)
        response = client.post(PREDICT_URL, json=valid_form_dict)
        assert response.status_code == 500
        assert response.json()["error"] == {
            "code": "RISK_CALCULATION_ERROR",
            "message": "No risk factors could be calculated",
        }

    def test_unexpected_error_is_internal(self, client, valid_form_dict, monkeypatch):
        def _fail(raw):
            raise RuntimeError("boom")

        monkeypatch.setattr(main._assessment_service, "predict", _fail)
        response = client.post(PREDICT_URL, json=valid_form_dict)
        assert response.status_code == 500
        assert response.json()["error"] == {"code": "INTERNAL_SERVER_ERROR", "message": "boom"}

    def test_non_object_body_rejected(self, client):
        assert client.post(PREDICT_URL, json=["not", "an", "object"]).status_code == 422


class TestOpenApi:

    def test_documented_response_models(self, client):
        schemas = client.get("/openapi.json").json()["components"]["schemas"]
        assert {"PredictionRequest", "PredictionEnvelope", "ErrorResponse", "HealthResponse"} <= set(schemas)
        assert "allRisks" in schemas["PredictionResponse"]["properties"]

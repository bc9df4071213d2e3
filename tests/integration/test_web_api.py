"""Integration tests for the REST API.

These tests exercise the FastAPI app through TestClient, including:
- POST /api/v1/calculate success, defaults and error responses
- The tool endpoint used by agents
- Catalog and unit conversion endpoints
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from videowall.application.commands import INFEASIBLE_DIAGONAL_MESSAGE
from videowall.web import create_app


@pytest.fixture
def client() -> TestClient:
    """Create a test client for a fresh app."""
    return TestClient(create_app())


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestCalculateEndpoint:
    """Tests for POST /api/v1/calculate."""

    def test_lower_and_upper(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate",
            json={"cabinet_type": "1:1", "parameters": {"width": 2300, "height": 1800}},
        )
        assert response.status_code == 200
        data = response.json()
        assert (data["lower"]["columns"], data["lower"]["rows"]) == (4, 3)
        assert (data["upper"]["columns"], data["upper"]["rows"]) == (5, 4)
        assert data["upper"]["total_cabinets"] == 20
        assert data["target_width_mm"] == 2300
        assert data["unit"] == "mm"
        assert data["summary"].startswith("Target: width 2300 mm")
        assert data["message"] is None

    def test_null_aspect_ratio_defaults_to_wide(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate",
            json={"cabinet_type": "16:9", "parameters": {"ar": None, "width": 3600}},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["target_aspect_ratio"] == pytest.approx(16 / 9)
        assert (data["lower"]["columns"], data["lower"]["rows"]) == (6, 6)
        assert (data["upper"]["columns"], data["upper"]["rows"]) == (6, 7)

    def test_missing_upper_message(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate",
            json={"cabinet_type": "16:9", "parameters": {"width": 3600, "height": 2025}},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["upper"] is None
        assert data["message"] == "No upper configuration (target may be very large)."

    def test_request_unit(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate",
            json={
                "cabinet_type": "1:1",
                "unit": "m",
                "parameters": {"width": 2.3, "height": 1.8},
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["unit"] == "m"
        assert data["target_width_mm"] == pytest.approx(2300)
        assert "Width 2 m, height 1.5 m" in data["summary"]

    def test_infeasible_diagonal(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate",
            json={"cabinet_type": "16:9", "parameters": {"height": 1000, "diagonal": 800}},
        )
        assert response.status_code == 422
        data = response.json()
        assert data["error"] == "Calculation failed"
        assert data["error_type"] == "calculation"
        assert data["details"] == [{"message": INFEASIBLE_DIAGONAL_MESSAGE}]

    def test_three_parameters(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate",
            json={
                "cabinet_type": "16:9",
                "parameters": {"ar": 1.5, "width": 3600, "height": 2025},
            },
        )
        assert response.status_code == 422
        messages = [d["message"] for d in response.json()["details"]]
        assert "Select exactly two parameters" in messages

    def test_non_positive_value(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate",
            json={"cabinet_type": "1:1", "parameters": {"width": 0, "height": 1800}},
        )
        assert response.status_code == 422
        assert response.json()["details"] == [{"message": "Width must be positive"}]

    def test_unknown_cabinet_rejected_by_schema(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate",
            json={"cabinet_type": "4:3", "parameters": {"width": 1, "height": 1}},
        )
        assert response.status_code == 422


class TestToolEndpoint:
    """Tests for POST /api/v1/tools/video_wall_calculate."""

    def test_result(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/tools/video_wall_calculate",
            json={
                "cabinet_type": "1:1",
                "unit": "mm",
                "param1": "width",
                "value1": 2300,
                "param2": "height",
                "value2": 1800,
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["error"] is None
        assert "Option 2 (Upper): 5 columns × 4 rows = 20 cabinets." in data["result"]

    def test_duplicate_parameters(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/tools/video_wall_calculate",
            json={
                "cabinet_type": "1:1",
                "unit": "mm",
                "param1": "width",
                "value1": 2300,
                "param2": "width",
                "value2": 1800,
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["result"] is None
        assert data["error"].startswith("param1 and param2 must be different")


class TestCatalogEndpoints:
    """Tests for catalog and unit endpoints."""

    def test_cabinets(self, client: TestClient) -> None:
        response = client.get("/api/v1/catalog/cabinets")
        assert response.status_code == 200
        cabinets = response.json()["cabinets"]
        assert [c["cabinet_type"] for c in cabinets] == ["16:9", "1:1"]
        assert cabinets[0]["height_mm"] == 337.5

    def test_presets(self, client: TestClient) -> None:
        response = client.get("/api/v1/catalog/presets")
        assert response.status_code == 200
        presets = response.json()["presets"]
        assert presets[0] == {"label": "16:9", "value": pytest.approx(16 / 9)}

    def test_convert(self, client: TestClient) -> None:
        response = client.get(
            "/api/v1/units/convert",
            params={"value": 12, "from_unit": "ft", "to_unit": "mm"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["converted"] == pytest.approx(3657.6)
        assert data["formatted"] == "3657.6 mm"

    def test_convert_unknown_unit(self, client: TestClient) -> None:
        response = client.get(
            "/api/v1/units/convert",
            params={"value": 1, "from_unit": "yd", "to_unit": "mm"},
        )
        assert response.status_code == 400
        data = response.json()
        assert data["error_type"] == "unknown_unit"
        assert data["details"]["available"] == ["mm", "m", "ft", "in"]


class TestRequestDocumentEndpoint:
    """Tests for POST /api/v1/calculate/request."""

    def test_valid_document(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate/request",
            json={
                "schema_version": "1.0",
                "cabinet_type": "1:1",
                "parameters": {"width": 2300, "height": 1800},
            },
        )
        assert response.status_code == 200
        assert response.json()["lower"]["columns"] == 4

    def test_schema_errors(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate/request",
            json={
                "cabinet_type": "16:9",
                "parameters": {"width": 3600, "height": 2025},
                "brightness": 800,
            },
        )
        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "validation"
        assert data["error"].startswith("Request validation failed:")
        assert [d["path"] for d in data["details"]] == ["brightness"]

    def test_infeasible_document(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate/request",
            json={"cabinet_type": "16:9", "parameters": {"height": 1000, "diagonal": 800}},
        )
        assert response.status_code == 422
        assert response.json()["error_type"] == "calculation"

import pytest

from shared.domain.result import Err

pytestmark = pytest.mark.integration


class TestHealthCheck:
    def test_health_check_returns_200(self, client, installed_repository):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "timestamp" in data
        assert "services" in data

    def test_health_check_reports_product_store(self, client, installed_repository):
        response = client.get("/health")
        products = response.json()["services"]["products"]
        assert products["status"] == "up"
        assert products["count"] == 2
        assert "response_time_ms" in products

    def test_health_check_returns_503_when_store_fails(
        self, client, installed_repository, monkeypatch
    ):
        monkeypatch.setattr(
            installed_repository,
            "search_products",
            lambda query: Err(RuntimeError("store offline")),
        )

        response = client.get("/health")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "unhealthy"
        assert data["services"]["products"] == {"status": "down"}


class TestOpenApiSchema:
    def test_schema_documents_products_endpoint(self, client):
        response = client.get("/api/schema/", HTTP_ACCEPT="application/vnd.oai.openapi+json")
        assert response.status_code == 200
        schema = response.json()
        parameters = schema["paths"]["/products"]["get"]["parameters"]
        assert any(p["name"] == "id" and p["in"] == "query" for p in parameters)

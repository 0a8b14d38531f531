"""Integration tests for the /products endpoint.

Requests go through URL routing and middleware; the app-level
repository is replaced by one holding the ``products`` fixture.

Covers:
- Listing and filtering by id.
- Error envelopes (400, 500).
- Repository wiring from PRODUCTS_SEED_FILE.
"""

from __future__ import annotations

import json

import pytest

from django.apps import apps

from modules.products.dtos import ProductQuery
from shared.domain.result import Err

pytestmark = pytest.mark.integration


# ===========================================================================
# LIST
# ===========================================================================


class TestProductList:
    def test_list_returns_every_product(self, api_client, installed_repository):
        response = api_client.get("/products")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "success"
        assert sorted(body["data"]) == ["1", "2"]
        assert body["data"]["2"] == {
            "id": 2,
            "description": "Product 2",
            "price": 200.0,
            "seller_id": 20,
        }

    def test_response_is_json(self, api_client, installed_repository):
        response = api_client.get("/products")
        assert response["Content-Type"].startswith("application/json")


# ===========================================================================
# FILTER BY ID
# ===========================================================================


class TestProductFilter:
    def test_filter_by_id(self, api_client, installed_repository):
        response = api_client.get("/products", {"id": "1"})

        assert response.status_code == 200
        assert list(response.json()["data"]) == ["1"]

    def test_unknown_id_is_success_with_empty_data(self, api_client, installed_repository):
        response = api_client.get("/products", {"id": "404"})

        assert response.status_code == 200
        assert response.json() == {"message": "success", "data": {}}

    def test_invalid_id_returns_400(self, api_client, installed_repository):
        response = api_client.get("/products", {"id": "abc"})

        assert response.status_code == 400
        assert response.json() == {"message": "invalid id", "status": "Bad Request"}


# ===========================================================================
# Repository failure
# ===========================================================================


class TestProductRepositoryFailure:
    def test_failure_returns_500(self, api_client, installed_repository, monkeypatch):
        monkeypatch.setattr(
            installed_repository,
            "search_products",
            lambda query: Err(RuntimeError("internal server error")),
        )

        response = api_client.get("/products", {"id": "1"})

        assert response.status_code == 500
        assert response.json() == {
            "message": "internal error",
            "status": "Internal Server Error",
        }


# ===========================================================================
# Wiring
# ===========================================================================


class TestRepositoryWiring:
    def test_ready_loads_seed_file(self, settings, monkeypatch, tmp_path):
        seed = tmp_path / "products.json"
        seed.write_text(
            json.dumps(
                [{"id": 7, "description": "Lamp", "price": 15.5, "seller_id": 3}]
            ),
            encoding="utf-8",
        )
        settings.PRODUCTS_SEED_FILE = str(seed)
        config = apps.get_app_config("products")
        monkeypatch.setattr(config, "repository", config.repository)

        config.ready()

        result = config.repository.search_products(ProductQuery())
        assert list(result.value) == [7]

    def test_ready_without_seed_file_gives_empty_store(self, settings, monkeypatch):
        settings.PRODUCTS_SEED_FILE = ""
        config = apps.get_app_config("products")
        monkeypatch.setattr(config, "repository", config.repository)

        config.ready()

        assert config.repository.search_products(ProductQuery()).value == {}

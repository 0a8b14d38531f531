import pytest

from django.apps import apps

from rest_framework.test import APIClient

from modules.products.models import Product, ProductAttributes
from modules.products.repositories import ProductsMap


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def products():
    """Two-product store keyed by id."""
    return {
        1: Product.compose(
            id=1,
            attributes=ProductAttributes(
                description="Product 1", price=100.0, seller_id=1
            ),
        ),
        2: Product.compose(
            id=2,
            attributes=ProductAttributes(
                description="Product 2", price=200.0, seller_id=20
            ),
        ),
    }


@pytest.fixture()
def installed_repository(monkeypatch, products):
    """Replace the app-level repository with one holding ``products``."""
    repository = ProductsMap(products)
    monkeypatch.setattr(apps.get_app_config("products"), "repository", repository)
    return repository

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from django.apps import AppConfig
from django.conf import settings

if TYPE_CHECKING:
    from modules.products.repositories import IProductRepository


class ProductsConfig(AppConfig):
    name = "modules.products"
    label = "products"

    repository: Optional[IProductRepository] = None

    def ready(self) -> None:
        from modules.products.repositories import ProductsMap
        from modules.products.seed import load_seed_products

        seed_file = settings.PRODUCTS_SEED_FILE
        products = load_seed_products(seed_file) if seed_file else {}
        self.repository = ProductsMap(products)

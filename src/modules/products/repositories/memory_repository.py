"""In-memory implementation of the Product repository.

Satisfies ``IProductRepository`` with a plain ``dict`` populated once at
construction.  The store is never mutated afterwards and every result is
a fresh ``dict``, so concurrent requests need no locking.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional

import structlog

from modules.products.dtos import ProductQuery
from modules.products.exceptions import InvalidProductStore
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository, SearchResult
from shared.domain.result import Ok

logger = structlog.get_logger(__name__)


class ProductsMap(IProductRepository):
    """Concrete Product repository backed by an in-memory mapping."""

    def __init__(self, products: Optional[Mapping[int, Product]] = None) -> None:
        store: Dict[int, Product] = dict(products or {})
        for key, product in store.items():
            if key != product.id:
                raise InvalidProductStore(
                    f"Store key {key} does not match product id {product.id}."
                )
        self._products = store
        logger.info("products.store_loaded", count=len(store))

    def __len__(self) -> int:
        return len(self._products)

    def get_by_id(self, id: int) -> Optional[Product]:
        return self._products.get(id)

    def search_products(self, query: ProductQuery) -> SearchResult:
        if query.is_empty:
            return Ok(dict(self._products))

        product = self.get_by_id(query.id)
        if product is None:
            return Ok({})
        return Ok({product.id: product})

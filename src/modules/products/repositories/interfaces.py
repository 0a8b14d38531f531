"""Product repository interface.

Extends ``IRepository[Product, int]`` with the search operation used
by the products endpoint.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Dict

from modules.core.repositories.interfaces import IRepository
from shared.domain.result import Result

if TYPE_CHECKING:
    from modules.products.dtos import ProductQuery
    from modules.products.models import Product


SearchResult = Result[Dict[int, "Product"]]


class IProductRepository(IRepository["Product", int]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def search_products(self, query: ProductQuery) -> SearchResult:
        """Return the products matching ``query`` keyed by id.

        An empty query matches every product.  A query for an id that is
        not stored yields ``Ok({})``, never an error.  ``Err`` is reserved
        for failures of the backing store.
        """

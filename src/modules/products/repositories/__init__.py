"""Product repositories package."""

from modules.products.repositories.interfaces import IProductRepository, SearchResult
from modules.products.repositories.memory_repository import ProductsMap

__all__ = ["IProductRepository", "ProductsMap", "SearchResult"]

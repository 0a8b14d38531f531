"""Seed data loading for the in-memory product store.

The seed file is a JSON list of product records::

    [
        {"id": 1, "description": "Product 1", "price": 100.0, "seller_id": 1},
        {"id": 2, "description": "Product 2", "price": 200.0, "seller_id": 20}
    ]
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Union

import structlog
from pydantic import ValidationError as PydanticValidationError

from modules.products.exceptions import ProductSeedError
from modules.products.models import Product

logger = structlog.get_logger(__name__)


def load_seed_products(path: Union[str, Path]) -> Dict[int, Product]:
    """Read ``path`` and return its products keyed by id.

    Raises:
        ProductSeedError: if the file cannot be read or parsed, a record is
            invalid, or two records share the same id.
    """
    path = Path(path)
    try:
        records = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ProductSeedError(f"Cannot read product seed file {path}: {exc}") from exc

    if not isinstance(records, list):
        raise ProductSeedError(f"Product seed file {path} must contain a JSON list.")

    products: Dict[int, Product] = {}
    for index, record in enumerate(records):
        try:
            product = Product.model_validate(record)
        except PydanticValidationError as exc:
            raise ProductSeedError(
                f"Invalid product at index {index} in {path}: {exc}"
            ) from exc
        if product.id in products:
            raise ProductSeedError(f"Duplicate product id {product.id} in {path}.")
        products[product.id] = product

    logger.info("products.seed_loaded", path=str(path), count=len(products))
    return products

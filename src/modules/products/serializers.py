"""Product DRF serializers for API output.

Prices are rendered as JSON numbers (``FloatField``), not as the
quoted strings DRF uses for decimals.
"""

from __future__ import annotations

from typing import Dict, Mapping

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.Serializer):
    """Read-only serializer for the Product resource."""

    id = serializers.IntegerField(read_only=True)
    description = serializers.CharField(read_only=True)
    price = serializers.FloatField(read_only=True)
    seller_id = serializers.IntegerField(read_only=True)


def serialize_products(products: Mapping[int, Product]) -> Dict[str, dict]:
    """Render ``products`` as a JSON object keyed by the string-encoded id."""
    return {
        str(product_id): ProductSerializer(product).data
        for product_id, product in sorted(products.items())
    }

"""Product domain entities.

Products live in an in-memory store and are immutable once built
(``frozen=True``).  ``ProductAttributes`` is the descriptive part of a
product, kept separate from the ``id`` so both halves can be composed.

Rules enforced on construction:
- ``id`` and ``seller_id`` are positive integers.
- ``price`` is a finite, non-negative number.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProductAttributes(BaseModel):
    """Descriptive fields of a product (everything except its key)."""

    model_config = ConfigDict(frozen=True)

    description: str = ""
    price: float = Field(ge=0, allow_inf_nan=False)
    seller_id: int = Field(gt=0)


class Product(ProductAttributes):
    """Product entity keyed by ``id``."""

    id: int = Field(gt=0)

    @classmethod
    def compose(cls, id: int, attributes: ProductAttributes) -> Product:
        """Build a product from its key and a set of attributes."""
        return cls(id=id, **attributes.model_dump())

    @property
    def attributes(self) -> ProductAttributes:
        return ProductAttributes(
            description=self.description,
            price=self.price,
            seller_id=self.seller_id,
        )

    def __str__(self) -> str:
        return f"{self.id} - {self.description}"

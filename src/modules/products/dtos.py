"""Product DTOs for the repository contract.

Framework-agnostic data transfer objects using Pydantic v2.
``ProductQuery`` is the contract between the API layer (Views) and
the repository.  DTOs are immutable (``frozen=True``).
"""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class ProductQuery(BaseModel):
    """Search criteria for products.

    ``id == 0`` means "no filter": the whole store matches.
    """

    model_config = ConfigDict(frozen=True)

    id: int = 0

    @property
    def is_empty(self) -> bool:
        return self.id == 0

    @classmethod
    def from_raw_id(cls, raw_id: Optional[str]) -> ProductQuery:
        """Build a query from the raw ``id`` query-string value.

        A missing or empty value yields the empty query.

        Raises:
            ValueError: if ``raw_id`` is not a signed 64-bit decimal integer.
        """
        if not raw_id:
            return cls()
        if not _INTEGER_PATTERN.fullmatch(raw_id):
            raise ValueError(f"'{raw_id}' is not an integer.")
        value = int(raw_id)
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise ValueError(f"'{raw_id}' is out of range.")
        return cls(id=value)

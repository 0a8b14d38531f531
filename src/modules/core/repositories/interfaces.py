"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T, K]``, the base abstract class that all
domain-specific repository interfaces extend.  Views depend on this
abstraction, never on the concrete storage behind it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K")


class IRepository(ABC, Generic[T, K]):
    """Base generic read-only repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``) and ``K`` its key type.
    """

    @abstractmethod
    def get_by_id(self, id: K) -> Optional[T]:
        """Retrieve an entity by its key, or ``None`` when absent."""

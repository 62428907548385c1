"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T, K]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K")


class IRepository(ABC, Generic[T, K]):
    """Base generic repository contract.

    Type parameter ``T`` is the immutable value the repository hands
    out (e.g. ``ProductDTO``) and ``K`` the type of its identifier.
    """

    @abstractmethod
    def get_by_id(self, id: K) -> Optional[T]:
        """Retrieve an entity by its primary key, or ``None`` if absent."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Insert the entity when it has no id, update it otherwise."""

    @abstractmethod
    def delete(self, entity: T) -> None:
        """Remove a previously retrieved entity."""

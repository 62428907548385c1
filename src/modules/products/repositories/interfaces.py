"""Product repository interface.

Extends ``IRepository[ProductDTO, ProductId]`` with the two scans the
catalog listing needs: a category-equality paged scan and a
distinct-category scan.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository
from modules.products.dtos import ProductDTO, ProductId

if TYPE_CHECKING:
    from modules.core.pagination import Page, PageRequest


class IProductRepository(IRepository[ProductDTO, ProductId]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def find_by_category(
        self, category: str, page_request: PageRequest
    ) -> Page[ProductDTO]:
        """Return one page of products whose category equals ``category``."""

    @abstractmethod
    def find_distinct_categories(self) -> List[str]:
        """Return every category in use, once each, in ascending order."""

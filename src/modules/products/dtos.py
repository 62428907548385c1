"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views), the Service
layer and the repository.  DTOs are immutable (``frozen=True``).

- ``ProductDTO``: the product value handed in and out of the repository.
- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for a full replacement of category and name.
- ``ProductListQueryDTO``: input for the category listing.
- ``ProductPageDTO``: one page of a category listing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from modules.core.pagination import Page
    from modules.products.models import Product

ProductId = Union[UUID, str]


# ---------------------------------------------------------------------------
# Domain value
# ---------------------------------------------------------------------------


class ProductDTO(BaseModel):
    """Immutable product value.

    ``id`` is ``None`` until the repository has persisted the product.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[UUID] = None
    category: str
    name: str

    @classmethod
    def from_entity(cls, product: Product) -> ProductDTO:
        """Build a DTO from a Product model instance."""
        return cls(id=product.id, category=product.category, name=product.name)


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.  Both fields are required."""

    model_config = ConfigDict(frozen=True)

    category: str
    name: str


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    ``category`` and ``name`` replace the stored values as given;
    there is no partial-update form.
    """

    model_config = ConfigDict(frozen=True)

    id: ProductId
    category: str
    name: str


class ProductListQueryDTO(BaseModel):
    """Immutable DTO for category listing requests.

    ``page`` is zero-based.  Range checks on ``page`` and ``size`` are
    the service's job so that they surface as ``InvalidArgument``.
    """

    model_config = ConfigDict(frozen=True)

    category: str
    page: int = 0
    size: int


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ProductPageDTO(BaseModel):
    """Immutable DTO for one page of a category listing."""

    model_config = ConfigDict(frozen=True)

    items: List[ProductDTO]
    total_pages: int
    total_elements: int
    page: int

    @classmethod
    def from_page(cls, page: Page[ProductDTO]) -> ProductPageDTO:
        """Build a page DTO from a repository ``Page``."""
        return cls(
            items=list(page.items),
            total_pages=page.total_pages,
            total_elements=page.total_elements,
            page=page.page,
        )

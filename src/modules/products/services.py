"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Rules enforced here:
- Reads, updates and deletes of an unknown id raise ``ProductNotFound``
  before any write reaches the repository.
- Updates replace ``category`` and ``name`` wholesale; values are never
  merged with the stored ones.
- Listing requires ``0 < size <= max_page_size`` and ``page >= 0`` and
  always sorts by category.

The service holds no state besides the repository and the page size bound,
and imports nothing from Django; failures from the repository propagate
untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.core.exceptions import InvalidArgument
from modules.core.pagination import PageRequest
from modules.products.dtos import ProductDTO, ProductPageDTO
from modules.products.exceptions import ProductNotFound

if TYPE_CHECKING:
    from modules.products.dtos import (
        CreateProductDTO,
        ProductId,
        ProductListQueryDTO,
        UpdateProductDTO,
    )
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

LIST_ORDER_BY = "category"
DEFAULT_MAX_PAGE_SIZE = 100


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(
        self,
        repository: IProductRepository,
        max_page_size: int = DEFAULT_MAX_PAGE_SIZE,
    ) -> None:
        self._repo = repository
        self._max_page_size = max_page_size

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: CreateProductDTO) -> ProductDTO:
        """Persist a new product; the repository assigns its id."""
        product = self._repo.save(ProductDTO(category=dto.category, name=dto.name))
        logger.info(
            "product.created", product_id=str(product.id), category=product.category
        )
        return product

    def update_product(self, dto: UpdateProductDTO) -> ProductDTO:
        """Replace category and name of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        current = self.get_product(dto.id)
        product = self._repo.save(
            current.model_copy(update={"category": dto.category, "name": dto.name})
        )
        logger.info("product.updated", product_id=str(product.id))
        return product

    def delete_product(self, id: ProductId) -> None:
        """Delete an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self.get_product(id)
        self._repo.delete(product)
        logger.info("product.deleted", product_id=str(product.id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_product(self, id: ProductId) -> ProductDTO:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if product is None:
            raise ProductNotFound(id)
        return product

    def list_by_category(self, query: ProductListQueryDTO) -> ProductPageDTO:
        """Return one zero-based page of the products in ``query.category``.

        Raises:
            InvalidArgument: if ``size`` is not positive or above the
                configured maximum, or ``page`` is negative.
        """
        if query.size <= 0:
            raise InvalidArgument("size", "Page size must be greater than zero.")
        if query.size > self._max_page_size:
            raise InvalidArgument(
                "size", f"Page size must not exceed {self._max_page_size}."
            )
        if query.page < 0:
            raise InvalidArgument("page", "Page index must not be negative.")

        page = self._repo.find_by_category(
            query.category,
            PageRequest(page=query.page, size=query.size, order_by=LIST_ORDER_BY),
        )
        logger.debug(
            "product.listed",
            category=query.category,
            page=query.page,
            total_elements=page.total_elements,
        )
        return ProductPageDTO.from_page(page)

    def list_categories(self) -> List[str]:
        """Return the distinct categories in ascending order."""
        return self._repo.find_distinct_categories()

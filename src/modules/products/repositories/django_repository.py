"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising, and the Service Layer decides how to translate a
missing entity.  Any other database error propagates unchanged.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.core.pagination import Page, PageRequest
from modules.products.dtos import ProductDTO, ProductId
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: ProductId) -> Optional[ProductDTO]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            row = Product.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None
        return ProductDTO.from_entity(row) if row else None

    @transaction.atomic
    def save(self, entity: ProductDTO) -> ProductDTO:
        """Insert the product when it has no id, otherwise update it in place."""
        if entity.id is None:
            row = Product.objects.create(category=entity.category, name=entity.name)
        else:
            row, _ = Product.objects.update_or_create(
                id=entity.id,
                defaults={"category": entity.category, "name": entity.name},
            )
        logger.info("product.saved", product_id=str(row.id), category=row.category)
        return ProductDTO.from_entity(row)

    @transaction.atomic
    def delete(self, entity: ProductDTO) -> None:
        """Hard-delete the row backing a previously retrieved product."""
        Product.objects.filter(id=entity.id).delete()
        logger.info("product.row_deleted", product_id=str(entity.id))

    def find_by_category(
        self, category: str, page_request: PageRequest
    ) -> Page[ProductDTO]:
        """Exact, case-sensitive category match, sorted by ``page_request.order_by``.

        ``id`` breaks ties so that consecutive pages never overlap.
        """
        queryset = Product.objects.filter(category=category).order_by(
            page_request.order_by, "id"
        )
        total = queryset.count()
        start = page_request.offset
        rows = queryset[start : start + page_request.size] if start < total else []
        return Page(
            items=[ProductDTO.from_entity(row) for row in rows],
            total_elements=total,
            page=page_request.page,
            size=page_request.size,
        )

    def find_distinct_categories(self) -> List[str]:
        return list(
            Product.objects.order_by("category")
            .values_list("category", flat=True)
            .distinct()
        )

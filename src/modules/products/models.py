"""Product table.

Rows never leave the repository: ``ProductDjangoRepository`` converts
them into immutable ``ProductDTO`` values before handing them to the
service layer.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Product(BaseModel):
    """Catalog product row.  ``category`` is the listing filter and sort key."""

    category = models.CharField(max_length=255)
    name = models.CharField(max_length=255)

    class Meta:
        db_table = "products"
        ordering = ["category"]
        indexes = [
            models.Index(fields=["category"], name="products_category_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.category} - {self.name}"

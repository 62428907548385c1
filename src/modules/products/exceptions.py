"""Product domain exceptions.

Raised by the Service Layer when a request cannot be satisfied.
The API exception handler translates them into HTTP responses
through their base condition (see ``modules.core.exceptions``).
"""

from __future__ import annotations

from typing import Any

from modules.core.exceptions import NotFound


class ProductNotFound(NotFound):
    """The requested product does not exist."""

    def __init__(self, product_id: Any) -> None:
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found.")

"""Paging value objects used between services and repositories.

Pages are zero-based.  ``Page`` mirrors the metadata a paged scan
reports so that services never have to re-count rows.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, List, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page index, page size and ascending sort key."""

    page: int
    size: int
    order_by: str

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    items: List[T]
    total_elements: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        """Number of pages of ``size`` needed for all elements (0 when empty)."""
        return math.ceil(self.total_elements / self.size)

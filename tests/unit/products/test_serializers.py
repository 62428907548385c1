"""Unit tests for the Product output serializers."""

from __future__ import annotations

from uuid import uuid4

import pytest

from modules.products.dtos import ProductDTO, ProductPageDTO
from modules.products.serializers import (
    ProductInputSerializer,
    ProductPageSerializer,
    ProductSerializer,
)

pytestmark = pytest.mark.unit


class TestProductSerializer:
    def test_renders_dto(self):
        product_id = uuid4()
        data = ProductSerializer(
            ProductDTO(id=product_id, category="tools", name="Hammer")
        ).data
        assert data == {"id": str(product_id), "category": "tools", "name": "Hammer"}


class TestProductPageSerializer:
    def test_renders_page(self):
        items = [ProductDTO(id=uuid4(), category="c", name=f"n{i}") for i in range(2)]
        page = ProductPageDTO(items=items, total_pages=1, total_elements=2, page=0)

        data = ProductPageSerializer(page).data

        assert [item["name"] for item in data["items"]] == ["n0", "n1"]
        assert data["total_pages"] == 1
        assert data["total_elements"] == 2
        assert data["page"] == 0


class TestProductInputSerializer:
    def test_requires_category_and_name(self):
        serializer = ProductInputSerializer(data={"name": "n"})
        assert not serializer.is_valid()
        assert "category" in serializer.errors
